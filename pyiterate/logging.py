"""Logging framework for PyIterate.
Provides leveled, optionally coloured logging for the resolver, the config
loader and the command line.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any, TextIO


class LogLevel(IntEnum):
    """Log levels for PyIterate."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3
    TRACE = 4


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    GRAY = "\033[90m"


def supports_color(stream: TextIO) -> bool:
    """Check if the stream supports ANSI colors."""
    if "NO_COLOR" in os.environ:
        return False
    if not hasattr(stream, "isatty") or not stream.isatty():
        return False
    if sys.platform == "win32":
        return bool(os.environ.get("TERM") or "ANSICON" in os.environ)
    return True


@dataclass
class LogEntry:
    """A log entry with metadata."""

    level: LogLevel
    message: str
    category: str = "general"
    timestamp: float = field(default_factory=time.time)
    context: dict[str, Any] = field(default_factory=dict)

    def format(self, color: bool = True, show_time: bool = True) -> str:
        """Format the log entry for display."""
        parts = []
        if show_time:
            stamp = time.strftime("%H:%M:%S", time.localtime(self.timestamp))
            parts.append(f"{Colors.GRAY}{stamp}{Colors.RESET}" if color else stamp)
        level_str = self._level_str(color)
        if level_str:
            parts.append(level_str)
        if self.category != "general":
            if color:
                parts.append(f"{Colors.CYAN}[{self.category}]{Colors.RESET}")
            else:
                parts.append(f"[{self.category}]")
        parts.append(self.message)
        return " ".join(parts)

    def _level_str(self, color: bool) -> str:
        """Get level indicator string."""
        if self.level == LogLevel.QUIET:
            return ""
        indicators = {
            LogLevel.NORMAL: ("•", Colors.WHITE),
            LogLevel.VERBOSE: ("→", Colors.BLUE),
            LogLevel.DEBUG: ("⚙", Colors.MAGENTA),
            LogLevel.TRACE: ("⋯", Colors.GRAY),
        }
        char, col = indicators.get(self.level, ("", ""))
        if color:
            return f"{col}{char}{Colors.RESET}"
        return char


class PyIterateLogger:
    """Main logger for PyIterate.

    Entries below the configured level are dropped before formatting, so
    trace calls on the resolution path cost one comparison when disabled.
    Only the most recent ``max_entries`` entries are kept for
    ``get_entries``.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.NORMAL,
        color: bool = True,
        stream: TextIO | None = None,
        file_path: Path | None = None,
        max_entries: int = 1000,
    ):
        self.level = level
        self._stream = stream or sys.stderr
        self._color = color and supports_color(self._stream)
        self._file_handle: TextIO | None = None
        self._entries: deque[LogEntry] = deque(maxlen=max_entries)
        if file_path is not None:
            self.open_file(file_path)

    def set_level(self, level: LogLevel) -> None:
        """Set the logging level."""
        self.level = level

    def is_enabled(self, level: LogLevel) -> bool:
        """Check if a message at this level would be logged."""
        return level <= self.level

    def _emit(self, entry: LogEntry) -> None:
        """Record and write a log entry."""
        self._entries.append(entry)
        self._stream.write(entry.format(color=self._color) + "\n")
        self._stream.flush()
        if self._file_handle:
            self._file_handle.write(entry.format(color=False) + "\n")
            self._file_handle.flush()

    def log(
        self,
        level: LogLevel,
        message: str,
        category: str = "general",
        **context: Any,
    ) -> None:
        """Log a message at the specified level."""
        if not self.is_enabled(level):
            return
        self._emit(LogEntry(level=level, message=message, category=category, context=context))

    def info(self, message: str, **context: Any) -> None:
        """Log an info message."""
        self.log(LogLevel.NORMAL, message, **context)

    def verbose(self, message: str, **context: Any) -> None:
        """Log a verbose message."""
        self.log(LogLevel.VERBOSE, message, **context)

    def debug(self, message: str, **context: Any) -> None:
        """Log a debug message."""
        self.log(LogLevel.DEBUG, message, **context)

    def trace(self, message: str, **context: Any) -> None:
        """Log a trace message."""
        self.log(LogLevel.TRACE, message, **context)

    def warning(self, message: str) -> None:
        """Log a warning message (shown unless quiet)."""
        if not self.is_enabled(LogLevel.NORMAL):
            return
        self._entries.append(LogEntry(level=LogLevel.NORMAL, message=message, category="warning"))
        if self._color:
            self._stream.write(f"{Colors.YELLOW}⚠{Colors.RESET} {message}\n")
        else:
            self._stream.write(f"⚠ {message}\n")
        self._stream.flush()

    def error(self, message: str) -> None:
        """Log an error message (always shown)."""
        self._entries.append(LogEntry(level=LogLevel.QUIET, message=message, category="error"))
        if self._color:
            self._stream.write(f"{Colors.RED}✗{Colors.RESET} {message}\n")
        else:
            self._stream.write(f"✗ {message}\n")
        self._stream.flush()

    def get_entries(
        self,
        level: LogLevel | None = None,
        category: str | None = None,
    ) -> list[LogEntry]:
        """Get logged entries, optionally filtered."""
        entries = list(self._entries)
        if level is not None:
            entries = [e for e in entries if e.level == level]
        if category is not None:
            entries = [e for e in entries if e.category == category]
        return entries

    def open_file(self, path: Path) -> None:
        """Open a file for logging."""
        self._file_handle = open(path, "w", encoding="utf-8")

    def close(self) -> None:
        """Close any open file handles."""
        if self._file_handle:
            self._file_handle.close()
            self._file_handle = None


_logger: PyIterateLogger | None = None


def get_logger() -> PyIterateLogger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = PyIterateLogger()
    return _logger


def set_logger(logger: PyIterateLogger) -> None:
    """Set the global logger instance."""
    global _logger
    _logger = logger


def configure_logging(
    level: LogLevel = LogLevel.NORMAL,
    color: bool = True,
    stream: TextIO | None = None,
    file_path: Path | None = None,
) -> PyIterateLogger:
    """Configure and return the global logger."""
    global _logger
    if _logger is not None:
        _logger.close()
    _logger = PyIterateLogger(level=level, color=color, stream=stream, file_path=file_path)
    return _logger


class PythonLoggingBridge(logging.Handler):
    """Bridge the PyIterate logger to Python's logging module."""

    def __init__(self, target: PyIterateLogger | None = None):
        super().__init__()
        self._target = target
        self._level_map = {
            logging.DEBUG: LogLevel.DEBUG,
            logging.INFO: LogLevel.NORMAL,
        }

    @property
    def target(self) -> PyIterateLogger:
        return self._target or get_logger()

    def emit(self, record: logging.LogRecord) -> None:
        message = self.format(record)
        if record.levelno >= logging.ERROR:
            self.target.error(message)
        elif record.levelno >= logging.WARNING:
            self.target.warning(message)
        else:
            level = self._level_map.get(record.levelno, LogLevel.TRACE)
            self.target.log(level, message, category="python")


def setup_python_logging(level: int = logging.INFO) -> logging.Logger:
    """Route the ``pyiterate`` stdlib logger into the PyIterate logger."""
    logger = logging.getLogger("pyiterate")
    logger.setLevel(level)
    if not any(isinstance(h, PythonLoggingBridge) for h in logger.handlers):
        logger.addHandler(PythonLoggingBridge())
    return logger


__all__ = [
    "LogLevel",
    "LogEntry",
    "Colors",
    "PyIterateLogger",
    "get_logger",
    "set_logger",
    "configure_logging",
    "setup_python_logging",
    "PythonLoggingBridge",
    "supports_color",
]
