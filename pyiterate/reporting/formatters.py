"""Output formatters for PyIterate drain reports."""
from __future__ import annotations
import json
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any
from pyiterate.core.strings import code_units
from pyiterate.environment import EnvironmentCapabilities
if TYPE_CHECKING:
    from pyiterate.api import DrainReport
def inspect_value(value: Any, max_length: int = 80) -> str:
    """
    Short, unambiguous rendering of a value.
    Unpaired surrogates and other unprintable characters come out as
    escapes (``'\\ud83d'``), which plain printing would mangle.
    """
    try:
        text = repr(value)
    except Exception as e:
        text = f"<{type(value).__name__} (repr failed: {type(e).__name__})>"
    if len(text) > max_length:
        text = text[: max_length - 3] + "..."
    return text
def describe_code_units(text: str) -> str:
    """Render the UTF-16 code units of ``text``, e.g. ``U+D83D U+DCA9``."""
    return " ".join(f"U+{ord(unit):04X}" for unit in code_units(text))
def describe_element(value: Any) -> str:
    """Render an element, adding code units for strings."""
    if isinstance(value, str) and value:
        return f"{inspect_value(value)}  [{describe_code_units(value)}]"
    return inspect_value(value)
class Formatter(ABC):
    """Base class for output formatters."""
    name: str = "base"
    @abstractmethod
    def format(self, report: DrainReport) -> str:
        """Format a drain report."""
    @abstractmethod
    def format_environment(self, capabilities: EnvironmentCapabilities) -> str:
        """Format environment probe results."""
class TextFormatter(Formatter):
    """Plain text formatter."""
    name = "text"
    def __init__(self, show_code_units: bool = True):
        self.show_code_units = show_code_units
    def format(self, report: DrainReport) -> str:
        lines = []
        lines.append(f"value:    {inspect_value(report.value)}")
        lines.append(f"shape:    {report.shape.name}")
        lines.append(f"variant:  {report.variant}")
        if not report.iterable:
            lines.append("result:   not iterable")
            return "\n".join(lines)
        suffix = " (truncated)" if report.truncated else ""
        lines.append(f"elements: {report.count}{suffix}")
        render = describe_element if self.show_code_units else inspect_value
        for index, element in enumerate(report.elements):
            lines.append(f"  [{index}] {render(element)}")
        return "\n".join(lines)
    def format_environment(self, capabilities: EnvironmentCapabilities) -> str:
        lines = []
        for key, value in capabilities.to_dict().items():
            if isinstance(value, bool):
                value = "yes" if value else "no"
            lines.append(f"{key.replace('_', ' ')}: {value}")
        return "\n".join(lines)
class JSONFormatter(Formatter):
    """JSON formatter for machine-readable output."""
    name = "json"
    def __init__(self, indent: int = 2):
        self.indent = indent
    def format(self, report: DrainReport) -> str:
        data = {
            "value": inspect_value(report.value),
            "shape": report.shape.name,
            "variant": report.variant,
            "iterable": report.iterable,
            "count": report.count,
            "truncated": report.truncated,
            "elements": [self._format_element(e) for e in report.elements],
        }
        return json.dumps(data, indent=self.indent)
    def format_environment(self, capabilities: EnvironmentCapabilities) -> str:
        return json.dumps(capabilities.to_dict(), indent=self.indent)
    def _format_element(self, element: Any) -> Any:
        if isinstance(element, float) and not math.isfinite(element):
            return inspect_value(element)
        if element is None or isinstance(element, (bool, int, float)):
            return element
        if isinstance(element, str):
            return {"text": inspect_value(element), "code_units": describe_code_units(element)}
        return inspect_value(element)
FORMATTERS: dict[str, type[Formatter]] = {
    "text": TextFormatter,
    "json": JSONFormatter,
}
def get_formatter(format_type: str = "text", **kwargs: Any) -> Formatter:
    """Return a formatter instance by name (unknown names fall back to text)."""
    formatter_class = FORMATTERS.get(format_type.lower(), TextFormatter)
    return formatter_class(**kwargs)
def format_report(report: DrainReport, format_type: str = "text", **kwargs: Any) -> str:
    """
    Format a drain report.
    Args:
        report: The report to format
        format_type: One of "text", "json"
        **kwargs: Additional formatter options
    Returns:
        Formatted string
    """
    return get_formatter(format_type, **kwargs).format(report)
