"""Configuration system for PyIterate.
Supports TOML configuration files with project-level and user-level settings.
"""
from __future__ import annotations
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from pyiterate.logging import get_logger
CONFIG_FILES = [
    "pyiterate.toml",
    ".pyiterate.toml",
    "pyproject.toml",
]
@dataclass
class ResolverConfig:
    """Configuration for iterator resolution.
    ``supports_iteration_capability`` left as None means "ask the
    environment probe".
    """
    supports_iteration_capability: bool | None = None
    variant: str = "standard"
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "supports_iteration_capability": self.supports_iteration_capability,
            "variant": self.variant,
        }
@dataclass
class OutputConfig:
    """Configuration for command line output."""
    format: str = "text"
    color: bool = True
    verbose: bool = False
    limit: int | None = None
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "format": self.format,
            "color": self.color,
            "verbose": self.verbose,
            "limit": self.limit,
        }
@dataclass
class PyIterateConfig:
    """Main configuration for PyIterate."""
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    project_root: Path | None = None
    config_file: Path | None = None
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "resolver": self.resolver.to_dict(),
            "output": self.output.to_dict(),
        }
    def to_toml(self) -> str:
        """Generate TOML configuration string."""
        lines = ["[tool.pyiterate]", ""]
        for section, values in self.to_dict().items():
            lines.append(f"[tool.pyiterate.{section}]")
            for key, value in values.items():
                if value is None:
                    lines.append(f"# {key} =")
                elif isinstance(value, bool):
                    lines.append(f"{key} = {str(value).lower()}")
                elif isinstance(value, str):
                    lines.append(f'{key} = "{value}"')
                else:
                    lines.append(f"{key} = {value}")
            lines.append("")
        return "\n".join(lines)
def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file by walking up directory tree."""
    if start_dir is None:
        start_dir = Path.cwd()
    current = start_dir.resolve()
    while current != current.parent:
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        current = current.parent
    home = Path.home()
    for config_name in [".pyiterate.toml", "pyiterate.toml"]:
        config_path = home / config_name
        if config_path.exists():
            return config_path
    return None
def load_config(
    config_path: Path | None = None,
    start_dir: Path | None = None,
) -> PyIterateConfig:
    """Load configuration from file or use defaults.
    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching for config
    Returns:
        Loaded configuration
    """
    config = PyIterateConfig()
    if config_path is None:
        config_path = find_config_file(start_dir)
    if config_path is None or not config_path.exists():
        return config
    config.config_file = config_path
    config.project_root = config_path.parent
    logger = get_logger()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Failed to parse config file {config_path}: {e}")
        return config
    if config_path.name == "pyproject.toml":
        section = data.get("tool", {}).get("pyiterate", {})
    else:
        section = data.get("tool", {}).get("pyiterate", data)
    _apply_config(config, section)
    logger.debug(f"loaded configuration from {config_path}", category="config")
    return config
def _apply_config(config: PyIterateConfig, data: dict[str, Any]) -> None:
    """Apply configuration data to config object."""
    if "resolver" in data:
        res_data = data["resolver"]
        if "supports_iteration_capability" in res_data:
            config.resolver.supports_iteration_capability = bool(
                res_data["supports_iteration_capability"]
            )
        if "variant" in res_data:
            config.resolver.variant = str(res_data["variant"])
    if "output" in data:
        out_data = data["output"]
        for key in ["format", "color", "verbose"]:
            if key in out_data:
                setattr(config.output, key, out_data[key])
        if "limit" in out_data:
            config.output.limit = int(out_data["limit"])
def generate_default_config() -> str:
    """Generate default configuration file content."""
    config = PyIterateConfig()
    return config.to_toml()
def init_config(directory: Path | None = None) -> Path:
    """Initialize a new configuration file in the given directory.
    Args:
        directory: Directory to create config in (default: current)
    Returns:
        Path to created config file
    """
    if directory is None:
        directory = Path.cwd()
    config_path = directory / "pyiterate.toml"
    if config_path.exists():
        raise FileExistsError(f"Config file already exists: {config_path}")
    content = generate_default_config()
    config_path.write_text(content, encoding="utf-8")
    return config_path
__all__ = [
    "PyIterateConfig",
    "ResolverConfig",
    "OutputConfig",
    "load_config",
    "find_config_file",
    "generate_default_config",
    "init_config",
]
