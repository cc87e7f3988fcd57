"""Runtime capability probes.
The resolver's capability step depends on whether the interpreter dispatches
iteration through a keyed protocol method. The probes run once per process;
the result is cached and handed to resolvers as explicit options.
"""
from __future__ import annotations
import platform
import sys
from dataclasses import dataclass
from typing import Any
@dataclass(frozen=True)
class EnvironmentCapabilities:
    """Feature support reported by the running interpreter."""
    iteration_capability: bool
    big_integers: bool
    implementation: str = ""
    python_version: str = ""
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "iteration_capability": self.iteration_capability,
            "big_integers": self.big_integers,
            "implementation": self.implementation,
            "python_version": self.python_version,
        }
def has_iteration_capability() -> bool:
    """Check that iteration dispatches through a class-level ``__iter__``."""
    class Probe:
        def __iter__(self):
            return iter(("probe",))
    return list(Probe()) == ["probe"]
def has_big_integers() -> bool:
    """Check that integers grow past the machine word instead of wrapping."""
    value = sys.maxsize + 1
    return isinstance(value, int) and value > sys.maxsize
_capabilities: EnvironmentCapabilities | None = None
def detect_environment(refresh: bool = False) -> EnvironmentCapabilities:
    """Run the probes once and return the cached result."""
    global _capabilities
    if _capabilities is None or refresh:
        _capabilities = EnvironmentCapabilities(
            iteration_capability=has_iteration_capability(),
            big_integers=has_big_integers(),
            implementation=platform.python_implementation(),
            python_version=platform.python_version(),
        )
    return _capabilities
def set_environment(capabilities: EnvironmentCapabilities | None) -> None:
    """Override (or with None, forget) the cached probe result."""
    global _capabilities
    _capabilities = capabilities
__all__ = [
    "EnvironmentCapabilities",
    "has_iteration_capability",
    "has_big_integers",
    "detect_environment",
    "set_environment",
]
