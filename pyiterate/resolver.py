"""Iterator resolution.

``resolve(value)`` returns an iterator object for ``value`` if and only if
the value is iterable, and None otherwise. It never raises on its own account:
the only exceptions that escape are the ones raised by the value's own
iteration method or accessors.

Example:
    >>> from pyiterate import resolve
    >>> from pyiterate.core.iterators import drain
    >>> drain(resolve("a\\ud83d\\udca9z"))
    ['a', '\\ud83d\\udca9', 'z']
    >>> drain(resolve({1: "a", 2: "b"}))
    [(1, 'a'), (2, 'b')]
    >>> resolve(42) is None
    True
"""
from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from pyiterate.core.iterators import (
    array_iterator,
    entries_iterator,
    native_iterator,
    sequence_protocol_iterator,
    string_iterator,
    values_iterator,
)
from pyiterate.core.shapes import Shape, classify, get_capability
from pyiterate.environment import detect_environment
from pyiterate.logging import LogLevel, get_logger
if TYPE_CHECKING:
    from pyiterate.config import PyIterateConfig
VARIANTS = ("standard", "native")
_BUILDERS: dict[Shape, Callable[[Any], Any]] = {
    Shape.STRING: string_iterator,
    Shape.ARRAY_LIKE: array_iterator,
    Shape.MAP_LIKE: entries_iterator,
    Shape.SET_LIKE: values_iterator,
    Shape.SEQUENCE_PROTOCOL: sequence_protocol_iterator,
    Shape.NATIVE: native_iterator,
}
@dataclass(frozen=True)
class ResolverOptions:
    """Feature flags a resolver is built with."""
    supports_iteration_capability: bool = True
    @classmethod
    def from_environment(cls) -> ResolverOptions:
        """Build options from the cached environment probe."""
        capabilities = detect_environment()
        return cls(supports_iteration_capability=capabilities.iteration_capability)
class Resolver:
    """Resolves iterator objects for arbitrary values.

    The resolver holds no state besides its options; every call builds a
    fresh, independent iterator.
    """

    def __init__(self, options: ResolverOptions | None = None, variant: str = "standard"):
        if variant not in VARIANTS:
            raise ValueError(f"Unknown resolver variant: {variant!r}")
        self.options = options if options is not None else ResolverOptions.from_environment()
        self.variant = variant

    @classmethod
    def for_variant(cls, name: str) -> Resolver:
        """Build the generic ("standard") or specialized ("native") resolver.

        The native variant assumes keyed iteration support without probing.
        """
        if name == "native":
            return cls(ResolverOptions(supports_iteration_capability=True), variant="native")
        return cls(variant=name)

    @classmethod
    def from_config(cls, config: PyIterateConfig) -> Resolver:
        """Build a resolver from loaded configuration."""
        settings = config.resolver
        if settings.variant == "native":
            return cls.for_variant("native")
        if settings.supports_iteration_capability is None:
            return cls(variant=settings.variant)
        options = ResolverOptions(
            supports_iteration_capability=settings.supports_iteration_capability
        )
        return cls(options, variant=settings.variant)

    def classify(self, value: Any) -> Shape:
        """Return the shape that decides how ``value`` is iterated."""
        return classify(value, self.options.supports_iteration_capability)

    def resolve(self, value: Any) -> Any | None:
        """Return an iterator for ``value``, or None if it is not iterable.

        A custom capability is invoked and its result returned unchecked,
        whatever it is.
        """
        supports = self.options.supports_iteration_capability
        shape = classify(value, supports)
        logger = get_logger()
        if logger.is_enabled(LogLevel.TRACE):
            logger.trace(
                f"{type(value).__name__} resolved as {shape.name} ({self.variant})",
                category="resolve",
            )
        if shape is Shape.CAPABILITY:
            return get_capability(value, supports)()
        builder = _BUILDERS.get(shape)
        if builder is None:
            return None
        return builder(value)

    __call__ = resolve

    def __repr__(self) -> str:
        return f"Resolver(variant={self.variant!r}, options={self.options!r})"


_default_resolver: Resolver | None = None


def get_resolver() -> Resolver:
    """Get the process-wide default resolver, building it on first use."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = Resolver()
    return _default_resolver


def set_resolver(resolver: Resolver | None) -> None:
    """Replace (or with None, reset) the default resolver."""
    global _default_resolver
    _default_resolver = resolver


def resolve(value: Any) -> Any | None:
    """Resolve an iterator for ``value`` with the default resolver."""
    return get_resolver().resolve(value)


__all__ = [
    "VARIANTS",
    "ResolverOptions",
    "Resolver",
    "get_resolver",
    "set_resolver",
    "resolve",
]
