"""Environment-specialized resolver.
Assumes keyed iteration support unconditionally and skips the environment
probe. Observable behaviour matches ``pyiterate.resolve``.
"""
from __future__ import annotations
from typing import Any
from pyiterate.resolver import Resolver
_resolver = Resolver.for_variant("native")
def resolve(value: Any) -> Any | None:
    """Resolve an iterator for ``value``, or None if it is not iterable."""
    return _resolver.resolve(value)
__all__ = ["resolve"]
