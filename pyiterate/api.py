"""Public API for PyIterate."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
from pyiterate.core.iterators import drain
from pyiterate.core.shapes import Shape
from pyiterate.resolver import Resolver, get_resolver
@dataclass
class DrainReport:
    """Outcome of resolving and draining one value."""
    value: Any
    shape: Shape
    iterable: bool
    elements: list[Any] = field(default_factory=list)
    truncated: bool = False
    variant: str = "standard"
    @property
    def count(self) -> int:
        return len(self.elements)
def is_iterable(value: Any, resolver: Resolver | None = None) -> bool:
    """
    Check whether ``value`` would resolve to an iterator.
    Classification only: a custom capability is not invoked.
    """
    resolver = resolver or get_resolver()
    return resolver.classify(value) is not Shape.NONE
def inspect_iteration(
    value: Any,
    *,
    limit: int | None = None,
    resolver: Resolver | None = None,
) -> DrainReport:
    """
    Resolve ``value`` and drain the iterator into a report.
    Args:
        value: Any value
        limit: Stop after this many elements (the report is then marked
               truncated if more were available)
        resolver: Resolver to use (default: the process-wide one)
    Returns:
        DrainReport with the shape, the elements and whether output was cut
    """
    resolver = resolver or get_resolver()
    shape = resolver.classify(value)
    iterator = resolver.resolve(value)
    report = DrainReport(
        value=value,
        shape=shape,
        iterable=iterator is not None,
        variant=resolver.variant,
    )
    if iterator is None:
        return report
    if limit is None:
        report.elements = drain(iterator)
        return report
    report.elements = drain(iterator, limit=limit + 1)
    if len(report.elements) > limit:
        report.elements = report.elements[:limit]
        report.truncated = True
    return report
__all__ = [
    "DrainReport",
    "is_iterable",
    "inspect_iteration",
]
