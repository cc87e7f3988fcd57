"""Core module for PyIterate.
Provides:
- Code point segmentation for strings (surrogate-pair aware)
- Shape classification (capability, string, array-like, map-like, set-like)
- Iterator objects speaking the next() → IteratorResult protocol
"""

from pyiterate.core.iterators import (
    ArrayIterator,
    IteratorObject,
    IteratorResult,
    IteratorState,
    SequenceProtocolIterator,
    StopIterationIterator,
    StringIterator,
    drain,
    step,
)
from pyiterate.core.shapes import (
    LEGACY_ITERATOR_KEY,
    Shape,
    classify,
    get_capability,
)
from pyiterate.core.strings import (
    advance_string_index,
    code_points,
    code_units,
    is_high_surrogate,
    is_low_surrogate,
)

__all__ = [
    "ArrayIterator",
    "IteratorObject",
    "IteratorResult",
    "IteratorState",
    "SequenceProtocolIterator",
    "StopIterationIterator",
    "StringIterator",
    "drain",
    "step",
    "LEGACY_ITERATOR_KEY",
    "Shape",
    "classify",
    "get_capability",
    "advance_string_index",
    "code_points",
    "code_units",
    "is_high_surrogate",
    "is_low_surrogate",
]
