"""
PyIterate Iterator Objects
Every iterator the resolver synthesizes speaks one protocol, so callers can
drain any of them the same way:
    next()      → IteratorResult(value, done)
    __next__    → value, or StopIteration once done
Supported Iterators:
    - ArrayIterator             (sequences, argument tuples, sparse array-likes)
    - StringIterator            (code points, surrogate-pair aware)
    - StopIterationIterator     (any native Python iterator: mapping entries,
                                 set members, generators, enum classes)
    - SequenceProtocolIterator  (__getitem__ from 0 until IndexError)
Once an iterator reports done it keeps reporting done.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Mapping, Set
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any
from .shapes import array_length, element_at
from .strings import advance_string_index
class IteratorState(Enum):
    """State of an iterator object."""
    ACTIVE = auto()
    EXHAUSTED = auto()
@dataclass(frozen=True)
class IteratorResult:
    """Result of calling next() on an iterator."""
    value: Any
    done: bool
    @property
    def has_value(self) -> bool:
        return not self.done
DONE = IteratorResult(value=None, done=True)
class IteratorObject(ABC):
    """
    Base class for resolved iterators.
    Subclasses implement ``_advance``; this class keeps the exhausted state
    and bridges to Python's iterator protocol.
    """
    state: IteratorState = IteratorState.ACTIVE
    @abstractmethod
    def _advance(self) -> IteratorResult:
        """Produce the next result without consulting the exhausted state."""
    def next(self) -> IteratorResult:
        """Produce the next element as an ``IteratorResult``."""
        if self.state is IteratorState.EXHAUSTED:
            return DONE
        result = self._advance()
        if result.done:
            self.state = IteratorState.EXHAUSTED
        return result
    @property
    def exhausted(self) -> bool:
        return self.state is IteratorState.EXHAUSTED
    def __iter__(self) -> IteratorObject:
        return self
    def __next__(self) -> Any:
        result = self.next()
        if result.done:
            raise StopIteration
        return result.value
@dataclass(eq=False)
class ArrayIterator(IteratorObject):
    """
    Iterator over an array-like, by index.
    The length is read again on every step, so appending to a list while
    iterating extends the iteration. Missing slots yield None.
    """
    arraylike: Any
    index: int = field(default=0)
    state: IteratorState = field(default=IteratorState.ACTIVE, repr=False)
    def _advance(self) -> IteratorResult:
        if self.index >= array_length(self.arraylike):
            return DONE
        value = element_at(self.arraylike, self.index)
        self.index += 1
        return IteratorResult(value=value, done=False)
@dataclass(eq=False)
class StringIterator(IteratorObject):
    """
    Iterator over the code points of a string.
    Surrogate pairs stored as two characters come out as one two-character
    slice; unpaired surrogates come out alone.
    """
    text: str
    index: int = field(default=0)
    state: IteratorState = field(default=IteratorState.ACTIVE, repr=False)
    def _advance(self) -> IteratorResult:
        if self.index >= len(self.text):
            return DONE
        next_index = advance_string_index(self.text, self.index)
        value = self.text[self.index : next_index]
        self.index = next_index
        return IteratorResult(value=value, done=False)
@dataclass(eq=False)
class StopIterationIterator(IteratorObject):
    """
    Adapter from a Python iterator (StopIteration at the end) to the
    ``next() → IteratorResult`` protocol.
    """
    source: Iterator[Any]
    transform: Callable[[Any], Any] | None = field(default=None)
    state: IteratorState = field(default=IteratorState.ACTIVE, repr=False)
    def _advance(self) -> IteratorResult:
        try:
            value = next(self.source)
        except StopIteration:
            return DONE
        if self.transform is not None:
            value = self.transform(value)
        return IteratorResult(value=value, done=False)
@dataclass(eq=False)
class SequenceProtocolIterator(IteratorObject):
    """
    Iterator for objects that only define ``__getitem__``.
    Indexes from 0 and stops at the first IndexError, like the fallback
    Python's own iter() uses; ``__len__`` is ignored.
    """
    target: Any
    index: int = field(default=0)
    state: IteratorState = field(default=IteratorState.ACTIVE, repr=False)
    def _advance(self) -> IteratorResult:
        try:
            value = self.target[self.index]
        except (IndexError, StopIteration):
            return DONE
        self.index += 1
        return IteratorResult(value=value, done=False)
def array_iterator(arraylike: Any) -> ArrayIterator:
    """Create an iterator over an array-like."""
    return ArrayIterator(arraylike=arraylike)
def string_iterator(text: Any) -> StringIterator:
    """Create a code point iterator over a string or boxed string."""
    return StringIterator(text=str(text))
def entries_iterator(mapping: Mapping) -> StopIterationIterator:
    """Create an iterator yielding ``(key, value)`` tuples of a mapping."""
    return StopIterationIterator(source=iter(mapping.items()), transform=tuple)
def values_iterator(members: Set) -> StopIterationIterator:
    """Create an iterator over the members of a set-like collection."""
    return StopIterationIterator(source=iter(members))
def native_iterator(iterable: Any) -> StopIterationIterator:
    """Wrap the interpreter's own iterator for ``iterable``."""
    return StopIterationIterator(source=iter(iterable))
def sequence_protocol_iterator(target: Any) -> SequenceProtocolIterator:
    """Create an iterator for a ``__getitem__``-only object."""
    return SequenceProtocolIterator(target=target)
def step(iterator: Any) -> IteratorResult:
    """
    Advance any iterator by one element.
    Accepts resolved iterators, objects whose ``next()`` returns something
    with ``value``/``done`` attributes, and plain Python iterators.
    Raises:
        TypeError: if ``iterator`` has neither ``next()`` nor ``__next__``
    """
    if isinstance(iterator, IteratorObject):
        return iterator.next()
    advance = getattr(iterator, "next", None)
    if callable(advance):
        result = advance()
        if isinstance(result, IteratorResult):
            return result
        return IteratorResult(
            value=getattr(result, "value", None),
            done=bool(getattr(result, "done", False)),
        )
    if not callable(getattr(type(iterator), "__next__", None)):
        raise TypeError(f"{type(iterator).__name__!r} object is not an iterator")
    try:
        value = next(iterator)
    except StopIteration:
        return DONE
    return IteratorResult(value=value, done=False)
def drain(iterator: Any, limit: int | None = None) -> list[Any]:
    """
    Collect values from an iterator until it reports done.
    Stops early after ``limit`` values when a limit is given.
    """
    values = []
    while limit is None or len(values) < limit:
        result = step(iterator)
        if result.done:
            break
        values.append(result.value)
    return values
__all__ = [
    "IteratorState",
    "IteratorResult",
    "IteratorObject",
    "ArrayIterator",
    "StringIterator",
    "StopIterationIterator",
    "SequenceProtocolIterator",
    "DONE",
    "array_iterator",
    "string_iterator",
    "entries_iterator",
    "values_iterator",
    "native_iterator",
    "sequence_protocol_iterator",
    "step",
    "drain",
]
