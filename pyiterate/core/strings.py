"""Code point segmentation for strings.

Python strings are sequences of code points, but text that crossed a UTF-16
boundary (JSON escapes, ``surrogatepass`` decoding, Windows APIs) can still
carry surrogate code units as separate characters. The helpers here walk such
a string the way a UTF-16 aware iterator does:

- a high surrogate immediately followed by a low surrogate is one element
- every other character, including unpaired surrogates, is one element

Nothing here validates well-formedness; malformed input is segmented, never
rejected.
"""
from __future__ import annotations
from collections.abc import Iterator
HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF
ASTRAL_BASE = 0x10000
def is_high_surrogate(char: str) -> bool:
    """Return True if ``char`` is a UTF-16 high (lead) surrogate."""
    return HIGH_SURROGATE_MIN <= ord(char) <= HIGH_SURROGATE_MAX
def is_low_surrogate(char: str) -> bool:
    """Return True if ``char`` is a UTF-16 low (trail) surrogate."""
    return LOW_SURROGATE_MIN <= ord(char) <= LOW_SURROGATE_MAX
def advance_string_index(text: str, index: int) -> int:
    """
    Return the index just past the code point starting at ``index``.
    Indices at or beyond the end advance by one, so callers can detect
    exhaustion by comparing the result against ``len(text)``.
    """
    length = len(text)
    if index + 1 >= length:
        return index + 1
    if not is_high_surrogate(text[index]):
        return index + 1
    if not is_low_surrogate(text[index + 1]):
        return index + 1
    return index + 2
def code_points(text: str) -> Iterator[str]:
    """Lazily yield the code point slices of ``text``."""
    index = 0
    length = len(text)
    while index < length:
        next_index = advance_string_index(text, index)
        yield text[index:next_index]
        index = next_index
def code_units(text: str) -> str:
    """
    Expand astral characters into surrogate pairs.
    The result is the UTF-16 code unit view of ``text`` with one Python
    character per code unit; ``code_points(code_units(s))`` groups the pairs
    back together.
    """
    units = []
    for char in text:
        point = ord(char)
        if point < ASTRAL_BASE:
            units.append(char)
            continue
        point -= ASTRAL_BASE
        units.append(chr(HIGH_SURROGATE_MIN + (point >> 10)))
        units.append(chr(LOW_SURROGATE_MIN + (point & 0x3FF)))
    return "".join(units)
__all__ = [
    "is_high_surrogate",
    "is_low_surrogate",
    "advance_string_index",
    "code_points",
    "code_units",
]
