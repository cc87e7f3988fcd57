"""Shape classification for iterator resolution.

A value is matched against an ordered chain of shapes; the first match
decides how it is iterated:

    CAPABILITY         the value declares its own iteration method
    STRING             str / UserString, iterated per code point
    ARRAY_LIKE         sequences and objects with a numeric ``length``
    MAP_LIKE           mappings, iterated as (key, value) pairs
    SET_LIKE           set-like collections, iterated per member
    SEQUENCE_PROTOCOL  ``__getitem__`` without ``__iter__``
    NATIVE             other standard library iterables
    NONE               not iterable

The symbol-keyed capability is ``__iter__`` defined by a class outside the
standard library. Standard library containers iterate through their shape
instead, which is what lets a dict yield pairs rather than keys. When the
environment reports no symbol-keyed support, the string-keyed
``"@@iterator"`` attribute is consulted instead.
"""
from __future__ import annotations
import math
import os
import sys
import sysconfig
from collections import UserString
from collections.abc import Callable, Mapping, Sequence, Set
from enum import Enum, auto
from functools import lru_cache
from numbers import Real
from typing import Any
LEGACY_ITERATOR_KEY = "@@iterator"
MAX_LENGTH = 2**53 - 1
_STDLIB_MODULES = frozenset(sys.stdlib_module_names) | {"builtins"}
_HEAPTYPE = 1 << 9
_STDLIB_DIRS = tuple(
    os.path.realpath(sysconfig.get_paths()[key]) for key in ("stdlib", "platstdlib")
)
_SITE_DIRS = frozenset({"site-packages", "dist-packages"})
class Shape(Enum):
    """Iteration shapes, in resolution order."""
    CAPABILITY = auto()
    STRING = auto()
    ARRAY_LIKE = auto()
    MAP_LIKE = auto()
    SET_LIKE = auto()
    SEQUENCE_PROTOCOL = auto()
    NATIVE = auto()
    NONE = auto()
def find_slot_owner(value: Any, name: str) -> type | None:
    """Return the first class in ``type(value).__mro__`` defining ``name``."""
    for cls in type(value).__mro__:
        if name in vars(cls):
            return cls
    return None
def find_iter_owner(value: Any) -> type | None:
    """Return the class that supplies ``__iter__`` for ``value``."""
    return find_slot_owner(value, "__iter__")
@lru_cache(maxsize=256)
def _is_stdlib_file(filename: str) -> bool:
    path = os.path.realpath(filename)
    if _SITE_DIRS.intersection(path.split(os.sep)):
        return False
    return any(path.startswith(root + os.sep) for root in _STDLIB_DIRS)
def _is_stdlib_module(name: str) -> bool:
    if name == "builtins" or name in sys.builtin_module_names:
        return True
    module = sys.modules.get(name)
    if module is None:
        return False
    spec = getattr(module, "__spec__", None)
    if spec is not None and spec.origin in ("built-in", "frozen"):
        return True
    filename = getattr(module, "__file__", None)
    return bool(filename) and _is_stdlib_file(filename)
def is_stdlib_type(cls: type) -> bool:
    """
    Return True if ``cls`` is defined by the Python standard library.
    Static (C level) types are trusted by module name. Any other class must
    be reachable under its ``__qualname__`` from a module loaded from the
    standard library directory, so a user class that merely sets
    ``__module__ = "queue"`` does not qualify.
    """
    module_name = getattr(cls, "__module__", None) or ""
    if not cls.__flags__ & _HEAPTYPE:
        return module_name.partition(".")[0] in _STDLIB_MODULES
    if not _is_stdlib_module(module_name):
        return False
    target: Any = sys.modules[module_name]
    for part in cls.__qualname__.split("."):
        target = getattr(target, part, None)
    return target is cls
def _bind_slot(value: Any, owner: type, name: str) -> Any:
    """Bind a class-level slot to ``value`` the way the interpreter does."""
    descriptor = vars(owner)[name]
    getter = getattr(type(descriptor), "__get__", None)
    if getter is None:
        return descriptor
    return getter(descriptor, value, type(value))
def _legacy_capability(value: Any) -> Callable[[], Any] | None:
    method = getattr(value, LEGACY_ITERATOR_KEY, None)
    return method if callable(method) else None
def get_capability(
    value: Any, supports_iteration_capability: bool = True
) -> Callable[[], Any] | None:
    """
    Return the custom iteration capability of ``value`` bound and ready to
    call, or None when the value does not carry a callable one.
    """
    if value is None:
        return None
    if not supports_iteration_capability:
        return _legacy_capability(value)
    owner = find_iter_owner(value)
    if owner is None or is_stdlib_type(owner):
        return None
    method = _bind_slot(value, owner, "__iter__")
    return method if callable(method) else None
def declines_iteration(value: Any) -> bool:
    """
    Return True if a non-library class sets ``__iter__`` to something that
    is not callable, which Python treats as "not iterable" (``__iter__ = None``).
    """
    owner = find_iter_owner(value)
    if owner is None or is_stdlib_type(owner):
        return False
    return not callable(_bind_slot(value, owner, "__iter__"))
def is_string(value: Any) -> bool:
    """Check for a string or a boxed string."""
    return isinstance(value, (str, UserString))
def _numeric_length(value: Any) -> int | None:
    """
    Read ``length`` as an element count: truncated toward zero, clamped to
    ``0..MAX_LENGTH``. Booleans, NaN and non-numbers are not lengths.
    """
    length = getattr(value, "length", None)
    if isinstance(length, bool) or not isinstance(length, Real):
        return None
    if math.isnan(length):
        return None
    if math.isinf(length):
        return MAX_LENGTH if length > 0 else 0
    return min(MAX_LENGTH, max(0, int(length)))
def is_array_like_object(value: Any) -> bool:
    """
    Check for an argument-list style object: numeric ``length`` plus
    ``__getitem__``, without being a mapping.
    """
    if isinstance(value, Mapping):
        return False
    if find_slot_owner(value, "__getitem__") is None:
        return False
    return _numeric_length(value) is not None
def is_array_like(value: Any) -> bool:
    """Check for a non-string sequence or an array-like object."""
    if is_string(value):
        return False
    return isinstance(value, Sequence) or is_array_like_object(value)
def is_map(value: Any) -> bool:
    return isinstance(value, Mapping)
def is_set(value: Any) -> bool:
    return isinstance(value, Set)
def is_sequence_protocol(value: Any) -> bool:
    """Check for the legacy ``__getitem__``-only iteration protocol."""
    if find_iter_owner(value) is not None:
        return False
    owner = find_slot_owner(value, "__getitem__")
    if owner is None:
        return False
    return callable(_bind_slot(value, owner, "__getitem__"))
def is_native_iterable(value: Any) -> bool:
    """Check for a standard library type with a callable ``__iter__``."""
    owner = find_iter_owner(value)
    if owner is None or not is_stdlib_type(owner):
        return False
    return callable(_bind_slot(value, owner, "__iter__"))
def array_length(arraylike: Any) -> int:
    """Return the current length of an array-like."""
    if isinstance(arraylike, Sequence):
        return len(arraylike)
    length = _numeric_length(arraylike)
    return 0 if length is None else length
def element_at(arraylike: Any, index: int) -> Any:
    """Return the element at ``index``, or None for a missing slot."""
    try:
        return arraylike[index]
    except LookupError:
        return None
def classify(value: Any, supports_iteration_capability: bool = True) -> Shape:
    """Return the shape that decides how ``value`` is iterated."""
    if value is None:
        return Shape.NONE
    if get_capability(value, supports_iteration_capability) is not None:
        return Shape.CAPABILITY
    if supports_iteration_capability and declines_iteration(value):
        return Shape.NONE
    if is_string(value):
        return Shape.STRING
    if is_array_like(value):
        return Shape.ARRAY_LIKE
    if is_map(value):
        return Shape.MAP_LIKE
    if is_set(value):
        return Shape.SET_LIKE
    if is_sequence_protocol(value):
        return Shape.SEQUENCE_PROTOCOL
    if supports_iteration_capability and is_native_iterable(value):
        return Shape.NATIVE
    return Shape.NONE
__all__ = [
    "LEGACY_ITERATOR_KEY",
    "Shape",
    "find_slot_owner",
    "find_iter_owner",
    "is_stdlib_type",
    "get_capability",
    "declines_iteration",
    "is_string",
    "is_array_like_object",
    "is_array_like",
    "is_map",
    "is_set",
    "is_sequence_protocol",
    "is_native_iterable",
    "array_length",
    "element_at",
    "classify",
]
