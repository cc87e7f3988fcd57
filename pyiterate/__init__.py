"""PyIterate: iterator resolution for arbitrary Python values.
PyIterate answers one question for any value: "is this iterable, and if so,
give me an iterator". The resolved iterators speak a uniform
``next() → IteratorResult(value, done)`` protocol and cover:
- Strings, per code point (surrogate pairs stay together)
- Sequences and sparse array-likes (holes yield None)
- Mappings, as (key, value) pairs
- Set-like collections
- Anything declaring its own ``__iter__``, which always wins
Example:
    >>> from pyiterate import resolve, drain
    >>> drain(resolve([1, 2, 3]))
    [1, 2, 3]
    >>> resolve(None) is None
    True
"""

from pyiterate.api import DrainReport, inspect_iteration, is_iterable
from pyiterate.core.iterators import (
    IteratorObject,
    IteratorResult,
    StopIterationIterator,
    drain,
    step,
)
from pyiterate.core.shapes import Shape, classify
from pyiterate.environment import EnvironmentCapabilities, detect_environment
from pyiterate.resolver import (
    Resolver,
    ResolverOptions,
    get_resolver,
    resolve,
    set_resolver,
)

__version__ = "0.1.0"
__author__ = "PyIterate Team"
from pyiterate.config import PyIterateConfig, load_config
from pyiterate.logging import LogLevel, configure_logging, get_logger

__all__ = [
    "resolve",
    "Resolver",
    "ResolverOptions",
    "get_resolver",
    "set_resolver",
    "IteratorObject",
    "IteratorResult",
    "StopIterationIterator",
    "drain",
    "step",
    "Shape",
    "classify",
    "is_iterable",
    "inspect_iteration",
    "DrainReport",
    "EnvironmentCapabilities",
    "detect_environment",
    "PyIterateConfig",
    "load_config",
    "configure_logging",
    "get_logger",
    "LogLevel",
]
