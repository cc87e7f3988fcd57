"""
Example values for each iteration shape.
Run with ``python examples/resolve_values.py`` to print a drain report
for every value below.
"""

from collections import UserString

from pyiterate import inspect_iteration
from pyiterate.reporting import format_report


class Countdown:
    """Declares its own iteration, which wins over every other shape."""

    def __init__(self, start: int):
        self.start = start

    def __iter__(self):
        yield from range(self.start, 0, -1)


class Arguments:
    """Argument-list style object: a length and indexed slots."""

    def __init__(self, *values):
        self._values = dict(enumerate(values))
        self.length = len(values) + 1

    def __getitem__(self, index):
        return self._values[index]


class Squares:
    """Only ``__getitem__``: indexed until IndexError."""

    def __getitem__(self, index):
        if index >= 4:
            raise IndexError(index)
        return index * index


VALUES = [
    "a💩z",
    "\ud83dX",
    UserString("boxed"),
    [1, 2, 3],
    Arguments("x", "y"),
    {"one": 1, "two": 2},
    frozenset({7}),
    Squares(),
    Countdown(3),
    (c for c in "gen"),
    42,
    None,
]


def main():
    for value in VALUES:
        print(format_report(inspect_iteration(value, limit=10)))
        print()


if __name__ == "__main__":
    main()
