"""
Behavioural tests for iterator resolution.

Every value is resolved with the variant selected by
PYITERATE_TEST_VARIANT and drained; both variants must pass.
"""

import enum
import importlib
import math
import re
from collections import OrderedDict, UserDict, UserString
from collections.abc import Mapping
from types import MappingProxyType

import pytest

import pyiterate
from pyiterate.core.iterators import IteratorObject, drain
from pyiterate.core.shapes import LEGACY_ITERATOR_KEY, Shape
from pyiterate.native import resolve as native_resolve
from pyiterate.resolver import (
    Resolver,
    ResolverOptions,
    get_resolver,
    resolve as standard_resolve,
    set_resolver,
)
from pyiterate.testing.strategies import SparseArray

FAKE_VALUES = ["fake", "iterator", "scary"]


def with_fake_iterator(base, *args, resolve):
    """Instantiate a subclass of ``base`` whose ``__iter__`` yields FAKE_VALUES."""
    fake_type = type(
        f"Fake{base.__name__.title()}",
        (base,),
        {"__iter__": lambda self: resolve(FAKE_VALUES), "__module__": __name__},
    )
    return fake_type(*args)


def get_arguments(*args):
    return args


get_dynamic_arguments = lambda *args: args


class TestStrings:
    """Strings iterate per code point."""

    @pytest.mark.parametrize("value", ["", UserString("")])
    def test_empty_string_yields_nothing(self, iterate, value):
        assert iterate(value) == []

    @pytest.mark.parametrize("value", ["foo", UserString("foo")])
    def test_yields_characters(self, iterate, value):
        assert iterate(value) == ["f", "o", "o"]

    @pytest.mark.parametrize("value", ["a💩z", UserString("a💩z")])
    def test_emoji_is_one_code_point(self, iterate, value):
        assert iterate(value) == ["a", "💩", "z"]

    @pytest.mark.parametrize("value", ["a\ud83d\udca9z", UserString("a\ud83d\udca9z")])
    def test_utf16_surrogate_pair_stays_together(self, iterate, value):
        assert iterate(value) == ["a", "\ud83d\udca9", "z"]

    def test_lone_high_surrogate_followed_by_character(self, iterate):
        assert iterate("\ud83dX") == ["\ud83d", "X"]

    def test_lone_high_surrogate_at_end(self, iterate):
        assert iterate("ab\ud83d") == ["a", "b", "\ud83d"]

    def test_lone_low_surrogate(self, iterate):
        assert iterate("\udca9a") == ["\udca9", "a"]

    def test_reversed_pair_is_not_combined(self, iterate):
        assert iterate("\udca9\ud83d") == ["\udca9", "\ud83d"]

    @pytest.mark.parametrize("base", [str, UserString])
    def test_fake_iterator_wins(self, resolve, base):
        value = with_fake_iterator(base, "abc", resolve=resolve)
        assert drain(resolve(value)) == FAKE_VALUES


class TestArrays:
    """Sequences and array-likes iterate by index."""

    def test_empty_list_yields_nothing(self, iterate):
        assert iterate([]) == []

    def test_list(self, iterate):
        assert iterate([1, 2]) == [1, 2]

    def test_sparse_array_does_not_skip_holes(self, iterate):
        sparse = SparseArray(length=3, slots={0: 1, 2: 3})
        assert iterate(sparse) == [1, None, 3]

    def test_trailing_holes_count(self, iterate):
        assert iterate(SparseArray(length=4, slots={1: "x"})) == [None, "x", None, None]

    def test_tuple_range_and_bytes(self, iterate):
        assert iterate((1, 2)) == [1, 2]
        assert iterate(range(3)) == [0, 1, 2]
        assert iterate(b"ab") == [97, 98]

    def test_length_is_reread_each_step(self, resolve):
        items = [1, 2]
        iterator = resolve(items)
        assert iterator.next().value == 1
        items.append(3)
        assert drain(iterator) == [2, 3]

    def test_fake_iterator_wins(self, resolve):
        value = with_fake_iterator(list, [1, 2, 3], resolve=resolve)
        assert drain(resolve(value)) == FAKE_VALUES

    def test_subclass_without_override_uses_elements(self, iterate):
        class Row(list):
            pass

        assert iterate(Row([4, 5])) == [4, 5]

    def test_float_length_counts_elements(self, iterate):
        class FloatArgs:
            length = 3.0

            def __getitem__(self, index):
                return {0: "a", 1: "b", 2: "c"}[index]

        assert iterate(FloatArgs()) == ["a", "b", "c"]

    def test_fractional_length_is_truncated(self, iterate):
        assert iterate(SparseArray(length=2.9, slots={0: "x"})) == ["x", None]

    def test_accessor_errors_propagate_from_step(self, resolve):
        class Broken:
            length = 2

            def __getitem__(self, index):
                raise RuntimeError(f"bad at {index}")

        iterator = resolve(Broken())
        with pytest.raises(RuntimeError, match="bad at 0"):
            iterator.next()


class TestArguments:
    """Positional argument tuples behave like arrays."""

    @pytest.mark.parametrize("factory", [get_arguments, get_dynamic_arguments])
    def test_empty_arguments_yield_nothing(self, iterate, factory):
        assert iterate(factory()) == []

    @pytest.mark.parametrize("factory", [get_arguments, get_dynamic_arguments])
    def test_arguments_yield_all_args(self, iterate, factory):
        assert iterate(factory(1, 2, 3)) == [1, 2, 3]

    @pytest.mark.parametrize("factory", [get_arguments, get_dynamic_arguments])
    def test_fake_iterator_wins(self, resolve, factory):
        value = with_fake_iterator(tuple, factory(1, 2, 3), resolve=resolve)
        assert drain(resolve(value)) == FAKE_VALUES


NON_ITERABLES = [
    None,
    True,
    False,
    object(),
    re.compile("a", re.IGNORECASE),
    lambda: None,
    len,
    Ellipsis,
    2**100,
    0,
]

NUMBERS = [0, -0.0, math.nan, math.inf, 42, 1 + 2j]


class TestNonIterables:
    """Values that are not iterable resolve to None without raising."""

    @pytest.mark.parametrize("value", NON_ITERABLES + NUMBERS)
    def test_resolves_to_none(self, resolve, value):
        assert resolve(value) is None

    def test_classes_are_not_iterable(self, resolve):
        assert resolve(list) is None
        assert resolve(dict) is None

    @pytest.mark.parametrize(
        "base,args",
        [
            (int, (42,)),
            (int, (2**100,)),
            (float, (math.nan,)),
            (float, (math.inf,)),
            (object, ()),
        ],
    )
    def test_fake_iterator_makes_value_iterable(self, resolve, base, args):
        value = with_fake_iterator(base, *args, resolve=resolve)
        assert drain(resolve(value)) == FAKE_VALUES


class TestMaps:
    """Mappings yield (key, value) pairs in insertion order."""

    def test_empty_map_yields_nothing(self, iterate):
        assert iterate({}) == []

    def test_yields_entries(self, iterate):
        entries = [(1, "a"), (2, "b"), (3, "c")]
        assert iterate(dict(entries)) == entries

    def test_insertion_order_not_key_order(self, iterate):
        assert iterate({3: "c", 1: "a"}) == [(3, "c"), (1, "a")]

    @pytest.mark.parametrize("factory", [OrderedDict, UserDict, MappingProxyType])
    def test_library_mappings(self, iterate, factory):
        assert iterate(factory({"x": 1, "y": 2})) == [("x", 1), ("y", 2)]

    def test_fake_iterator_wins(self, resolve):
        value = with_fake_iterator(dict, {1: "a"}, resolve=resolve)
        assert drain(resolve(value)) == FAKE_VALUES

    def test_user_mapping_iter_is_a_capability(self, resolve):
        class Registry(Mapping):
            def __init__(self, data):
                self._data = data

            def __getitem__(self, key):
                return self._data[key]

            def __iter__(self):
                return iter(self._data)

            def __len__(self):
                return len(self._data)

        iterator = resolve(Registry({"a": 1, "b": 2}))
        assert list(iterator) == ["a", "b"]


class TestSets:
    """Set-likes yield each member once."""

    def test_empty_set_yields_nothing(self, iterate):
        assert iterate(set()) == []
        assert iterate(frozenset()) == []

    def test_yields_members(self, iterate):
        assert iterate({1, 2, 3}) == [1, 2, 3]

    def test_ordered_set_like_keeps_insertion_order(self, iterate):
        assert iterate(dict.fromkeys(["b", "a", "c"]).keys()) == ["b", "a", "c"]

    def test_fake_iterator_wins(self, resolve):
        value = with_fake_iterator(set, {1, 2, 3}, resolve=resolve)
        assert drain(resolve(value)) == FAKE_VALUES


class TestCapability:
    """A declared iteration method takes precedence and is not validated."""

    def test_capability_exception_propagates(self, resolve):
        class Exploding:
            def __iter__(self):
                raise ValueError("no iteration today")

        with pytest.raises(ValueError, match="no iteration today"):
            resolve(Exploding())

    def test_malformed_result_is_returned_as_is(self, resolve):
        class Odd:
            def __iter__(self):
                return 42

        assert resolve(Odd()) == 42

    def test_generator_capability_is_returned_raw(self, resolve):
        class Countdown:
            def __iter__(self):
                yield from (3, 2, 1)

        iterator = resolve(Countdown())
        assert not isinstance(iterator, IteratorObject)
        assert drain(iterator) == [3, 2, 1]

    def test_iter_none_declares_not_iterable(self, resolve):
        class Opaque(list):
            __iter__ = None

        assert resolve(Opaque([1, 2])) is None

    def test_instance_attribute_is_not_a_capability(self, resolve):
        class Plain:
            pass

        plain = Plain()
        plain.__iter__ = lambda: iter([1])
        assert resolve(plain) is None

    def test_resolved_iterator_resolves_to_itself(self, resolve):
        iterator = resolve([1])
        assert resolve(iterator) is iterator

    @pytest.mark.parametrize("module", ["queue", "calendar"])
    def test_capability_in_class_named_after_library_module(self, resolve, module):
        importlib.import_module(module)
        shadow = type(
            "Shadow",
            (list,),
            {"__iter__": lambda self: iter(["x"]), "__module__": module},
        )
        assert drain(resolve(shadow([1]))) == ["x"]


class TestSequenceProtocol:
    """Objects with only __getitem__ iterate until IndexError."""

    def test_old_style_sequence(self, iterate):
        class OldStyleSequence:
            def __init__(self, *items):
                self._items = list(items)

            def __getitem__(self, index):
                return self._items[index]

        assert iterate(OldStyleSequence(10, 20, 30)) == [10, 20, 30]

    def test_len_does_not_bound_iteration(self, iterate):
        class Seq:
            def __len__(self):
                return 3

            def __getitem__(self, index):
                if index >= 5:
                    raise IndexError(index)
                return index

        assert iterate(Seq()) == [0, 1, 2, 3, 4]


class TestNativeIterables:
    """Other standard library iterables are adapted to the same protocol."""

    def test_generator(self, iterate):
        assert iterate(x * 2 for x in range(3)) == [0, 2, 4]

    def test_enum_class(self, iterate):
        class Color(enum.Enum):
            RED = 1
            GREEN = 2

        assert iterate(Color) == [Color.RED, Color.GREEN]

    def test_dict_values_and_iterators(self, iterate):
        assert iterate({"a": 1, "b": 2}.values()) == [1, 2]
        assert iterate(iter([5, 6])) == [5, 6]


class TestLegacyCapability:
    """Without keyed iteration support, only "@@iterator" is a capability."""

    @pytest.fixture
    def legacy(self):
        return Resolver(ResolverOptions(supports_iteration_capability=False))

    def test_string_keyed_capability(self, legacy):
        class Shimmed:
            pass

        shimmed = Shimmed()
        setattr(shimmed, LEGACY_ITERATOR_KEY, lambda: legacy.resolve(FAKE_VALUES))
        assert drain(legacy.resolve(shimmed)) == FAKE_VALUES

    def test_dunder_iter_is_ignored(self, legacy):
        class Loud(list):
            def __iter__(self):
                return iter(["ignored"])

        assert drain(legacy.resolve(Loud([1, 2]))) == [1, 2]

    def test_shapes_still_resolve(self, legacy):
        assert drain(legacy.resolve("a💩")) == ["a", "💩"]
        assert drain(legacy.resolve({1: "a"})) == [(1, "a")]
        assert drain(legacy.resolve(range(2))) == [0, 1]

    def test_iter_only_values_are_not_iterable(self, legacy):
        class Countdown:
            def __iter__(self):
                yield 1

        assert legacy.resolve(Countdown()) is None
        assert legacy.resolve(x for x in "ab") is None

    def test_standard_resolver_ignores_string_key(self, resolve):
        class Shimmed:
            pass

        shimmed = Shimmed()
        setattr(shimmed, LEGACY_ITERATOR_KEY, lambda: resolve(FAKE_VALUES))
        assert resolve(shimmed) is None


class TestIdempotence:
    @pytest.mark.parametrize(
        "value",
        ["a💩z", [1, None, 3], {1: "a", 2: "b"}, frozenset({1, 2})],
    )
    def test_two_resolutions_are_independent(self, resolve, value):
        first = resolve(value)
        second = resolve(value)
        assert first is not second
        assert first.next() == second.next()
        assert drain(first) == drain(second)


class TestVariants:
    """The generic and specialized entry points agree."""

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "a\ud83dX",
            [1, 2],
            SparseArray(length=2, slots={1: 9}),
            {1: "a"},
            {1, 2},
            None,
            42,
        ],
    )
    def test_standard_and_native_agree(self, value):
        standard = standard_resolve(value)
        native = native_resolve(value)
        if standard is None:
            assert native is None
        else:
            assert drain(standard) == drain(native)

    def test_unknown_variant_rejected(self):
        with pytest.raises(ValueError, match="Unknown resolver variant"):
            Resolver.for_variant("legacy")

    def test_native_variant_assumes_support(self):
        resolver = Resolver.for_variant("native")
        assert resolver.variant == "native"
        assert resolver.options.supports_iteration_capability is True


class TestDefaultResolver:
    def test_default_is_built_once(self):
        assert get_resolver() is get_resolver()

    def test_set_resolver_replaces_default(self):
        legacy = Resolver(ResolverOptions(supports_iteration_capability=False))
        set_resolver(legacy)
        assert get_resolver() is legacy
        assert pyiterate.resolve(x for x in "ab") is None

    def test_package_level_resolve(self):
        assert drain(pyiterate.resolve([1, 2])) == [1, 2]
        assert pyiterate.resolve(None) is None

    def test_classify(self):
        resolver = Resolver()
        assert resolver.classify("x") is Shape.STRING
        assert resolver.classify(3) is Shape.NONE

    def test_resolver_is_callable(self):
        assert drain(Resolver()([7])) == [7]
