"""Tests for collection queries.

Critical Invariants:
- Queries never mutate their input
- uniq keeps first occurrences, in order
- reduce always starts from the explicit seed
- some is exactly the negation of every over the inverted test
"""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from underbar import (
    ShapeMismatch,
    UnderbarSettings,
    contains,
    every,
    filter_,
    index_of,
    invoke,
    map_,
    pluck,
    reduce,
    reject,
    set_settings,
    some,
    uniq,
)

# Filtering


def test_filter_keeps_passing_values_in_order():
    assert filter_([1, 2, 3, 4, 5, 6], lambda n: n % 2 == 0) == [2, 4, 6]


def test_filter_passes_index():
    assert filter_(["a", "b", "c"], lambda value, index: index != 1) == ["a", "c"]


def test_filter_over_mapping_returns_values():
    assert filter_({"a": 1, "b": 2, "c": 3}, lambda value, key: key != "b") == [1, 3]


def test_filter_returns_new_list():
    data = [1, 2, 3]
    result = filter_(data, lambda n: True)
    assert result == data
    assert result is not data


def test_reject_is_inverse_of_filter():
    data = [1, 2, 3, 4, 5, 6]
    is_even = lambda n: n % 2 == 0  # noqa: E731
    assert reject(data, is_even) == [1, 3, 5]
    assert sorted(reject(data, is_even) + filter_(data, is_even)) == data


def test_reject_passes_index():
    assert reject(["a", "b", "c"], lambda value, index: index == 0) == ["b", "c"]


# Deduplication


def test_uniq_keeps_first_occurrence_order():
    assert uniq([3, 1, 3, 2, 1]) == [3, 1, 2]


def test_uniq_is_strict():
    """1 and 1.0 are the same number; True is a distinct value."""
    assert uniq([1, 1.0, True, 1]) == [1, True]


def test_uniq_handles_unhashable_values_by_identity():
    shared = [1]
    assert uniq([shared, shared, [1]]) == [shared, [1]]


def test_uniq_does_not_mutate_input():
    data = [1, 1, 2]
    uniq(data)
    assert data == [1, 1, 2]


@pytest.mark.parametrize("value", [{"a": 1}, "abc", None])
def test_uniq_reports_shape_mismatch(value):
    result = uniq(value)
    assert isinstance(result, ShapeMismatch)
    assert result == "argument must be a sequence"


@given(st.lists(st.integers(min_value=-5, max_value=5)))
def test_uniq_properties(values):
    """PROPERTY: each value appears once, first-occurrence order kept."""
    unique = uniq(values)

    assert len(unique) == len(set(values))
    for value in range(-6, 7):
        assert (index_of(unique, value) != -1) == contains(values, value)
    assert unique == sorted(set(values), key=values.index)


# Projection


def test_map_applies_iterator():
    assert map_([1, 2, 3], lambda x: x * 2) == [2, 4, 6]


def test_map_passes_index():
    assert map_(["a", "b"], lambda value, index: f"{index}:{value}") == ["0:a", "1:b"]


def test_map_preserves_length():
    assert map_([None, None], lambda value: value) == [None, None]


def test_map_reports_shape_mismatch_for_mappings():
    result = map_({"a": 1}, lambda value: value)
    assert isinstance(result, ShapeMismatch)
    assert result == "argument must be a sequence"


def test_shape_mismatch_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="underbar"):
        map_("not a list", str)
    assert "shape_mismatch" in caplog.text


def test_shape_mismatch_logging_can_be_disabled(caplog):
    set_settings(UnderbarSettings(warn_on_shape_mismatch=False))
    with caplog.at_level(logging.WARNING, logger="underbar"):
        result = map_("not a list", str)
    assert isinstance(result, ShapeMismatch)
    assert "shape_mismatch" not in caplog.text


def test_pluck_reads_mapping_keys():
    people = [{"name": "moe", "age": 30}, {"name": "curly", "age": 50}]
    assert pluck(people, "name") == ["moe", "curly"]


def test_pluck_reads_attributes(people):
    assert pluck(people, "age") == [40, 50, 60]


def test_pluck_missing_property_is_none():
    assert pluck([{"a": 1}, {}], "a") == [1, None]


def test_invoke_with_function_binds_element():
    assert invoke(["a", "b"], str.upper) == ["A", "B"]


def test_invoke_with_method_name():
    assert invoke(["a", "b"], "upper") == ["A", "B"]


def test_invoke_forwards_args():
    assert invoke(["a-b", "c-d"], "split", ["-"]) == [["a", "b"], ["c", "d"]]
    assert invoke([1, 2], lambda element, offset: element + offset, [10]) == [11, 12]


def test_invoke_does_not_mutate_input():
    data = [[3, 1], [2, 0]]
    invoke(data, sorted)
    assert data == [[3, 1], [2, 0]]


def test_invoke_missing_method_raises_naturally():
    with pytest.raises(TypeError):
        invoke([1], "no_such_method")


# Folds


def test_reduce_sums_with_seed():
    assert reduce([1, 2, 3], lambda acc, x: acc + x, 0) == 6


def test_reduce_uses_seed_not_first_element():
    assert reduce([1, 2, 3], lambda acc, x: acc + x, 10) == 16
    assert reduce([], lambda acc, x: acc + x, "seed") == "seed"


def test_reduce_requires_seed():
    with pytest.raises(TypeError):
        reduce([1, 2, 3], lambda acc, x: acc + x)  # type: ignore[call-arg]


def test_reduce_over_mapping_with_keys():
    result = reduce({"a": 1, "b": 2}, lambda acc, value, key: acc + [(key, value)], [])
    assert result == [("a", 1), ("b", 2)]


def test_contains():
    assert contains([1, 2, 3], 3)
    assert not contains([1, 2, 3], 4)
    assert contains({"a": 1}, 1)
    assert not contains({"a": 1}, "a")


def test_contains_is_strict():
    assert not contains([1, 2], True)
    assert not contains([1, 2], "1")
    assert not contains([[1]], [1])


def test_contains_treats_int_and_float_as_one_number():
    assert contains([1, 2], 1.0)
    assert contains([1.5, 2.0], 2)
    assert index_of([0, 1.0, 2], 1) == 1


@pytest.mark.parametrize(
    ("collection", "iterator", "expected"),
    [
        ([], None, True),
        ([True, 1, "x"], None, True),
        ([True, 0], None, False),
        ([2, 4, 6], lambda n: n % 2 == 0, True),
        ([2, 3, 6], lambda n: n % 2 == 0, False),
        ({"a": 1, "b": 0}, None, False),
        ([1, 2], "not callable", True),
    ],
)
def test_every(collection, iterator, expected):
    assert every(collection, iterator) is expected


def test_every_stops_calling_after_first_failure():
    calls = []

    def check(n):
        calls.append(n)
        return n < 2

    assert not every([1, 2, 3, 4], check)
    assert calls == [1, 2]


@pytest.mark.parametrize(
    ("collection", "iterator", "expected"),
    [
        ([], None, False),
        ([0, None, ""], None, False),
        ([0, None, 1], None, True),
        ([1, 3, 5], lambda n: n % 2 == 0, False),
        ([1, 4, 5], lambda n: n % 2 == 0, True),
        ({"a": 0, "b": "yes"}, None, True),
    ],
)
def test_some(collection, iterator, expected):
    assert some(collection, iterator) is expected


@given(st.lists(st.integers()), st.integers())
def test_some_is_negated_every_of_inverse(values, pivot):
    """PROPERTY: some(c, f) == not every(c, not f)."""
    above = lambda n: n > pivot  # noqa: E731
    assert some(values, above) == (not every(values, lambda n: not above(n)))
