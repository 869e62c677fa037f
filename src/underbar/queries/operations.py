"""Collection queries built on the traversal core.

Nothing here mutates its input; every result is a new list or a scalar.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from underbar.core.callbacks import adapt
from underbar.core.errors import ShapeMismatch, shape_mismatch
from underbar.core.properties import get_property
from underbar.core.traversal import each, index_of
from underbar.core.types import Collection, Iteratee, is_sequence, strict_equals


def filter_(collection: Collection[Any], predicate: Iteratee) -> list[Any]:
    """Return the values of collection that pass predicate, in traversal order.

    Args:
        collection: Sequence or mapping to test.
        predicate: Truth test, called with ``(value, key, collection)``.

    Returns:
        New list of kept values.
    """
    test = adapt(predicate, 3)
    kept: list[Any] = []

    def keep(value: Any, key: Any, source: Any) -> None:
        if test(value, key, source):
            kept.append(value)

    each(collection, keep)
    return kept


def reject(collection: Collection[Any], predicate: Iteratee) -> list[Any]:
    """Return the values of collection that fail predicate. Inverse of filter_."""
    test = adapt(predicate, 3)

    def inverse(value: Any, key: Any, source: Any) -> bool:
        return not test(value, key, source)

    return filter_(collection, inverse)


def uniq(sequence: Sequence[Any]) -> list[Any] | ShapeMismatch:
    """Return sequence without duplicates, keeping first occurrences in order.

    Membership is a linear strict-equality scan of the result so far, so
    unhashable values are fine and the cost is quadratic.

    Args:
        sequence: Sequence to deduplicate.

    Returns:
        New list of distinct values, or a ShapeMismatch for non-sequences.
    """
    if not is_sequence(sequence):
        return shape_mismatch("uniq", sequence)

    unique: list[Any] = []

    def add(value: Any) -> None:
        if index_of(unique, value) == -1:
            unique.append(value)

    each(sequence, add)
    return unique


def map_(sequence: Sequence[Any], iterator: Iteratee) -> list[Any] | ShapeMismatch:
    """Return iterator(value, index, sequence) for each element, in order.

    Args:
        sequence: Sequence to project.
        iterator: Projection callback.

    Returns:
        New list of the same length, or a ShapeMismatch for non-sequences.
    """
    if not is_sequence(sequence):
        return shape_mismatch("map", sequence)

    call = adapt(iterator, 3)
    mapped: list[Any] = []

    def project(value: Any, index: int, source: Any) -> None:
        mapped.append(call(value, index, source))

    each(sequence, project)
    return mapped


def pluck(sequence: Sequence[Any], property_name: Any) -> list[Any] | ShapeMismatch:
    """Return the named property of each element (None where missing)."""
    return map_(sequence, lambda value: get_property(value, property_name))


def invoke(
    collection: Sequence[Any],
    function_or_key: Callable[..., Any] | str,
    args: Sequence[Any] | None = None,
) -> list[Any] | ShapeMismatch:
    """Call a function on each element and collect the results.

    A callable is called with the element as its receiver:
    ``function_or_key(element, *args)``. A name is looked up on each element
    and the found value is called with ``*args``. A missing or non-callable
    property fails with whatever error calling it raises.

    Usage:
        invoke(["a", "b"], str.upper)              # ['A', 'B']
        invoke([[3, 1], [1, 1]], "count", [1])    # [1, 2]

    Args:
        collection: Sequence of receivers.
        function_or_key: Function to apply, or the name of a method.
        args: Extra positional arguments forwarded to every call.

    Returns:
        List of per-element results, or a ShapeMismatch for non-sequences.
    """
    extra = tuple(args or ())

    if callable(function_or_key):
        func = function_or_key
        return map_(collection, lambda element: func(element, *extra))

    return map_(collection, lambda element: get_property(element, function_or_key)(*extra))


def reduce(collection: Collection[Any], iterator: Iteratee, accumulator: Any) -> Any:
    """Fold collection into a single value, starting from accumulator.

    The seed is always explicit; there is no fallback to the first element.
    Each step reassigns ``accumulator = iterator(accumulator, value)``
    (iterators accepting more arguments also receive the key and the
    collection).

    Usage:
        reduce([1, 2, 3], lambda total, n: total + n, 0)  # 6

    Args:
        collection: Sequence or mapping to fold.
        iterator: Step function.
        accumulator: Seed value.

    Returns:
        Final accumulator.
    """
    step = adapt(iterator, 4, fallback=2)

    def fold(value: Any, key: Any, source: Any) -> None:
        nonlocal accumulator
        accumulator = step(accumulator, value, key, source)

    each(collection, fold)
    return accumulator


def contains(collection: Collection[Any], target: Any) -> bool:
    """Check if collection holds target (strict equality)."""
    return reduce(
        collection,
        lambda was_found, item: was_found or strict_equals(item, target),
        False,
    )


def every(collection: Collection[Any], iterator: Callable[[Any], Any] | None = None) -> bool:
    """Check if all elements pass iterator, or are truthy when none is given.

    Stops calling iterator after the first failure. An empty collection
    passes.
    """
    is_function = callable(iterator)

    def fold(true_so_far: bool, item: Any) -> bool:
        return bool(true_so_far) and bool(iterator(item) if is_function else item)  # type: ignore[misc]

    return reduce(collection, fold, True)


def some(collection: Collection[Any], iterator: Callable[[Any], Any] | None = None) -> bool:
    """Check if any element passes iterator, or is truthy when none is given.

    Computed as ``not every(collection, inverted iterator)``.
    """
    is_function = callable(iterator)

    def inverse(item: Any) -> bool:
        return not iterator(item) if is_function else not item  # type: ignore[misc]

    return not every(collection, inverse)
