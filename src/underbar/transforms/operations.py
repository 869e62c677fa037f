"""Structural transforms over sequences.

Usage:
    zip_(["a", "b", "c", "d"], [1, 2, 3])
    # [['a', 1], ['b', 2], ['c', 3], ['d', None]]

    flatten([1, [2, [3, [4]]], 5])              # [1, 2, 3, 4, 5]
    intersection([1, 2, 3], [2, 3, 4], [3, 2, 5])  # [2, 3]
    difference([1, 2, 3, 4], [2, 30, 40])       # [1, 3, 4]

    people = [{"name": "b"}, {"name": "a"}]
    sort_by(people, "name")                     # sorts people in place
"""

from __future__ import annotations

import math
import random
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any

from underbar.config import get_settings
from underbar.core.properties import get_property
from underbar.core.traversal import each, index_of
from underbar.core.types import Collection, is_sequence
from underbar.queries.operations import every, filter_, reject


def _random_source() -> Any:
    """Seeded generator when shuffle_seed is configured, else the module generator."""
    seed = get_settings().shuffle_seed
    if seed is not None:
        return random.Random(seed)
    return random


def shuffle(sequence: Collection[Any], rng: random.Random | None = None) -> list[Any]:
    """Return the values of sequence in a randomized order.

    The output grows one element at a time: before placing the k-th value,
    a slot is drawn uniformly from the k - 1 slots already filled, its
    occupant moves to the new end, and the value takes the slot. The first
    value lands in slot 0 and the second always swaps in front of it. This
    incremental variant is not an unbiased permutation.

    Args:
        sequence: Values to shuffle. Not modified.
        rng: Random source. Defaults to the configured seed, if any.

    Returns:
        New list holding the same values.
    """
    source = rng if rng is not None else _random_source()
    shuffled: list[Any] = []
    seen = 0

    def place(value: Any) -> None:
        nonlocal seen
        slot = math.floor(source.random() * seen)
        seen += 1
        shuffled.append(shuffled[slot] if slot < len(shuffled) else None)
        shuffled[slot] = value

    each(sequence, place)
    return shuffled


def _sort_key(iterator_or_key: Callable[[Any], Any] | Any) -> Callable[[Any], Any]:
    if callable(iterator_or_key):
        return iterator_or_key
    return lambda element: get_property(element, iterator_or_key)


def _greater(a: Any, b: Any) -> bool:
    # Keys that cannot be ordered (None against a number, mixed types) are
    # never "greater", so such pairs keep their current positions. Which
    # side None keys should sort to is still undecided.
    try:
        return bool(a > b)
    except TypeError:
        return False


def _pairwise_sort(items: MutableSequence[Any], key: Callable[[Any], Any]) -> None:
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if _greater(key(items[i]), key(items[j])):
                items[i], items[j] = items[j], items[i]


def sort_by(collection: Any, iterator_or_key: Callable[[Any], Any] | Any) -> Any:
    """Sort collection ascending by key, in place, and return it.

    Every pair ``i < j`` is compared and swapped when the key at ``i`` is
    strictly greater. Equal keys may change relative order. The caller's
    list is rewritten; use sorted_by for a copy.

    Args:
        collection: Mutable sequence to sort. Immutable sequences are sorted
            into a new list; anything else is returned unchanged.
        iterator_or_key: Key function, or a property name read from each
            element.

    Returns:
        The same collection object, sorted.
    """
    key = _sort_key(iterator_or_key)
    if isinstance(collection, MutableSequence):
        _pairwise_sort(collection, key)
        return collection
    if is_sequence(collection):
        items = list(collection)
        _pairwise_sort(items, key)
        return items
    return collection


def sorted_by(collection: Any, iterator_or_key: Callable[[Any], Any] | Any) -> Any:
    """Like sort_by, but sorts a copy and leaves collection untouched."""
    if is_sequence(collection):
        return sort_by(list(collection), iterator_or_key)
    return collection


def zip_(*sequences: Sequence[Any]) -> list[list[Any]]:
    """Group elements by index across sequences.

    The result is as long as the longest input; shorter inputs contribute
    None past their end.
    """
    length = 0

    def widen(sequence: Sequence[Any]) -> None:
        nonlocal length
        if len(sequence) > length:
            length = len(sequence)

    each(sequences, widen)

    zipped: list[list[Any]] = []
    for i in range(length):
        row: list[Any] = []
        each(sequences, lambda sequence: row.append(sequence[i] if i < len(sequence) else None))
        zipped.append(row)
    return zipped


def _collect_leaves(nested: Sequence[Any], result: list[Any]) -> None:
    def visit(element: Any) -> None:
        if is_sequence(element):
            _collect_leaves(element, result)
        else:
            result.append(element)

    each(nested, visit)


def flatten(nested: Any) -> Any:
    """Flatten arbitrarily nested sequences into one list of leaves.

    Leaves keep their left-to-right order. Input that is not a sequence is
    returned as is.
    """
    if not is_sequence(nested):
        return nested

    result: list[Any] = []
    _collect_leaves(nested, result)
    # No sequence may survive into the output
    return reject(result, is_sequence)


def intersection(first: Sequence[Any], *others: Sequence[Any]) -> list[Any]:
    """Keep the elements of first found in every other sequence.

    Order and duplicates come from first. With no other sequences, every
    element is kept.
    """
    return filter_(first, lambda element: every(others, lambda other: index_of(other, element) != -1))


def difference(first: Sequence[Any], *others: Sequence[Any]) -> list[Any]:
    """Keep the elements of first found in none of the other sequences."""
    return filter_(first, lambda element: every(others, lambda other: index_of(other, element) == -1))
