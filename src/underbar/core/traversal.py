"""Traversal core: the single iteration primitive and index lookup.

Every other operation iterates through ``each``, which dispatches on the
collection's shape:

    each([10, 20], print)          # 10 0 [10, 20] / 20 1 [10, 20]
    each({"a": 1}, print)          # 1 a {'a': 1}
    each("text", print)            # nothing, strings are scalars
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import singledispatch
from typing import Any, TypeVar

from underbar.core.callbacks import adapt
from underbar.core.errors import LAST_SEQUENCE_REQUIRED, ShapeMismatch, shape_mismatch
from underbar.core.types import Iteratee, is_sequence, strict_equals

T = TypeVar("T")


def identity(value: T) -> T:
    """Return value unchanged. Default iterator when none is supplied."""
    return value


@singledispatch
def each(collection: Any, iterator: Iteratee) -> None:
    """Call iterator(value, key, collection) for each element of collection.

    Sequences are walked by index ``0..len-1``, mappings by key. Any other
    input is visited as an empty collection. Nothing is returned; the only
    effect is whatever iterator does.

    Args:
        collection: Sequence or mapping to traverse.
        iterator: Callback, invoked with as many of ``(value, key,
            collection)`` as it accepts.
    """


@each.register
def _each_sequence(collection: Sequence, iterator: Iteratee) -> None:  # type: ignore[type-arg]
    call = adapt(iterator, 3)
    for index in range(len(collection)):
        call(collection[index], index, collection)


@each.register
def _each_mapping(collection: Mapping, iterator: Iteratee) -> None:  # type: ignore[type-arg]
    call = adapt(iterator, 3)
    for key in list(collection):
        # Keys removed by an earlier callback are skipped
        if key in collection:
            call(collection[key], key, collection)


@each.register(str)
@each.register(bytes)
@each.register(bytearray)
def _each_scalar(collection: Any, iterator: Iteratee) -> None:
    return None


def index_of(sequence: Sequence[Any], target: Any) -> int:
    """Find the first index holding target, by strict equality.

    Args:
        sequence: Sequence to scan.
        target: Value to look for.

    Returns:
        Earliest matching index, or -1 if target is absent.
    """
    result = -1

    def check(item: Any, index: int) -> None:
        nonlocal result
        if result == -1 and strict_equals(item, target):
            result = index

    each(sequence, check)
    return result


def first(sequence: Sequence[T], n: int | None = None) -> T | Sequence[T] | None:
    """Return the first element, or the first n elements when n is given.

    An empty sequence has no first element, so None is returned.
    """
    if n is None:
        return sequence[0] if len(sequence) else None
    return sequence[:n]


def last(sequence: Sequence[T], n: int | None = None) -> T | Sequence[T] | ShapeMismatch | None:
    """Return the last element, or the last n elements when n is given.

    When n covers the whole sequence the input itself is returned, not a copy.

    Args:
        sequence: Sequence to read from.
        n: Number of trailing elements to take.

    Returns:
        Last element (None when empty), a trailing slice, the input sequence,
        or a ShapeMismatch if sequence is not a sequence.
    """
    if not is_sequence(sequence):
        return shape_mismatch("last", sequence, LAST_SEQUENCE_REQUIRED)
    if n is None:
        return sequence[len(sequence) - 1] if len(sequence) else None
    if n < len(sequence):
        return sequence[len(sequence) - n : len(sequence)]
    return sequence
