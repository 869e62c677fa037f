"""Core type definitions for underbar.

A collection is one of two shapes: an ordered sequence or a keyed mapping.
Strings and bytes are sequences to Python but scalars here, so they are
excluded from the sequence shape.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from enum import Enum, auto
from typing import Any, TypeAlias, TypeGuard, TypeVar

T = TypeVar("T")

Collection: TypeAlias = Sequence[T] | Mapping[Any, T]
"""Either collection shape accepted by the traversal core."""

Iteratee: TypeAlias = Callable[..., Any]
"""Callback invoked per element as ``(value, key_or_index, collection)``."""

_SCALAR_TYPES = (str, bytes, bytearray)
_VALUE_TYPES = (str, bytes, int, float, complex, bool)
_NUMBER_TYPES = (int, float)


class Shape(Enum):
    """Shape of a value as seen by the traversal core."""

    SEQUENCE = auto()
    """Index-addressed, 0-based, contiguous."""

    MAPPING = auto()
    """Key-to-value associations."""

    OTHER = auto()
    """Neither shape. Traversal visits nothing."""


def is_sequence(value: Any) -> TypeGuard[Sequence[Any]]:
    """Check if value has the sequence shape (str and bytes excluded)."""
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_TYPES)


def is_mapping(value: Any) -> TypeGuard[Mapping[Any, Any]]:
    """Check if value has the mapping shape."""
    return isinstance(value, Mapping)


def shape_of(value: Any) -> Shape:
    """Classify value into one of the collection shapes."""
    if is_sequence(value):
        return Shape.SEQUENCE
    if is_mapping(value):
        return Shape.MAPPING
    return Shape.OTHER


def _value_class(value: Any) -> type | None:
    if isinstance(value, bool):
        return bool
    if isinstance(value, _NUMBER_TYPES):
        return float
    if isinstance(value, _VALUE_TYPES):
        return type(value)
    return None


def strict_equals(a: Any, b: Any) -> bool:
    """Identity-or-same-kind-scalar equality.

    Scalars compare by value only when they are the same kind of value.
    ``int`` and ``float`` are one numeric kind, so ``1`` equals ``1.0``,
    while ``bool`` stays its own kind and ``True`` never equals ``1``.
    Containers and other objects compare by identity; there is no
    structural comparison.

    Args:
        a: Left operand.
        b: Right operand.

    Returns:
        True if the operands are strictly equal.
    """
    if a is b:
        return True
    kind = _value_class(a)
    if kind is None or kind is not _value_class(b):
        return False
    return bool(a == b)

