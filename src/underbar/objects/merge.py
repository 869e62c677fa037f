"""Shallow merge helpers for mappings.

Both helpers mutate and return their target:

    extend({"key1": "a"}, {"key2": "b"}, {"key1": "c"})
    # {'key1': 'c', 'key2': 'b'}

    defaults({"key1": "a"}, {"key1": "x", "key2": "b"})
    # {'key1': 'a', 'key2': 'b'}
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from underbar.core.traversal import each


def extend(target: MutableMapping[Any, Any], *sources: Mapping[Any, Any]) -> MutableMapping[Any, Any]:
    """Copy every key of every source onto target, later sources winning.

    Args:
        target: Mapping to write into.
        *sources: Mappings read left to right.

    Returns:
        target, updated in place.
    """

    def assign(value: Any, key: Any) -> None:
        target[key] = value

    each(sources, lambda source: each(source, assign))
    return target


def defaults(target: MutableMapping[Any, Any], *sources: Mapping[Any, Any]) -> MutableMapping[Any, Any]:
    """Fill keys that target lacks (or holds as None), first source winning.

    Args:
        target: Mapping to write into.
        *sources: Mappings read left to right.

    Returns:
        target, updated in place.
    """

    def fill(value: Any, key: Any) -> None:
        if target.get(key) is None:
            target[key] = value

    each(sources, lambda source: each(source, fill))
    return target
