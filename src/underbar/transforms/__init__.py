"""Structural transforms: shuffle, sort, zip, flatten, set-style operations."""

from underbar.transforms.operations import (
    difference,
    flatten,
    intersection,
    shuffle,
    sort_by,
    sorted_by,
    zip_,
)

__all__ = [
    # Ordering
    "shuffle",
    "sort_by",
    "sorted_by",
    # Shape
    "zip_",
    "flatten",
    # Set-style
    "intersection",
    "difference",
]
