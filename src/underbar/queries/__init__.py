"""Collection queries: filtering, searching, deduplication, projection, reduction."""

from underbar.queries.operations import (
    contains,
    every,
    filter_,
    invoke,
    map_,
    pluck,
    reduce,
    reject,
    some,
    uniq,
)

__all__ = [
    # Filtering
    "filter_",
    "reject",
    "uniq",
    # Projection
    "map_",
    "pluck",
    "invoke",
    # Folds
    "reduce",
    "contains",
    "every",
    "some",
]
