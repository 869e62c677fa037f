"""Core functionalities: the traversal primitive and the helpers built beside it.

Architecture Note:
    core/ is stateless. Everything in queries/, objects/ and transforms/
    iterates through ``each`` and compares through ``strict_equals``.
"""

from underbar.core.callbacks import adapt, positional_arity
from underbar.core.errors import ShapeMismatch
from underbar.core.properties import get_property
from underbar.core.traversal import each, first, identity, index_of, last
from underbar.core.types import (
    Collection,
    Iteratee,
    Shape,
    is_mapping,
    is_sequence,
    shape_of,
    strict_equals,
)

__all__ = [
    # Types
    "Collection",
    "Iteratee",
    "Shape",
    "ShapeMismatch",
    "is_sequence",
    "is_mapping",
    "shape_of",
    "strict_equals",
    # Traversal
    "each",
    "index_of",
    "identity",
    "first",
    "last",
    # Helpers
    "adapt",
    "positional_arity",
    "get_property",
]
