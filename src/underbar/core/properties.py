"""Property lookup shared by pluck, invoke and sort_by."""

from __future__ import annotations

from typing import Any

from underbar.core.types import is_mapping, is_sequence


def get_property(element: Any, name: Any) -> Any:
    """Read a named property from element, None when missing.

    Mappings are read by key, sequences by integer index, and any other
    object by attribute.

    Args:
        element: Object to read from.
        name: Key, index, or attribute name.

    Returns:
        The property value, or None if element has no such property.
    """
    if is_mapping(element):
        return element.get(name)
    if is_sequence(element) and isinstance(name, int) and not isinstance(name, bool):
        if 0 <= name < len(element):
            return element[name]
        return None
    if isinstance(name, str):
        return getattr(element, name, None)
    return None
