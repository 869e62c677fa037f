"""Failure values for operations with a sequence precondition.

These operations return a descriptive value instead of raising, so callers
check the result rather than catching an exception.
"""

from __future__ import annotations

from typing import Any

from underbar.config import get_settings
from underbar.utils.logging import get_logger

logger = get_logger(__name__)

SEQUENCE_REQUIRED = "argument must be a sequence"
LAST_SEQUENCE_REQUIRED = "last expects a sequence as the first argument."


class ShapeMismatch(str):
    """Descriptive failure value returned when a sequence was required.

    It is a ``str``, so it compares equal to its message text, and callers
    can tell it apart from a real result with ``isinstance``.

    Usage:
        result = map_({"a": 1}, str)
        if isinstance(result, ShapeMismatch):
            ...
    """

    __slots__ = ()


def shape_mismatch(operation: str, received: Any, message: str = SEQUENCE_REQUIRED) -> ShapeMismatch:
    """Build the failure value for operation and log it.

    Args:
        operation: Name of the operation that rejected its input.
        received: The offending argument.
        message: Descriptive text carried by the failure value.

    Returns:
        ShapeMismatch carrying message.
    """
    if get_settings().warn_on_shape_mismatch:
        logger.warning(
            "shape_mismatch",
            operation=operation,
            received=type(received).__name__,
        )
    return ShapeMismatch(message)
