"""Shared utilities: structured logging."""

from underbar.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
