from __future__ import annotations

import logging
from typing import Any

import structlog

from underbar.config import get_settings

# No output from the library until the host installs a handler
logging.getLogger("underbar").addHandler(logging.NullHandler())


def configure_logging(level: str | int | None = None) -> None:
    """Set up stdlib logging and structlog rendering for underbar events.

    Args:
        level: Log level name or number. Defaults to the configured
            ``log_level`` setting.
    """
    if level is None:
        level = get_settings().log_level
    log_level = logging.getLevelName(level.upper()) if isinstance(level, str) else level

    logging.basicConfig(level=log_level, format="%(message)s")
    logging.getLogger("underbar").setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Structured logger routed through the stdlib ``underbar`` logger tree.

    The ``underbar`` logger carries a NullHandler, so nothing reaches stderr
    (not even warnings) until the host configures logging, either directly
    or through configure_logging().
    """
    stdlib_logger = logging.getLogger(name or "underbar")
    return structlog.wrap_logger(stdlib_logger, wrapper_class=structlog.stdlib.BoundLogger)
