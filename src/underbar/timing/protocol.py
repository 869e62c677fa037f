"""Protocols for the host timing facility.

The function decorators never sleep or spawn threads themselves. They read
elapsed time from a Clock and hand deferred work to a Timer, so hosts can
plug in an event loop, a virtual clock, or their own scheduler.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of elapsed time in milliseconds.

    Only differences between readings are meaningful; the origin is
    implementation-defined.
    """

    def now(self) -> float:
        """Current reading in milliseconds."""
        ...


@runtime_checkable
class Timer(Protocol):
    """Fire-and-forget deferred execution.

    Implementations guarantee a lower bound on the delay, not an upper bound.
    There is no cancellation: once scheduled, a callback eventually runs.

    Usage:
        timer.call_later(250, lambda: print("later"))
    """

    def call_later(self, wait: float, callback: Callable[[], Any]) -> None:
        """Schedule callback to run after wait milliseconds.

        Args:
            wait: Delay in milliseconds. Non-positive values run as soon as
                the implementation allows.
            callback: Zero-argument callable. Its return value is discarded.
        """
        ...
