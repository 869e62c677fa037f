"""Clock and timer implementations.

Usage:
    # Default: real clock, asyncio-backed timer
    timer = get_default_timer()
    timer.call_later(100, callback)

    # Deterministic virtual time
    manual = ManualTimer()
    previous = set_default_timer(manual)
    ...
    manual.advance(100)   # fires everything due by then
    set_default_timer(previous)
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import time
from collections.abc import Callable
from typing import Any

from underbar.timing.background import BackgroundLoop
from underbar.timing.protocol import Clock, Timer


class SystemClock:
    """Monotonic clock in milliseconds. Unaffected by wall-clock adjustments."""

    def now(self) -> float:
        """Current monotonic reading in milliseconds."""
        return time.monotonic() * 1000.0


class LoopTimer:
    """Timer backed by asyncio.

    Inside a running event loop, callbacks are scheduled on that loop and
    run cooperatively with the caller's other tasks. Outside one, they go to
    the process-wide BackgroundLoop.
    """

    def call_later(self, wait: float, callback: Callable[[], Any]) -> None:
        """Schedule callback after wait milliseconds."""
        delay = wait / 1000.0
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            BackgroundLoop.get().call_later(delay, callback)
            return
        loop.call_later(delay, callback)


class ManualTimer:
    """Virtual clock and timer driven explicitly by advance().

    Implements both Clock and Timer. Time starts at ``start`` and only moves
    when advance() is called; due callbacks then run in due order (ties in
    scheduling order), with now() reporting each callback's due time while
    it runs. Callbacks scheduled by a running callback fire within the same
    advance() if they fall due before its end.

    Args:
        start: Initial reading in milliseconds.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: list[tuple[float, int, Callable[[], Any]]] = []
        self._sequence = itertools.count()

    def now(self) -> float:
        """Current virtual time in milliseconds."""
        return self._now

    def call_later(self, wait: float, callback: Callable[[], Any]) -> None:
        """Queue callback to run once virtual time reaches now + wait."""
        due = self._now + max(wait, 0.0)
        heapq.heappush(self._queue, (due, next(self._sequence), callback))

    def advance(self, ms: float) -> int:
        """Move virtual time forward, running every callback that falls due.

        Args:
            ms: Milliseconds to advance by.

        Returns:
            Number of callbacks run.
        """
        target = self._now + ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self._now = max(self._now, due)
            callback()
            fired += 1
        self._now = target
        return fired

    @property
    def pending(self) -> int:
        """Number of callbacks waiting to fire."""
        return len(self._queue)


# Module-level defaults used by delay() and throttle()
_default_clock: Clock = SystemClock()
_default_timer: Timer = LoopTimer()


def get_default_clock() -> Clock:
    """Clock used by throttle() when none is passed."""
    return _default_clock


def get_default_timer() -> Timer:
    """Timer used by delay(), and by throttle() when none is passed."""
    return _default_timer


def set_default_clock(clock: Clock) -> Clock:
    """Replace the default clock.

    Returns:
        The previous default clock.
    """
    global _default_clock
    previous = _default_clock
    _default_clock = clock
    return previous


def set_default_timer(timer: Timer) -> Timer:
    """Replace the default timer.

    Returns:
        The previous default timer.
    """
    global _default_timer
    previous = _default_timer
    _default_timer = timer
    return previous
