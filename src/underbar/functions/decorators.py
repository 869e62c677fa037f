"""Function decorators: run-once, argument cache, delayed call, rate limit.

Usage:
    @once
    def initialize() -> Config:
        ...

    @memoize
    def fib(n: int) -> int:
        return n if n < 2 else fib(n - 1) + fib(n - 2)

    delay(print, 500, "a", "b")     # prints "a b" after ~500 ms

    save = throttle(write_to_disk, 100)
    save(doc)    # runs now
    save(doc)    # within 100 ms: deferred, returns the previous result
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import Any, TypeVar

from underbar.functions.wrappers import Memoized, Once, Throttled
from underbar.timing.protocol import Clock, Timer
from underbar.timing.timers import get_default_clock, get_default_timer
from underbar.utils.logging import get_logger

R = TypeVar("R")

logger = get_logger(__name__)


def once(func: Callable[..., R]) -> Once[R]:
    """Wrap func so it runs at most once; later calls return the first result."""
    return Once(func)


def memoize(func: Callable[..., R]) -> Memoized[R]:
    """Wrap func with a per-wrapper cache keyed by its arguments.

    Intended for single primitive arguments. Other calls are keyed by a JSON
    serialization of the whole argument list. Results of None are not
    treated as cached.
    """
    return Memoized(func)


def delay(func: Callable[..., Any], wait: float, *args: Any, **kwargs: Any) -> None:
    """Call func(*args, **kwargs) once, after wait milliseconds.

    Returns immediately. The result is discarded and the call cannot be
    cancelled. Scheduling goes through the default timer (see
    ``underbar.timing.set_default_timer``).

    Args:
        func: Function to call later.
        wait: Delay in milliseconds.
        *args: Positional arguments for func.
        **kwargs: Keyword arguments for func.
    """
    logger.debug("delay_scheduled", func=getattr(func, "__name__", repr(func)), wait=wait)
    get_default_timer().call_later(wait, partial(func, *args, **kwargs))


def throttle(
    func: Callable[..., R],
    wait: float,
    *,
    clock: Clock | None = None,
    timer: Timer | None = None,
) -> Throttled[R]:
    """Wrap func so it runs at most once per wait milliseconds.

    Calls inside the cooldown window are re-attempted after ``wait`` ms and
    return the last computed result straight away. See Throttled.

    Args:
        func: Function to throttle.
        wait: Window length in milliseconds.
        clock: Elapsed-time source. Defaults to the library default clock.
        timer: Scheduler for re-attempts. Defaults to the library default timer.

    Returns:
        Throttled wrapper around func.
    """
    return Throttled(
        func,
        wait,
        clock=clock if clock is not None else get_default_clock(),
        timer=timer if timer is not None else get_default_timer(),
    )
