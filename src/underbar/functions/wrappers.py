"""Callable wrapper objects holding per-function decorator state.

Each decorator returns one of these. State lives on the instance, so two
wrappers around the same function never share it.
"""

from __future__ import annotations

import json
import threading
import types
from collections.abc import Callable
from functools import update_wrapper
from typing import Any, Generic, TypeVar

from underbar.timing.protocol import Clock, Timer
from underbar.utils.logging import get_logger

logger = get_logger(__name__)

R = TypeVar("R")


class FunctionWrapper(Generic[R]):
    """Base class for wrappers that change when or how a function runs.

    Copies the wrapped function's metadata (``__name__``, ``__doc__``,
    ``__wrapped__``) and binds like a plain function when stored on a
    class, forwarding the instance as the first argument.
    """

    def __init__(self, func: Callable[..., R]) -> None:
        update_wrapper(self, func)
        # Assigned after update_wrapper so a wrapped wrapper's __dict__ cannot replace it
        self._func = func

    def unwrap(self) -> Callable[..., R]:
        """Return the original function."""
        return self._func

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._func(*args, **kwargs)


class Once(FunctionWrapper[R]):
    """Runs the wrapped function on the first call only.

    Every later call, whatever its arguments, returns the first result. If
    the first call raises, nothing is recorded and the next call tries again.
    """

    def __init__(self, func: Callable[..., R]) -> None:
        super().__init__(func)
        self.called = False
        self.result: R | None = None

    def __call__(self, *args: Any, **kwargs: Any) -> R | None:
        if not self.called:
            self.result = self._func(*args, **kwargs)
            self.called = True
        return self.result


class Memoized(FunctionWrapper[R]):
    """Caches results keyed by a serialization of the call's arguments.

    Keys are JSON text of the positional arguments and sorted keyword
    arguments, with ``repr`` for values JSON cannot encode. Arguments JSON
    rejects outright (mappings with non-string or mixed-type keys) are
    keyed by ``repr`` of the whole call instead. A cached None
    is indistinguishable from a missing entry, so calls whose result is
    None are recomputed every time.
    """

    def __init__(self, func: Callable[..., R]) -> None:
        super().__init__(func)
        self.cache: dict[str, R] = {}

    @staticmethod
    def key_for(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
        """Serialize call arguments to a cache key."""
        try:
            return json.dumps([list(args), kwargs], sort_keys=True, default=repr)
        except (TypeError, ValueError):
            return repr((args, sorted(kwargs.items())))

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        key = self.key_for(args, kwargs)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        result = self.cache[key] = self._func(*args, **kwargs)
        return result


class Throttled(FunctionWrapper[R]):
    """Runs the wrapped function at most once per ``wait`` milliseconds.

    Two states, decided on every call:

    - Open (never run, or more than ``wait`` ms since the last run): run
      now, record the time, return the fresh result.
    - Cooldown: schedule a re-attempt of this same check with the same
      arguments ``wait`` ms from now, and return the previous result
      immediately (None before any run). The re-attempt's own result is
      never delivered to this caller.

    Re-attempts may run on a timer thread (see BackgroundLoop) while the
    caller keeps calling, so the check-and-run step and the pending count
    are guarded by a re-entrant lock. The wrapped function runs under it.

    Args:
        func: Function to throttle.
        wait: Window length in milliseconds.
        clock: Source of elapsed time.
        timer: Scheduler for deferred re-attempts.
    """

    def __init__(self, func: Callable[..., R], wait: float, clock: Clock, timer: Timer) -> None:
        super().__init__(func)
        self.wait = wait
        self._clock = clock
        self._timer = timer
        self.last_called: float | None = None
        self.last_result: R | None = None
        self.pending = 0
        # Re-entrant so the wrapped function may call its own wrapper
        self._lock = threading.RLock()

    def __call__(self, *args: Any, **kwargs: Any) -> R | None:
        with self._lock:
            now = self._clock.now()
            if self.last_called is None or now - self.last_called > self.wait:
                self.last_called = now
                self.last_result = self._func(*args, **kwargs)
                return self.last_result

            self.pending += 1
            stale = self.last_result
            logger.debug(
                "throttle_deferred",
                func=getattr(self._func, "__name__", repr(self._func)),
                wait=self.wait,
                pending=self.pending,
            )

        def retry() -> None:
            self(*args, **kwargs)
            with self._lock:
                self.pending -= 1

        self._timer.call_later(self.wait, retry)
        return stale
