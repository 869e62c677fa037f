from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable
from typing import Any

from underbar.utils.logging import get_logger

logger = get_logger(__name__)


class BackgroundLoop:
    """Event loop on a daemon thread for callers without a running loop. Singleton per process.

    Every callback scheduled here runs on the same loop thread, one at a
    time, so deferred work never interleaves with other deferred work.
    """

    _instance: BackgroundLoop | None = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None

    @classmethod
    def get(cls) -> BackgroundLoop:
        """Get the singleton BackgroundLoop instance, starting it if necessary."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    inst = cls()
                    inst._start()
                    cls._instance = inst
        return cls._instance

    def _start(self) -> None:
        """Start the background event loop thread."""
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._loop.run_forever,
            daemon=True,
            name="underbar-timer-loop",
        )
        self._thread.start()
        logger.debug("background_loop_started", thread=self._thread.name)

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """The loop continuations run on."""
        if self._loop is None:
            raise RuntimeError("Background loop not started")
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], Any]) -> None:
        """Schedule callback after delay seconds, from any thread."""
        loop = self.loop
        loop.call_soon_threadsafe(loop.call_later, delay, callback)
