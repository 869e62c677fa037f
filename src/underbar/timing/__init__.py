"""Host timing facility: clocks and deferred-execution timers."""

from underbar.timing.background import BackgroundLoop
from underbar.timing.protocol import Clock, Timer
from underbar.timing.timers import (
    LoopTimer,
    ManualTimer,
    SystemClock,
    get_default_clock,
    get_default_timer,
    set_default_clock,
    set_default_timer,
)

__all__ = [
    # Protocols
    "Clock",
    "Timer",
    # Implementations
    "SystemClock",
    "LoopTimer",
    "ManualTimer",
    "BackgroundLoop",
    # Defaults
    "get_default_clock",
    "get_default_timer",
    "set_default_clock",
    "set_default_timer",
]
