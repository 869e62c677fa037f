"""Function decorators and the wrapper objects that hold their state."""

from underbar.functions.decorators import delay, memoize, once, throttle
from underbar.functions.wrappers import FunctionWrapper, Memoized, Once, Throttled

__all__ = [
    # Decorators
    "once",
    "memoize",
    "delay",
    "throttle",
    # Wrappers
    "FunctionWrapper",
    "Once",
    "Memoized",
    "Throttled",
]
