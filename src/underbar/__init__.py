"""underbar: collection-iteration primitives and function-behavior decorators.

Usage:
    from underbar import each, map_, reduce, once, throttle, zip_

    map_([1, 2, 3], lambda x: x * 2)                  # [2, 4, 6]
    reduce([1, 2, 3], lambda acc, x: acc + x, 0)      # 6
    zip_(["a", "b"], [1])                             # [['a', 1], ['b', None]]

    @once
    def connect():
        ...
"""

__version__ = "0.1.0"

# Configuration
from underbar.config import UnderbarSettings, get_settings, set_settings

# Traversal core
from underbar.core import (
    ShapeMismatch,
    each,
    first,
    identity,
    index_of,
    is_mapping,
    is_sequence,
    last,
    strict_equals,
)

# Function decorators
from underbar.functions import (
    FunctionWrapper,
    Memoized,
    Once,
    Throttled,
    delay,
    memoize,
    once,
    throttle,
)

# Mapping merge helpers
from underbar.objects import defaults, extend

# Collection queries
from underbar.queries import (
    contains,
    every,
    filter_,
    invoke,
    map_,
    pluck,
    reduce,
    reject,
    some,
    uniq,
)

# Timing
from underbar.timing import (
    Clock,
    LoopTimer,
    ManualTimer,
    SystemClock,
    Timer,
    set_default_clock,
    set_default_timer,
)

# Structural transforms
from underbar.transforms import (
    difference,
    flatten,
    intersection,
    shuffle,
    sort_by,
    sorted_by,
    zip_,
)

# Logging
from underbar.utils import configure_logging, get_logger

__all__ = [
    # Version
    "__version__",
    # Core
    "each",
    "index_of",
    "identity",
    "first",
    "last",
    "is_sequence",
    "is_mapping",
    "strict_equals",
    "ShapeMismatch",
    # Queries
    "filter_",
    "reject",
    "uniq",
    "map_",
    "pluck",
    "invoke",
    "reduce",
    "contains",
    "every",
    "some",
    # Objects
    "extend",
    "defaults",
    # Functions
    "once",
    "memoize",
    "delay",
    "throttle",
    "FunctionWrapper",
    "Once",
    "Memoized",
    "Throttled",
    # Transforms
    "shuffle",
    "sort_by",
    "sorted_by",
    "zip_",
    "flatten",
    "intersection",
    "difference",
    # Timing
    "Clock",
    "Timer",
    "SystemClock",
    "LoopTimer",
    "ManualTimer",
    "set_default_clock",
    "set_default_timer",
    # Configuration
    "UnderbarSettings",
    "get_settings",
    "set_settings",
    "configure_logging",
    "get_logger",
]
