from .core import Intervals
from .interval import Interval, by_low
from .mutable import MutableIntervals
from .mutable.memory import MemoryIntervals, intervals
from .diagram import format_intervals, render
from .util import DEFAULT_MAX_HIGH, DEFAULT_MIN_LOW

__all__ = [
    "Interval",
    "Intervals",
    "MutableIntervals",
    "MemoryIntervals",
    "by_low",
    "intervals",
    "render",
    "format_intervals",
    "DEFAULT_MIN_LOW",
    "DEFAULT_MAX_HIGH",
]
