"""In-memory mutable interval collection.

This module provides MemoryIntervals, a list-backed collection that defers
sorting until a query needs ordered intervals.
"""

import logging
from collections.abc import Iterable, Iterator

from typing_extensions import override

from intervalset.interval import Interval, by_low
from intervalset.mutable import MutableIntervals
from intervalset.util import DEFAULT_MAX_HIGH, DEFAULT_MIN_LOW

logger = logging.getLogger(__name__)


class MemoryIntervals(MutableIntervals[Interval]):
    """In-memory collection of intervals with lazy sorting.

    Attributes:
        _intervals: Intervals in insertion order until the next sort
        _sorted: False after any append, True once sort() has run
    """

    def __init__(
        self,
        min_low: int = DEFAULT_MIN_LOW,
        max_high: int = DEFAULT_MAX_HIGH,
        intervals: Iterable[Interval] = (),
    ) -> None:
        """Initialize an empty or pre-populated collection.

        Args:
            min_low: Lower bound of the domain (not checked against max_high)
            max_high: Upper bound of the domain
            intervals: Optional initial intervals, appended in order
        """
        super().__init__(min_low, max_high)
        self._intervals: list[Interval] = []
        self._sorted: bool = False

        self.add(intervals)

    @property
    def is_sorted(self) -> bool:
        return self._sorted

    @override
    def _add_interval(self, interval: Interval) -> None:
        self._intervals.append(interval)
        self._sorted = False

    @override
    def sort(self) -> None:
        # list.sort is stable: equal lows keep insertion order
        if not self._sorted:
            logger.debug("sorting %d intervals by low", len(self._intervals))
            self._intervals.sort(key=by_low)
        self._sorted = True

    @override
    def __iter__(self) -> Iterator[Interval]:
        return iter(self._intervals)

    @override
    def __len__(self) -> int:
        return len(self._intervals)


def intervals(
    *items: Interval,
    min_low: int = DEFAULT_MIN_LOW,
    max_high: int = DEFAULT_MAX_HIGH,
) -> MemoryIntervals:
    """Create a mutable collection from a number of intervals.

    This is a convenience function for creating in-memory collections without
    needing to instantiate MemoryIntervals directly. Without explicit bounds
    the domain is [0, sys.maxsize].

    Args:
        *items: Variable number of interval objects
        min_low: Lower bound of the domain
        max_high: Upper bound of the domain

    Returns:
        MemoryIntervals containing the provided intervals

    Example:
        >>> from intervalset import Interval, intervals
        >>>
        >>> ivls = intervals(
        ...     Interval(low=5, high=10),
        ...     Interval(low=8, high=15),
        ...     min_low=0,
        ...     max_high=40,
        ... )
        >>>
        >>> # Can add more intervals later
        >>> ivls.add(Interval(low=30, high=35))
        >>> [str(gap) for gap in ivls.gaps()]
        ['[0,4]', '[16,29]', '[36,40]']
    """
    return MemoryIntervals(min_low, max_high, items)
