"""Mutable interval collections.

This module provides the abstract base class for collections that accept new
intervals, along with the in-memory implementation.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from intervalset.core import Intervals
from intervalset.interval import Interval, IvlOut


class MutableIntervals(Intervals[IvlOut], ABC):
    """Abstract base class for collections that support adding intervals.

    Provides generic dispatch for single intervals and iterables, with
    storage-specific implementations handling the actual append.
    """

    def add(self, item: "Interval | Iterable[Interval]") -> None:
        """Add intervals to this collection.

        Args:
            item: Single interval, or iterable of intervals appended in order

        Raises:
            TypeError: If item is neither an Interval nor an iterable of them

        Note:
            Bounds are not validated. Intervals with low > high or lying
            outside the domain are stored as given.

        Examples:
            ivls.add(Interval(low=5, high=10))
            ivls.add([Interval(low=8, high=15), Interval(low=30, high=35)])
        """
        if isinstance(item, Interval):
            self._add_interval(item)
            return

        if isinstance(item, (str, bytes)) or not isinstance(item, Iterable):
            raise TypeError(
                f"add() expects an Interval or an iterable of Intervals.\n"
                f"Got {type(item).__name__!r}: {item!r}\n"
                f"Hint: Wrap raw bounds first:\n"
                f"  ivls.add(Interval(low=5, high=10))"
            )

        for interval in item:
            if not isinstance(interval, Interval):
                raise TypeError(
                    f"add() expects every item of an iterable to be an Interval.\n"
                    f"Got {type(interval).__name__!r}: {interval!r}\n"
                    f"Hint: ivls.add(Interval(low=l, high=h) for l, h in pairs)"
                )
            self._add_interval(interval)

    @abstractmethod
    def _add_interval(self, interval: Interval) -> None:
        """Storage-specific: append a single interval.

        Args:
            interval: The interval to append
        """
        pass


__all__ = ["MutableIntervals"]
