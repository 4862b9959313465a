import math
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import Any, Generic

from intervalset.interval import Interval, IvlOut
from intervalset.diagram import render as render_diagram


def _between(value: float, low: float, high: float) -> bool:
    return low <= value <= high


class Intervals(ABC, Generic[IvlOut]):
    """A collection of closed intervals over the domain [min_low, max_high].

    Subclasses own storage and ordering; every derived view (gaps, overlaps,
    membership, rendering) is computed here from the current contents and is
    never cached.
    """

    def __init__(self, min_low: int, max_high: int):
        self._min_low: int = min_low
        self._max_high: int = max_high

    @property
    def min_low(self) -> int:
        return self._min_low

    @property
    def max_high(self) -> int:
        return self._max_high

    @abstractmethod
    def sort(self) -> None:
        """Order the collection ascending by low bound, if not already."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[IvlOut]:
        """Yield intervals in current order (sorted or insertion)."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def sorted_intervals(self) -> list[IvlOut]:
        """Sort (if necessary) and return the intervals in ascending order."""
        self.sort()
        return list(self)

    def gaps(self) -> list[Interval]:
        """Return the uncovered ranges of the domain.

        Walks the sorted intervals with a cursor starting at ``min_low``. The
        cursor is reset to ``high + 1`` after every interval, so an interval
        nested inside a wider earlier one moves the cursor backwards and can
        report a gap inside covered space:

            >>> from intervalset import Interval, intervals
            >>> ivls = intervals(Interval(low=0, high=10), Interval(low=2, high=3),
            ...                  min_low=0, max_high=20)
            >>> [str(g) for g in ivls.gaps()]
            ['[4,20]']
        """
        self.sort()
        gaps: list[Interval] = []
        last_high = self._min_low
        for interval in self:
            if interval.low > last_high:
                gaps.append(Interval(low=last_high, high=interval.low - 1))
            last_high = interval.high + 1
        if last_high < self._max_high:
            gaps.append(Interval(low=last_high, high=self._max_high))
        return gaps

    def overlapped(self) -> list[Interval]:
        """Return regions where an interval meets the coverage of its predecessors.

        Algorithm: walk the sorted intervals keeping an envelope spanning the
        lowest low and highest high seen so far. From the second interval on,
        if the interval and the envelope share a point (checked from both
        sides), emit their intersection. The envelope is widened after every
        interval whether or not anything was emitted. Emitted regions are not
        merged with each other.
        """
        self.sort()
        overlaps: list[Interval] = []
        env_low: float = math.inf
        env_high: float = -math.inf
        for i, interval in enumerate(self):
            if i > 0:
                low_inside = _between(
                    env_low, interval.low, interval.high
                ) or _between(interval.low, env_low, env_high)
                high_inside = _between(
                    env_high, interval.low, interval.high
                ) or _between(interval.high, env_low, env_high)
                if low_inside or high_inside:
                    overlaps.append(
                        Interval(
                            low=int(max(interval.low, env_low)),
                            high=int(min(interval.high, env_high)),
                        )
                    )
            env_low = min(env_low, interval.low)
            env_high = max(env_high, interval.high)
        return overlaps

    def find_intervals_for_value(self, value: int) -> list[IvlOut]:
        """Return every interval containing ``value`` (inclusive), in current order.

        Does not sort.
        """
        return [
            interval for interval in self if _between(value, interval.low, interval.high)
        ]

    @staticmethod
    def is_overlap(value: int, overlapped: Sequence[Interval]) -> bool:
        """True if ``value`` falls inside any of the given overlap regions."""
        return any(_between(value, o.low, o.high) for o in overlapped)

    def render(self) -> str:
        """Sort (if necessary) and draw the collection against its domain.

        See :func:`intervalset.diagram.render` for the output format.
        """
        return render_diagram(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        items = ", ".join(str(interval) for interval in self)
        return (
            f"{type(self).__name__}(min_low={self._min_low}, "
            f"max_high={self._max_high}, intervals=[{items}])"
        )

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, int):
            return bool(self.find_intervals_for_value(item))
        return any(interval == item for interval in self)
