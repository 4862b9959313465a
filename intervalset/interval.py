from dataclasses import dataclass
from typing import TypeVar


@dataclass(frozen=True, kw_only=True)
class Interval:
    """Closed integer range [low, high].

    Bounds are not checked; callers reject low > high before adding.
    """

    low: int
    high: int

    @property
    def length(self) -> int:
        """Number of integer points covered (<= 0 when low > high)."""
        return self.high - self.low + 1

    def __str__(self) -> str:
        return f"[{self.low},{self.high}]"


def by_low(interval: Interval) -> int:
    """Sort key ordering intervals by their low bound only."""
    return interval.low


IvlOut = TypeVar("IvlOut", bound="Interval", covariant=True)
