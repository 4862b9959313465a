"""Textual diagram of an interval collection against its domain.

Layout (one line each, preceded by a blank line):

    ==================================
     SUMMARY (minLow=0, maxHigh=40)
    ==================================
     • Legend: ◌ (empty), ◎ (full), ● (overlap)
     • Intervals: [5,10], [8,15], [30,35]
     • Gaps: [0,4], [16,29], [36,40]
     • Overlapped: [8,10]

     0                                         40
    ╠◌◌◌◌◌◎◎◎●●║●◎◎◎◎◎◌◌◌◌║◌◌◌◌◌◌◌◌◌◌║◎◎◎◎◎◎◌◌◌◌╣

The graph has one symbol per domain unit and a separator after every unit
whose successor is a multiple of BLOCK_SIZE. Cost is linear in the domain
width.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from intervalset.interval import Interval
from intervalset.util import (
    BLOCK_SIZE,
    EMPTY_SYMBOL,
    FULL_SYMBOL,
    LEFT_FRAME,
    OVERLAP_SYMBOL,
    RIGHT_FRAME,
    SEPARATOR,
)

if TYPE_CHECKING:
    from intervalset.core import Intervals

logger = logging.getLogger(__name__)

_RULE = "=" * 34


def format_intervals(intervals: Iterable[Interval]) -> str:
    """Join intervals as ``[low,high], [low,high], ...``."""
    return ", ".join(str(interval) for interval in intervals)


def _graph(collection: "Intervals", overlapped: list[Interval]) -> tuple[str, int]:
    """Draw the symbol line; returns it with the number of separators."""
    parts: list[str] = []
    separators = 0
    index = collection.min_low

    def advance() -> None:
        nonlocal index, separators
        index += 1
        if index % BLOCK_SIZE == 0:
            parts.append(SEPARATOR)
            separators += 1

    for interval in collection:
        for _ in range(index, interval.low):
            parts.append(EMPTY_SYMBOL)
            advance()
        for _ in range(index, interval.high + 1):
            if collection.is_overlap(index, overlapped):
                parts.append(OVERLAP_SYMBOL)
            else:
                parts.append(FULL_SYMBOL)
            advance()

    # Trailing padding carries no separators
    parts.extend(EMPTY_SYMBOL for _ in range(index, collection.max_high))
    return "".join(parts), separators


def render(collection: "Intervals") -> str:
    """Render the summary and diagram for a collection.

    Sorts the collection first, then recomputes overlaps and gaps. The only
    state change is the collection's sort.
    """
    collection.sort()
    min_low, max_high = collection.min_low, collection.max_high
    logger.debug("rendering domain [%d, %d]", min_low, max_high)

    overlapped = collection.overlapped()
    graph, separators = _graph(collection, overlapped)
    gaps = collection.gaps()

    intro = f"\n{_RULE}\n SUMMARY (minLow={min_low}, maxHigh={max_high})\n{_RULE}"
    legend = (
        f"\n • Legend: {EMPTY_SYMBOL} (empty), {FULL_SYMBOL} (full), "
        f"{OVERLAP_SYMBOL} (overlap)"
    )
    interval_text = f"\n • Intervals: {format_intervals(collection)}"
    gaps_text = f"\n • Gaps: {format_intervals(gaps)}"
    overlap_text = f"\n • Overlapped: {format_intervals(overlapped)}"

    padding = " " * max(0, max_high + separators - 2 - min_low)
    axis = f" {min_low}{padding}{max_high}"
    graph_text = f"\n\n{axis}\n{LEFT_FRAME}{graph}{RIGHT_FRAME}"

    return (
        "\n"
        + intro
        + legend
        + interval_text
        + gaps_text
        + overlap_text
        + graph_text
        + "\n"
    )
