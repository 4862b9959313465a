"""Tests for the textual diagram."""

import itertools

from intervalset import Interval, intervals
from intervalset.diagram import format_intervals, render

RULE = "=" * 34
LEGEND = "\n • Legend: ◌ (empty), ◎ (full), ● (overlap)"


def expected(
    min_low: int,
    max_high: int,
    items: str,
    gaps: str,
    overlapped: str,
    spaces: int,
    graph: str,
) -> str:
    return (
        f"\n\n{RULE}\n SUMMARY (minLow={min_low}, maxHigh={max_high})\n{RULE}"
        f"{LEGEND}"
        f"\n • Intervals: {items}"
        f"\n • Gaps: {gaps}"
        f"\n • Overlapped: {overlapped}"
        f"\n\n {min_low}{' ' * spaces}{max_high}"
        f"\n╠{graph}╣\n"
    )


def test_format_intervals():
    assert format_intervals([]) == ""
    assert (
        format_intervals([Interval(low=0, high=4), Interval(low=16, high=29)])
        == "[0,4], [16,29]"
    )


def test_scenario():
    ivls = intervals(
        Interval(low=5, high=10),
        Interval(low=8, high=15),
        Interval(low=30, high=35),
        min_low=0,
        max_high=40,
    )

    graph = (
        "◌◌◌◌◌◎◎◎●●"
        "║"
        "●◎◎◎◎◎◌◌◌◌"
        "║"
        "◌◌◌◌◌◌◌◌◌◌"
        "║"
        "◎◎◎◎◎◎◌◌◌◌"
    )
    assert ivls.render() == expected(
        0,
        40,
        "[5,10], [8,15], [30,35]",
        "[0,4], [16,29], [36,40]",
        "[8,10]",
        41,
        graph,
    )


def test_empty_collection_is_all_empty_symbols():
    out = intervals(min_low=0, max_high=40).render()

    # Trailing padding never inserts separators
    assert out == expected(0, 40, "", "[0,40]", "", 38, "◌" * 40)


def test_nonzero_min_low():
    ivls = intervals(Interval(low=7, high=12), min_low=5, max_high=25)

    assert ivls.render() == expected(
        5, 25, "[7,12]", "[5,6], [13,25]", "", 19, "◌◌◎◎◎║◎◎◎" + "◌" * 12
    )


def test_separator_follows_every_tenth_unit():
    ivls = intervals(Interval(low=0, high=29), min_low=0, max_high=30)
    out = ivls.render()

    graph = out.split("╠", 1)[1].split("╣", 1)[0]
    assert graph == ("◎" * 10 + "║") * 3
    # Axis widens by one space per separator
    axis = out.split("\n")[-3]
    assert axis == " 0" + " " * 31 + "30"


def test_render_is_str():
    ivls = intervals(Interval(low=1, high=2), min_low=0, max_high=5)

    assert str(ivls) == ivls.render() == render(ivls)


def test_insertion_order_does_not_change_output():
    items = [
        Interval(low=5, high=10),
        Interval(low=8, high=15),
        Interval(low=30, high=35),
        Interval(low=33, high=38),
    ]
    outputs = {
        intervals(*perm, min_low=0, max_high=40).render()
        for perm in itertools.permutations(items)
    }

    assert len(outputs) == 1


def test_render_is_repeatable():
    ivls = intervals(
        Interval(low=8, high=15), Interval(low=5, high=10), min_low=0, max_high=20
    )

    first = ivls.render()

    assert ivls.render() == first
    assert [(i.low, i.high) for i in ivls] == [(5, 10), (8, 15)]
