"""Deriving page geometry from dots and cells measured by hand."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from .dots import ScaleSettings

Point = Tuple[int, int]

MIN_DOT_WIDTH_FLOOR = 5
MIN_WIDTH_FACTOR = 0.5
MAX_WIDTH_FACTOR = 1.2
SEARCH_ERROR_FLOOR = 5


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def average_and_spread(values: Iterable[int]) -> Tuple[int, int]:
    """Integer average of the measured distances and half their range.

    The average is truncated toward zero.
    """
    measured = [int(v) for v in values]
    if not measured:
        raise ValueError("at least one measurement is needed")
    average = _trunc_div(sum(measured), len(measured))
    spread = _trunc_div(max(measured) - min(measured), 2)
    return average, spread


def derive_dot_settings(
    min_widths: Iterable[int],
    max_widths: Iterable[int],
    dot_distance: Sequence[int],
    dot_spread: Sequence[int],
) -> ScaleSettings:
    """Build settings from measured dot widths and dot spacing.

    The smallest accepted dot is half the narrowest measured dot but never
    below five pixels; the largest is 1.2 times the widest measured dot.
    The search error is the measured spread, at least five pixels each way.
    """
    smallest = list(min_widths)
    largest = list(max_widths)
    if not smallest or not largest:
        raise ValueError("dot widths must be measured at least once")
    if len(dot_distance) != 2 or len(dot_spread) != 2:
        raise ValueError("distance and spread must each be an (x, y) pair")
    min_width = max(int(min(smallest) * MIN_WIDTH_FACTOR), MIN_DOT_WIDTH_FLOOR)
    max_width = int(max(largest) * MAX_WIDTH_FACTOR)
    spread_x, spread_y = (int(v) for v in dot_spread)
    return ScaleSettings(
        dot_distance=(int(dot_distance[0]), int(dot_distance[1])),
        min_dot_width=min_width,
        max_dot_width=max_width,
        dot_search_error=(
            max(SEARCH_ERROR_FLOOR, spread_x),
            max(SEARCH_ERROR_FLOOR, spread_y),
        ),
    )


def point_distance(first: Point, second: Point) -> Point:
    """Horizontal and vertical distance between two points."""
    return abs(first[0] - second[0]), abs(first[1] - second[1])