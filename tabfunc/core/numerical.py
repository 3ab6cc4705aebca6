"""Shared numerical rules for tabulated functions"""
from typing import Sequence
import numpy as np


# Tolerance for "equal enough" x-coordinates and border proximity.
# Both storage engines compare against this single value.
EPSILON = 1e-9


def evenly_spaced_x(left_x: float, right_x: float, n: int) -> np.ndarray:
    """
    Grid of n evenly spaced x-coordinates from left_x to right_x.

    The last element is exactly right_x.
    """
    return np.linspace(left_x, right_x, n, dtype=np.float64)


def in_domain(x: float, left_x: float, right_x: float) -> bool:
    """True if x lies within [left_x, right_x] widened by EPSILON"""
    return left_x - EPSILON <= x <= right_x + EPSILON


def interpolate_segment(
    x: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
) -> float:
    """
    Value at x on the segment (x1, y1)-(x2, y2).

    Exact hits on either end return that sample's y untouched, and a
    degenerate segment returns y1.
    """
    if abs(x2 - x1) < EPSILON:
        return y1
    if abs(x - x1) < EPSILON:
        return y1
    if abs(x - x2) < EPSILON:
        return y2
    return y1 + (y2 - y1) * (x - x1) / (x2 - x1)


def segment_index(xs: Sequence[float], x: float) -> int:
    """
    Index i of the first segment [xs[i], xs[i+1]] with x <= xs[i+1] + EPSILON.

    xs must be sorted and hold at least two values; the result is clamped to
    the last segment.
    """
    xs = np.asarray(xs, dtype=np.float64)
    i = int(np.searchsorted(xs[1:], x - EPSILON, side="left"))
    return min(i, xs.size - 2)


def insertion_index(xs: Sequence[float], x: float) -> int:
    """Number of values in sorted xs lying below x - EPSILON"""
    xs = np.asarray(xs, dtype=np.float64)
    return int(np.searchsorted(xs, x - EPSILON, side="left"))


def has_close_x(xs: Sequence[float], x: float) -> bool:
    """True if any value in xs is within EPSILON of x"""
    xs = np.asarray(xs, dtype=np.float64)
    return bool(np.any(np.abs(xs - x) < EPSILON))
