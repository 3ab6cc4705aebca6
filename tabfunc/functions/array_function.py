# tabfunc/functions/array_function.py
"""Tabulated function stored in a contiguous resizable array"""
from typing import Iterable, Optional
import logging
import math
import numpy as np

from tabfunc.core.base import TabulatedFunction, tabulation_grid
from tabfunc.core.numerical import (
    has_close_x, in_domain, insertion_index, interpolate_segment, segment_index
)
from tabfunc.core.point import FunctionPoint
from tabfunc.core.validation import (
    check_index, IllegalStateError, InappropriatePointError, MIN_POINTS_COUNT
)

logger = logging.getLogger(__name__)

INITIAL_CAPACITY = 10


class ArrayTabulatedFunction(TabulatedFunction):
    """
    Points kept in one float64 buffer of shape (capacity, 2).

    Rows [0, count) hold (x, y) pairs sorted by x; rows past count are NaN.
    Index access is O(1); insertion and deletion shift the tail.
    """

    kind = "array"

    def __init__(
        self,
        left_x: float,
        right_x: float,
        points_count: Optional[int] = None,
        values: Optional[Iterable[float]] = None,
    ):
        xs, ys = tabulation_grid(left_x, right_x, points_count, values)
        self._count = xs.size
        self._points = np.full(
            (max(2 * self._count, INITIAL_CAPACITY), 2), np.nan, dtype=np.float64
        )
        self._points[:self._count, 0] = xs
        self._points[:self._count, 1] = ys

    def _xs(self) -> np.ndarray:
        return self._points[:self._count, 0]

    def capacity(self) -> int:
        """Rows allocated in the backing buffer"""
        return self._points.shape[0]

    # Domain and evaluation

    def left_border(self) -> float:
        return float(self._points[0, 0])

    def right_border(self) -> float:
        return float(self._points[self._count - 1, 0])

    def value(self, x: float) -> float:
        x = float(x)
        if not in_domain(x, self.left_border(), self.right_border()):
            return math.nan

        i = segment_index(self._xs(), x)
        x1, y1 = self._points[i]
        x2, y2 = self._points[i + 1]
        return interpolate_segment(x, float(x1), float(y1), float(x2), float(y2))

    # Point access

    def point_count(self) -> int:
        return self._count

    def point(self, index: int) -> FunctionPoint:
        index = check_index(index, self._count)
        x, y = self._points[index]
        return FunctionPoint(x, y)

    def set_point(self, index: int, point: FunctionPoint) -> None:
        index = check_index(index, self._count)
        point = FunctionPoint(*point)
        self._check_between(
            point.x,
            float(self._points[index - 1, 0]) if index > 0 else None,
            float(self._points[index + 1, 0]) if index < self._count - 1 else None,
        )
        self._points[index] = (point.x, point.y)

    def point_x(self, index: int) -> float:
        index = check_index(index, self._count)
        return float(self._points[index, 0])

    def point_y(self, index: int) -> float:
        index = check_index(index, self._count)
        return float(self._points[index, 1])

    def set_point_y(self, index: int, y: float) -> None:
        index = check_index(index, self._count)
        self._points[index, 1] = float(y)

    # Structural changes

    def delete_point(self, index: int) -> None:
        index = check_index(index, self._count)
        if self._count <= MIN_POINTS_COUNT:
            raise IllegalStateError(
                f"Cannot delete point: table must keep at least {MIN_POINTS_COUNT} points"
            )

        self._points[index:self._count - 1] = self._points[index + 1:self._count]
        self._count -= 1
        self._points[self._count] = np.nan
        logger.debug("Deleted point %d, %d points left", index, self._count)

    def add_point(self, point: FunctionPoint) -> None:
        point = FunctionPoint(*point)
        self._check_x(point.x)
        if has_close_x(self._xs(), point.x):
            raise InappropriatePointError(f"Point with x={point.x} already exists")

        index = insertion_index(self._xs(), point.x)
        if self._count == self.capacity():
            self._grow()

        self._points[index + 1:self._count + 1] = self._points[index:self._count]
        self._points[index] = (point.x, point.y)
        self._count += 1
        logger.debug("Inserted point x=%g at index %d", point.x, index)

    def _grow(self) -> None:
        """Double the backing buffer"""
        new_points = np.full((2 * self.capacity(), 2), np.nan, dtype=np.float64)
        new_points[:self._count] = self._points[:self._count]
        self._points = new_points
        logger.debug("Grew point buffer to capacity %d", self.capacity())
