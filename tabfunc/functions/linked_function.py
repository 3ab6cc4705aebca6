# tabfunc/functions/linked_function.py
"""Tabulated function stored in a doubly-linked ring"""
from typing import Iterable, Iterator, Optional
import logging
import math

from tabfunc.core.base import TabulatedFunction, tabulation_grid
from tabfunc.core.numerical import EPSILON, in_domain, interpolate_segment
from tabfunc.core.point import FunctionPoint
from tabfunc.core.validation import (
    check_index, IllegalStateError, InappropriatePointError, MIN_POINTS_COUNT
)

logger = logging.getLogger(__name__)


class _FunctionNode:
    __slots__ = ("point", "prev", "next")

    def __init__(self, point: Optional[FunctionPoint] = None):
        self.point = point
        self.prev = self
        self.next = self


class LinkedListTabulatedFunction(TabulatedFunction):
    """
    Points kept in a circular doubly-linked list around a sentinel head.

    The head never holds a point: head.next is the first point and
    head.prev the last. The most recently reached (node, index) pair is
    cached so that sequential index access costs O(1) per step.
    """

    kind = "linked"

    def __init__(
        self,
        left_x: float,
        right_x: float,
        points_count: Optional[int] = None,
        values: Optional[Iterable[float]] = None,
    ):
        xs, ys = tabulation_grid(left_x, right_x, points_count, values)
        self._head = _FunctionNode()
        self._count = 0
        for x, y in zip(xs, ys):
            node = _FunctionNode(FunctionPoint(x, y))
            self._link_after(self._head.prev, node)
            self._count += 1

        self._cached_node = self._head.next
        self._cached_index = 0

    # ------------------------------------------------------------------
    # Ring maintenance
    # ------------------------------------------------------------------

    @staticmethod
    def _link_after(node: _FunctionNode, new_node: _FunctionNode) -> None:
        new_node.prev = node
        new_node.next = node.next
        node.next.prev = new_node
        node.next = new_node

    def _nodes(self) -> Iterator[_FunctionNode]:
        node = self._head.next
        while node is not self._head:
            yield node
            node = node.next

    def _walk(self, index: int) -> _FunctionNode:
        """
        Node at a checked index, starting from whichever of the cache,
        the head or the tail is closest.
        """
        last = self._count - 1
        if abs(index - self._cached_index) < min(index, last - index):
            node, i = self._cached_node, self._cached_index
        elif index <= last - index:
            node, i = self._head.next, 0
        else:
            node, i = self._head.prev, last

        while i < index:
            node = node.next
            i += 1
        while i > index:
            node = node.prev
            i -= 1
        return node

    def _node_at(self, index: int) -> _FunctionNode:
        index = check_index(index, self._count)
        node = self._walk(index)
        self._cached_node, self._cached_index = node, index
        return node

    def _insert_after(self, prev: _FunctionNode, index: int, point: FunctionPoint) -> None:
        """Insert point after prev, which sits at index - 1 (head for index 0)"""
        node = _FunctionNode(point)
        self._link_after(prev, node)
        self._count += 1
        self._cached_node, self._cached_index = node, index

    def _remove(self, index: int) -> None:
        node = self._walk(index)
        node.prev.next = node.next
        node.next.prev = node.prev
        self._count -= 1

        if self._cached_node is node:
            if index < self._count:
                self._cached_node, self._cached_index = node.next, index
            else:
                self._cached_node, self._cached_index = self._head.next, 0
        elif self._cached_index > index:
            self._cached_index -= 1

        node.prev = node.next = None

    # ------------------------------------------------------------------
    # Domain and evaluation
    # ------------------------------------------------------------------

    def left_border(self) -> float:
        return self._head.next.point.x

    def right_border(self) -> float:
        return self._head.prev.point.x

    def value(self, x: float) -> float:
        x = float(x)
        if not in_domain(x, self.left_border(), self.right_border()):
            return math.nan

        last = self._head.prev
        node = self._head.next
        while node.next is not last and node.next.point.x < x - EPSILON:
            node = node.next

        left, right = node.point, node.next.point
        return interpolate_segment(x, left.x, left.y, right.x, right.y)

    # ------------------------------------------------------------------
    # Point access
    # ------------------------------------------------------------------

    def point_count(self) -> int:
        return self._count

    def point(self, index: int) -> FunctionPoint:
        return self._node_at(index).point

    def set_point(self, index: int, point: FunctionPoint) -> None:
        node = self._node_at(index)
        point = FunctionPoint(*point)
        self._check_between(
            point.x,
            node.prev.point.x if node.prev is not self._head else None,
            node.next.point.x if node.next is not self._head else None,
        )
        node.point = point

    def point_x(self, index: int) -> float:
        return self._node_at(index).point.x

    def point_y(self, index: int) -> float:
        return self._node_at(index).point.y

    def set_point_y(self, index: int, y: float) -> None:
        node = self._node_at(index)
        node.point = node.point.with_y(y)

    # ------------------------------------------------------------------
    # Structural changes
    # ------------------------------------------------------------------

    def delete_point(self, index: int) -> None:
        index = check_index(index, self._count)
        if self._count <= MIN_POINTS_COUNT:
            raise IllegalStateError(
                f"Cannot delete point: table must keep at least {MIN_POINTS_COUNT} points"
            )
        self._remove(index)
        logger.debug("Deleted point %d, %d points left", index, self._count)

    def add_point(self, point: FunctionPoint) -> None:
        point = FunctionPoint(*point)
        self._check_x(point.x)
        for node in self._nodes():
            if abs(node.point.x - point.x) < EPSILON:
                raise InappropriatePointError(f"Point with x={point.x} already exists")

        prev, index = self._head, 0
        while prev.next is not self._head and prev.next.point.x < point.x - EPSILON:
            prev = prev.next
            index += 1

        self._insert_after(prev, index, point)
        logger.debug("Inserted point x=%g at index %d", point.x, index)
