# tabfunc/core/validation.py
"""Exceptions and argument checks shared by all tabulated functions"""
from typing import Union
import math
import operator


class TabulatedFunctionError(Exception):
    """Base exception for all tabulated function operations"""
    pass

class InvalidConstructionError(TabulatedFunctionError, ValueError):
    """Table cannot be built from the given borders and points"""
    pass

class PointIndexOutOfBoundsError(TabulatedFunctionError, IndexError):
    """Point index outside the valid range"""
    pass

class InappropriatePointError(TabulatedFunctionError, ValueError):
    """Point would break the ordering or uniqueness of x-coordinates"""
    pass

class IllegalStateError(TabulatedFunctionError, RuntimeError):
    """Operation would leave the table with fewer than two points"""
    pass


MIN_POINTS_COUNT = 2


def check_finite(name: str, value: Union[float, int]) -> float:
    """Check value is a finite number"""
    v = to_float(name, value)
    if not math.isfinite(v):
        raise InvalidConstructionError(f"{name} must be finite, got {v}")
    return v

def to_float(name: str, value) -> float:
    """Convert value to float, rejecting anything non-numeric"""
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidConstructionError(f"{name} must be a number, got {value!r}") from None

def check_borders(left_x: float, right_x: float) -> tuple:
    """Check left_x < right_x"""
    left = check_finite("left_x", left_x)
    right = check_finite("right_x", right_x)
    if left >= right:
        raise InvalidConstructionError(
            f"left_x must be < right_x, got left_x={left}, right_x={right}"
        )
    return left, right

def check_points_count(name: str, count: int) -> int:
    """Check there are enough points to define a table"""
    try:
        n = operator.index(count)
    except TypeError:
        raise InvalidConstructionError(f"{name} must be an integer, got {count!r}") from None
    if n < MIN_POINTS_COUNT:
        raise InvalidConstructionError(
            f"{name} must be >= {MIN_POINTS_COUNT}, got {n}"
        )
    return n

def check_index(index: int, count: int) -> int:
    """
    Check index lies in [0, count).

    Negative indices are rejected rather than wrapped.
    """
    upper = count - 1
    try:
        index = operator.index(index)
    except TypeError:
        raise PointIndexOutOfBoundsError(f"Index must be an integer, got {index!r}") from None
    if index < 0 or index > upper:
        raise PointIndexOutOfBoundsError(
            f"Index {index} out of range [0, {upper}]"
        )
    return index
