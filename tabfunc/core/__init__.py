# tabfunc/core/__init__.py
"""Core utilities shared by all tabulated functions"""

from .validation import (
    check_finite,
    to_float,
    check_borders,
    check_points_count,
    check_index,
    MIN_POINTS_COUNT,
    TabulatedFunctionError,
    InvalidConstructionError,
    PointIndexOutOfBoundsError,
    InappropriatePointError,
    IllegalStateError,
)

from .numerical import (
    EPSILON,
    evenly_spaced_x,
    in_domain,
    interpolate_segment,
    segment_index,
    insertion_index,
    has_close_x,
)

from .point import FunctionPoint

from .base import (
    SpecificationBase,
    TabulatedFunction,
    tabulation_grid,
)

__all__ = [
    # Validation
    'check_finite', 'to_float', 'check_borders', 'check_points_count', 'check_index',
    'MIN_POINTS_COUNT',
    'TabulatedFunctionError', 'InvalidConstructionError',
    'PointIndexOutOfBoundsError', 'InappropriatePointError', 'IllegalStateError',

    # Numerical
    'EPSILON', 'evenly_spaced_x', 'in_domain', 'interpolate_segment',
    'segment_index', 'insertion_index', 'has_close_x',

    # Point
    'FunctionPoint',

    # Base Classes
    'SpecificationBase', 'TabulatedFunction', 'tabulation_grid',
]
