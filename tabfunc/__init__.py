# tabfunc/__init__.py
"""Tabulated functions with linear interpolation"""

from .core import (
    EPSILON,
    FunctionPoint,
    TabulatedFunction,
    TabulatedFunctionError,
    InvalidConstructionError,
    PointIndexOutOfBoundsError,
    InappropriatePointError,
    IllegalStateError,
)

from .functions import (
    ArrayTabulatedFunction,
    LinkedListTabulatedFunction,
    TABLE_KINDS,
    TabulationSpec,
    new_table,
    tabulate,
)

__version__ = "0.1.0"

__all__ = [
    'EPSILON', 'FunctionPoint', 'TabulatedFunction',

    # Errors
    'TabulatedFunctionError', 'InvalidConstructionError',
    'PointIndexOutOfBoundsError', 'InappropriatePointError', 'IllegalStateError',

    # Engines
    'ArrayTabulatedFunction', 'LinkedListTabulatedFunction',
    'TABLE_KINDS', 'TabulationSpec', 'new_table', 'tabulate',
]
