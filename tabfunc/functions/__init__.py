# tabfunc/functions/__init__.py
"""Storage engines for tabulated functions"""

from .array_function import ArrayTabulatedFunction, INITIAL_CAPACITY
from .linked_function import LinkedListTabulatedFunction
from .factory import TABLE_KINDS, TabulationSpec, new_table, tabulate

__all__ = [
    # Engines
    'ArrayTabulatedFunction', 'INITIAL_CAPACITY',
    'LinkedListTabulatedFunction',

    # Factory
    'TABLE_KINDS', 'TabulationSpec', 'new_table', 'tabulate',
]
