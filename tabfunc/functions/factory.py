# tabfunc/functions/factory.py
"""Building tabulated functions by storage kind"""
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Type

from tabfunc.core.base import SpecificationBase, TabulatedFunction, tabulation_grid
from tabfunc.core.numerical import evenly_spaced_x
from tabfunc.core.validation import (
    check_borders, check_points_count, InvalidConstructionError
)
from .array_function import ArrayTabulatedFunction
from .linked_function import LinkedListTabulatedFunction


TABLE_KINDS: Dict[str, Type[TabulatedFunction]] = {
    ArrayTabulatedFunction.kind: ArrayTabulatedFunction,
    LinkedListTabulatedFunction.kind: LinkedListTabulatedFunction,
}


@dataclass
class TabulationSpec(SpecificationBase):
    """Specification for a new tabulated function"""
    left_x: float                               # Left domain border
    right_x: float                              # Right domain border
    points_count: Optional[int] = None          # Evenly spaced points, y = 0
    values: Optional[Sequence[float]] = None    # Or: y at evenly spaced points
    kind: str = "array"                         # Storage engine, see TABLE_KINDS

    def _engine(self) -> Type[TabulatedFunction]:
        if self.kind not in TABLE_KINDS:
            raise InvalidConstructionError(
                f"Unknown table kind {self.kind!r}, expected one of {sorted(TABLE_KINDS)}"
            )
        return TABLE_KINDS[self.kind]

    def validate(self) -> None:
        self._engine()
        tabulation_grid(self.left_x, self.right_x, self.points_count, self.values)

    def build(self) -> TabulatedFunction:
        return self._engine()(
            self.left_x, self.right_x,
            points_count=self.points_count, values=self.values,
        )


def new_table(
    left_x: float,
    right_x: float,
    points_count: Optional[int] = None,
    values: Optional[Sequence[float]] = None,
    kind: str = "array",
) -> TabulatedFunction:
    """
    Create a tabulated function over [left_x, right_x].

    Args:
        left_x: Left domain border
        right_x: Right domain border, must exceed left_x
        points_count: Number of evenly spaced points, all with y = 0
        values: y at evenly spaced points (instead of points_count)
        kind: "array" or "linked"

    Returns:
        New table of the requested kind
    """
    return TabulationSpec(left_x, right_x, points_count, values, kind).build()


def tabulate(
    func: Callable[[float], float],
    left_x: float,
    right_x: float,
    points_count: int,
    kind: str = "array",
) -> TabulatedFunction:
    """Sample func at points_count evenly spaced x over [left_x, right_x]"""
    left, right = check_borders(left_x, right_x)
    n = check_points_count("points_count", points_count)
    values = [func(float(x)) for x in evenly_spaced_x(left, right, n)]
    return new_table(left, right, values=values, kind=kind)
