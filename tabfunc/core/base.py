# tabfunc/core/base.py
"""Base classes for all tabulated functions"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, Iterable, Iterator, List, Optional, Tuple
import math
import numpy as np

from .numerical import EPSILON, evenly_spaced_x
from .point import FunctionPoint
from .validation import (
    check_borders, check_points_count, to_float,
    InappropriatePointError, InvalidConstructionError
)


def tabulation_grid(
    left_x: float,
    right_x: float,
    points_count: Optional[int] = None,
    values: Optional[Iterable[float]] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Initial x and y arrays for a new table.

    Exactly one of points_count (y starts at 0) or values (y taken from
    values) must be given.
    """
    if points_count is not None and values is not None:
        raise InvalidConstructionError("Provide either points_count or values, not both")
    if points_count is None and values is None:
        raise InvalidConstructionError("Must provide either points_count or values")

    left, right = check_borders(left_x, right_x)

    if values is not None:
        try:
            items = list(values)
        except TypeError:
            raise InvalidConstructionError(f"values must be a sequence, got {values!r}") from None
        ys = np.array(
            [to_float(f"values[{i}]", v) for i, v in enumerate(items)], dtype=np.float64
        )
        n = check_points_count("len(values)", ys.size)
    else:
        n = check_points_count("points_count", points_count)
        ys = np.zeros(n, dtype=np.float64)

    return evenly_spaced_x(left, right, n), ys


@dataclass
class SpecificationBase:
    """Base class for all specifications"""

    def validate(self) -> None:
        """Validate specification parameters"""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {k: v for k, v in self.__dict__.items()
                if not k.startswith('_')}


class TabulatedFunction(ABC):
    """
    Real function given by samples at strictly increasing x, evaluated by
    linear interpolation between neighbouring samples.

    Every table keeps at least two points, and x-coordinates stay strictly
    increasing with no two closer than EPSILON. A failing operation raises
    and leaves the table exactly as it was.

    Instances are not thread-safe; callers sharing one across threads must
    synchronise access themselves.
    """

    kind: str = "abstract"

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    @abstractmethod
    def point_count(self) -> int:
        """Number of points"""
        pass

    @abstractmethod
    def point(self, index: int) -> FunctionPoint:
        """Copy of the point at index"""
        pass

    @abstractmethod
    def set_point(self, index: int, point: FunctionPoint) -> None:
        """Replace the point at index, keeping x strictly increasing"""
        pass

    @abstractmethod
    def point_x(self, index: int) -> float:
        pass

    @abstractmethod
    def point_y(self, index: int) -> float:
        pass

    @abstractmethod
    def set_point_y(self, index: int, y: float) -> None:
        pass

    @abstractmethod
    def delete_point(self, index: int) -> None:
        """Remove the point at index; a table never drops below two points"""
        pass

    @abstractmethod
    def add_point(self, point: FunctionPoint) -> None:
        """Insert point at the position that keeps x sorted"""
        pass

    @abstractmethod
    def left_border(self) -> float:
        pass

    @abstractmethod
    def right_border(self) -> float:
        pass

    @abstractmethod
    def value(self, x: float) -> float:
        """Interpolated value at x, NaN outside the domain"""
        pass

    def set_point_x(self, index: int, x: float) -> None:
        """Move the point at index to x, keeping its y"""
        self.set_point(index, FunctionPoint(x, self.point_y(index)))

    # ------------------------------------------------------------------
    # Derived helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check_x(x: float) -> float:
        """Check x can be ordered against stored points"""
        if not math.isfinite(x):
            raise InappropriatePointError(f"x must be finite, got {x}")
        return x

    @classmethod
    def _check_between(
        cls,
        x: float,
        prev_x: Optional[float],
        next_x: Optional[float],
    ) -> None:
        """Check x fits strictly between its neighbours"""
        cls._check_x(x)
        if prev_x is not None and x <= prev_x + EPSILON:
            raise InappropriatePointError(
                f"x={x} must be greater than previous point x={prev_x}"
            )
        if next_x is not None and x >= next_x - EPSILON:
            raise InappropriatePointError(
                f"x={x} must be less than next point x={next_x}"
            )

    def points(self) -> List[FunctionPoint]:
        """All points, in order"""
        return list(self)

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Independent arrays of x and y"""
        n = self.point_count()
        xs = np.empty(n, dtype=np.float64)
        ys = np.empty(n, dtype=np.float64)
        for i, p in enumerate(self):
            xs[i], ys[i] = p.x, p.y
        return xs, ys

    def values(self, xs: Iterable[float]) -> np.ndarray:
        """value(x) for each x"""
        return np.array([self.value(x) for x in xs], dtype=np.float64)

    def summary(self) -> Dict[str, Any]:
        """Return summary of the table"""
        return {
            "kind": self.kind,
            "points_count": self.point_count(),
            "domain": (self.left_border(), self.right_border()),
            "points": [(p.x, p.y) for p in self],
        }

    def __len__(self) -> int:
        return self.point_count()

    def __getitem__(self, index: int) -> FunctionPoint:
        return self.point(index)

    def __iter__(self) -> Iterator[FunctionPoint]:
        for i in range(self.point_count()):
            yield self.point(i)

    def __call__(self, x: float) -> float:
        return self.value(x)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(points_count={self.point_count()}, "
                f"domain=[{self.left_border()}, {self.right_border()}])")
