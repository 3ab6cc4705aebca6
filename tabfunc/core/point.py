"""Sample point of a tabulated function"""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class FunctionPoint:
    """
    One (x, y) sample.

    Frozen, so a point handed out by a table is an independent value and
    cannot be used to change the table behind its back.
    """
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def with_x(self, x: float) -> "FunctionPoint":
        return replace(self, x=x)

    def with_y(self, y: float) -> "FunctionPoint":
        return replace(self, y=y)

    def __iter__(self):
        yield self.x
        yield self.y
