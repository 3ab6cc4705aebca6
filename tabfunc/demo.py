# tabfunc/demo.py
"""
Console walk-through of both storage engines.

Tabulates y = x^2, prints the table and a sweep of interpolated values,
adds a point, then triggers each error kind and prints what was raised.
"""
import argparse
import logging
import sys
from typing import Callable, List, TextIO

import numpy as np

from tabfunc.core.point import FunctionPoint
from tabfunc.core.validation import TabulatedFunctionError
from tabfunc.functions.factory import TABLE_KINDS, new_table, tabulate


def show_table(table, out: TextIO) -> None:
    print(f"Domain: [{table.left_border()}, {table.right_border()}]", file=out)
    print(f"Points: {table.point_count()}", file=out)
    print(" ".join(f"({p.x:.2f}; {p.y:.2f})" for p in table), file=out)


def show_values(table, xs, out: TextIO) -> None:
    for x, y in zip(xs, table.values(xs)):
        print(f"f({x:.1f}) = {y:.2f}", file=out)


def run_engine(kind: str, left: float, right: float, points: int, out: TextIO) -> None:
    print(f"=== {kind} ===", file=out)
    table = tabulate(lambda x: x * x, left, right, points, kind=kind)
    print("y = x^2", file=out)
    show_table(table, out)
    show_values(table, np.arange(left - 1.0, right + 1.0 + 0.5, 1.0), out)

    extra = FunctionPoint((left + right) / 2 + 0.5 * (right - left) / (points - 1), 0.0)
    extra = extra.with_y(extra.x ** 2)
    try:
        table.add_point(extra)
        print(f"Added point ({extra.x}; {extra.y})", file=out)
    except TabulatedFunctionError as e:
        print(f"Could not add point: {e}", file=out)


def error_cases(kind: str) -> List[Callable[[], object]]:
    def reversed_borders():
        return new_table(5, 0, 3, kind=kind)

    def single_point():
        return new_table(0, 5, 1, kind=kind)

    def index_out_of_range():
        return new_table(0, 4, 3, kind=kind).point_x(10)

    def out_of_order_point():
        new_table(0, 4, 3, kind=kind).set_point(1, FunctionPoint(5, 25))

    def delete_below_minimum():
        new_table(0, 2, 2, kind=kind).delete_point(0)

    def duplicate_point():
        new_table(0, 4, 3, kind=kind).add_point(FunctionPoint(2, 1))

    return [reversed_borders, single_point, index_out_of_range,
            out_of_order_point, delete_below_minimum, duplicate_point]


def run_errors(kind: str, out: TextIO) -> None:
    print(f"=== {kind}: errors ===", file=out)
    for case in error_cases(kind):
        try:
            case()
            print(f"{case.__name__}: no error", file=out)
        except TabulatedFunctionError as e:
            print(f"{case.__name__}: {type(e).__name__}: {e}", file=out)


def build_parser():
    p = argparse.ArgumentParser(prog="tabfunc-demo", description=__doc__)
    p.add_argument("--kind", choices=sorted(TABLE_KINDS) + ["all"], default="all",
                   help="Storage engine to demonstrate")
    p.add_argument("--left", type=float, default=0.0, help="Left domain border")
    p.add_argument("--right", type=float, default=4.0, help="Right domain border")
    p.add_argument("--points", type=int, default=5, help="Number of points")
    p.add_argument("--verbose", "-v", action="store_true", help="Log table changes")
    return p


def main(argv=None, out: TextIO = None) -> int:
    args = build_parser().parse_args(argv)
    out = out or sys.stdout
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    kinds = sorted(TABLE_KINDS) if args.kind == "all" else [args.kind]
    try:
        for kind in kinds:
            run_engine(kind, args.left, args.right, args.points, out)
    except TabulatedFunctionError as e:
        print(f"Error: {e}", file=out)
        return 1

    for kind in kinds:
        run_errors(kind, out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
