import math

import numpy as np
import pytest

from tabfunc import (
    ArrayTabulatedFunction,
    FunctionPoint,
    IllegalStateError,
    InappropriatePointError,
    InvalidConstructionError,
    LinkedListTabulatedFunction,
    PointIndexOutOfBoundsError,
)

ENGINES = [ArrayTabulatedFunction, LinkedListTabulatedFunction]


def squares(engine):
    mut = engine(0, 4, 5)
    for i in range(mut.point_count()):
        x = mut.point_x(i)
        mut.set_point_y(i, x * x)
    return mut


def assert_strictly_increasing(mut):
    xs = [mut.point_x(i) for i in range(mut.point_count())]
    assert all(a < b for a, b in zip(xs, xs[1:]))


@pytest.mark.parametrize("engine", ENGINES)
def test_evenly_spaced_construction(engine):
    mut = engine(0, 4, 5)
    assert mut.point_count() == 5
    assert [mut.point_x(i) for i in range(5)] == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert [mut.point_y(i) for i in range(5)] == [0.0] * 5


@pytest.mark.parametrize("engine", ENGINES)
def test_construction_from_values(engine):
    mut = engine(-1, 1, values=[3, 1, 2])
    assert mut.point(0) == FunctionPoint(-1.0, 3.0)
    assert mut.point(1) == FunctionPoint(0.0, 1.0)
    assert mut.point(2) == FunctionPoint(1.0, 2.0)


@pytest.mark.parametrize("engine", ENGINES)
@pytest.mark.parametrize("args,kwargs", [
    ((5, 0, 3), {}),
    ((0, 5, 1), {}),
    ((2, 2, 3), {}),
    ((0, 5), {"values": [1.0]}),
    ((0, 5), {}),
    ((0, 5, 3), {"values": [1, 2, 3]}),
    ((0, math.inf, 3), {}),
    ((0, 4, 2.9), {}),
    ((0, 4, "3"), {}),
    ((0, 4), {"values": [1, "x"]}),
    ((0, 4), {"values": 5}),
    (("left", 4, 3), {}),
    ((0, None, 3), {}),
])
def test_invalid_construction(engine, args, kwargs):
    with pytest.raises(InvalidConstructionError):
        engine(*args, **kwargs)


@pytest.mark.parametrize("engine", ENGINES)
def test_interpolation_is_linear_not_generating_function(engine):
    mut = squares(engine)
    assert mut.value(2.5) == 6.5
    assert mut.value(2.5) != 6.25
    assert mut.value(0.5) == 0.5
    assert mut(3.25) == pytest.approx(9 + 7 * 0.25)


@pytest.mark.parametrize("engine", ENGINES)
def test_value_on_samples_is_exact(engine):
    mut = squares(engine)
    for i in range(mut.point_count()):
        assert mut.value(mut.point_x(i)) == mut.point_y(i)
    assert mut.value(2 + 1e-12) == 4.0
    assert mut.value(3 - 1e-12) == 9.0


@pytest.mark.parametrize("engine", ENGINES)
def test_borders(engine):
    mut = squares(engine)
    assert mut.left_border() == 0.0
    assert mut.right_border() == 4.0
    assert mut.value(mut.left_border()) == mut.point_y(0)
    assert mut.value(mut.right_border()) == mut.point_y(mut.point_count() - 1)


@pytest.mark.parametrize("engine", ENGINES)
def test_out_of_domain_is_nan(engine):
    mut = squares(engine)
    assert math.isnan(mut.value(mut.left_border() - 1.0))
    assert math.isnan(mut.value(mut.right_border() + 1.0))
    assert math.isnan(mut.value(4 + 1e-6))
    assert math.isnan(mut.value(math.nan))


@pytest.mark.parametrize("engine", ENGINES)
def test_just_outside_border_snaps_to_end_sample(engine):
    mut = squares(engine)
    assert mut.value(4 + 1e-10) == 16.0
    assert mut.value(-1e-10) == 0.0


@pytest.mark.parametrize("engine", ENGINES)
def test_point_index_range(engine):
    mut = engine(0, 4, values=[1, 2, 3])
    before = mut.points()
    for bad in (-1, 3, 10):
        with pytest.raises(PointIndexOutOfBoundsError):
            mut.point(bad)
        with pytest.raises(PointIndexOutOfBoundsError):
            mut.set_point(bad, FunctionPoint(1, 1))
        with pytest.raises(PointIndexOutOfBoundsError):
            mut.set_point_x(bad, 1.0)
        with pytest.raises(PointIndexOutOfBoundsError):
            mut.point_x(bad)
        with pytest.raises(PointIndexOutOfBoundsError):
            mut.point_y(bad)
        with pytest.raises(PointIndexOutOfBoundsError):
            mut.set_point_y(bad, 1.0)
        with pytest.raises(PointIndexOutOfBoundsError):
            mut.delete_point(bad)
    with pytest.raises(IndexError):
        mut[3]
    assert mut.points() == before


@pytest.mark.parametrize("engine", ENGINES)
def test_set_point_y_round_trip(engine):
    mut = engine(0, 4, 5)
    for i, y in enumerate([0.1, -3.7, 1e300, -0.0, 2.0 / 3.0]):
        mut.set_point_y(i, y)
        assert mut.point_y(i) == y


@pytest.mark.parametrize("engine", ENGINES)
def test_set_point_keeps_order(engine):
    mut = engine(0, 4, 3)
    mut.set_point(1, FunctionPoint(1.5, 7))
    assert mut.point(1) == FunctionPoint(1.5, 7)

    for bad_x in (0.0, -1.0, 4.0, 5.0, 1e-10, 4 - 1e-10, math.nan):
        with pytest.raises(InappropriatePointError):
            mut.set_point(1, FunctionPoint(bad_x, 0))
    assert mut.point(1) == FunctionPoint(1.5, 7)


@pytest.mark.parametrize("engine", ENGINES)
def test_set_point_at_ends_moves_borders(engine):
    mut = engine(0, 4, 3)
    mut.set_point(0, FunctionPoint(-2, 1))
    mut.set_point(2, FunctionPoint(10, 1))
    assert mut.left_border() == -2.0
    assert mut.right_border() == 10.0
    with pytest.raises(InappropriatePointError):
        mut.set_point(0, FunctionPoint(2, 1))


@pytest.mark.parametrize("engine", ENGINES)
def test_set_point_x_keeps_y(engine):
    mut = squares(engine)
    mut.set_point_x(2, 2.5)
    assert mut.point(2) == FunctionPoint(2.5, 4.0)
    with pytest.raises(InappropriatePointError):
        mut.set_point_x(2, 3.0)
    assert mut.point(2) == FunctionPoint(2.5, 4.0)


@pytest.mark.parametrize("engine", ENGINES)
def test_returned_points_are_independent(engine):
    mut = squares(engine)
    p = mut.point(1)
    with pytest.raises(AttributeError):
        p.y = 100.0
    moved = p.with_y(100.0)
    assert moved.y == 100.0
    assert mut.point_y(1) == 1.0


@pytest.mark.parametrize("engine", ENGINES)
def test_delete_down_to_minimum(engine):
    mut = engine(0, 4, 3)
    mut.delete_point(1)
    assert mut.point_count() == 2
    with pytest.raises(IllegalStateError):
        mut.delete_point(0)
    assert mut.point_count() == 2
    assert mut.left_border() == 0.0
    assert mut.right_border() == 4.0


@pytest.mark.parametrize("engine", ENGINES)
def test_delete_ends_moves_borders(engine):
    mut = squares(engine)
    mut.delete_point(0)
    mut.delete_point(mut.point_count() - 1)
    assert mut.left_border() == 1.0
    assert mut.right_border() == 3.0
    assert mut.value(2.5) == 6.5
    assert math.isnan(mut.value(0.5))


@pytest.mark.parametrize("engine", ENGINES)
def test_add_point_sorted_insertion(engine):
    mut = squares(engine)
    mut.add_point(FunctionPoint(2.5, 6.25))
    mut.add_point(FunctionPoint(-1, 1))
    mut.add_point(FunctionPoint(5, 25))
    assert mut.point_count() == 8
    assert [p.x for p in mut] == [-1.0, 0.0, 1.0, 2.0, 2.5, 3.0, 4.0, 5.0]
    assert mut.value(2.5) == 6.25
    assert mut.left_border() == -1.0
    assert mut.right_border() == 5.0


@pytest.mark.parametrize("engine", ENGINES)
def test_add_duplicate_point_rejected(engine):
    mut = engine(0, 4, 3)
    for x in (2.0, 2 + 1e-10, 0.0, 4.0 - 1e-12):
        with pytest.raises(InappropriatePointError):
            mut.add_point(FunctionPoint(x, 1))
    with pytest.raises(InappropriatePointError):
        mut.add_point(FunctionPoint(math.nan, 1))
    assert mut.point_count() == 3
    assert [p.x for p in mut] == [0.0, 2.0, 4.0]


@pytest.mark.parametrize("engine", ENGINES)
def test_add_point_accepts_tuples(engine):
    mut = engine(0, 4, 3)
    mut.add_point((1, 5))
    assert mut.point(1) == FunctionPoint(1.0, 5.0)


@pytest.mark.parametrize("engine", ENGINES)
def test_invariants_after_mixed_mutations(engine):
    mut = engine(0, 10, 11)
    rng = np.random.default_rng(7)
    for _ in range(200):
        op = rng.integers(0, 3)
        if op == 0:
            try:
                mut.add_point(FunctionPoint(rng.uniform(-5, 15), rng.uniform(-1, 1)))
            except InappropriatePointError:
                pass
        elif op == 1:
            try:
                mut.delete_point(int(rng.integers(0, mut.point_count())))
            except IllegalStateError:
                assert mut.point_count() == 2
        else:
            i = int(rng.integers(0, mut.point_count()))
            try:
                mut.set_point_x(i, rng.uniform(-5, 15))
            except InappropriatePointError:
                pass
        assert mut.point_count() >= 2
        assert_strictly_increasing(mut)


def test_engines_agree_after_same_operations():
    tables = [engine(-2, 2, values=[4, 1, 0, 1, 4]) for engine in ENGINES]
    for mut in tables:
        mut.add_point(FunctionPoint(0.5, 0.25))
        mut.add_point(FunctionPoint(-3, 9))
        mut.delete_point(2)
        mut.set_point_x(1, -1.5)
        mut.set_point_y(3, -0.5)
        mut.set_point(5, FunctionPoint(1.75, 3))

    array_table, linked_table = tables
    assert array_table.points() == linked_table.points()

    xs = np.linspace(-3.5, 2.5, 601)
    a = array_table.values(xs)
    b = linked_table.values(xs)
    assert np.array_equal(np.isnan(a), np.isnan(b))
    mask = ~np.isnan(a)
    assert np.max(np.abs(a[mask] - b[mask])) <= 1e-9


@pytest.mark.parametrize("engine", ENGINES)
def test_derived_helpers(engine):
    mut = squares(engine)
    assert len(mut) == 5
    assert mut[2] == FunctionPoint(2, 4)
    assert [tuple(p) for p in mut.points()] == [(0, 0), (1, 1), (2, 4), (3, 9), (4, 16)]

    xs, ys = mut.to_arrays()
    assert np.array_equal(xs, [0, 1, 2, 3, 4])
    assert np.array_equal(ys, [0, 1, 4, 9, 16])
    ys[0] = 99.0
    assert mut.point_y(0) == 0.0

    summary = mut.summary()
    assert summary["kind"] == engine.kind
    assert summary["points_count"] == 5
    assert summary["domain"] == (0.0, 4.0)
    assert summary["points"][3] == (3.0, 9.0)
    assert engine.__name__ in repr(mut)
