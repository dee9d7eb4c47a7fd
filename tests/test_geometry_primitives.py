import dataclasses

import numpy as np
import pytest

from circleintersections import Circle, Point, Vector, as_point


def test_point_vector_arithmetic():
    p = Point(1.0, 2.0)
    v = Vector(0.5, -1.0)
    assert p + v == Point(1.5, 1.0)
    assert p - v == Point(0.5, 3.0)
    assert Point(4.0, 6.0) - p == Vector(3.0, 4.0)
    assert (Point(4.0, 6.0) - p).magnitude == 5.0


def test_point_add_point_is_type_error():
    with pytest.raises(TypeError):
        Point(0, 0) + Point(1, 1)


def test_point_is_immutable_and_hashable():
    p = Point(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 3.0
    assert {p, Point(1.0, 2.0)} == {p}


def test_point_unpacks_and_converts():
    x, y = Point(3.0, -4.0)
    assert (x, y) == (3.0, -4.0)
    arr = Point(3.0, -4.0).to_array()
    assert arr.dtype == np.float64
    assert arr.tolist() == [3.0, -4.0]


def test_vector_helpers():
    v = Vector(3.0, 4.0)
    assert v.perpendicular() == Vector(-4.0, 3.0)
    assert 2 * v == v * 2 == Vector(6.0, 8.0)
    assert -v / 2 == Vector(-1.5, -2.0)
    with pytest.raises(ZeroDivisionError):
        v / 0.0


def test_as_single_precision():
    p = Point(0.1, 1.0 / 3.0).as_single_precision()
    assert p.x == float(np.float32(0.1))
    assert p.y == float(np.float32(1.0 / 3.0))
    assert p.x != 0.1


@pytest.mark.parametrize("value", [(1, 2), [1.0, 2.0], np.array([1, 2]), np.array([1.0, 2.0], dtype=np.float32)])
def test_as_point_accepts_pairs(value):
    p = as_point(value)
    assert p == Point(1.0, 2.0)
    assert type(p.x) is float


def test_as_point_passes_point_through():
    p = Point(1.0, 2.0)
    assert as_point(p) is p


@pytest.mark.parametrize("value", [(1, 2, 3), [1.0], np.zeros((2, 2))])
def test_as_point_rejects_wrong_shape(value):
    with pytest.raises(ValueError):
        as_point(value)


@pytest.mark.parametrize("value", ["12", None, ("a", "b")])
def test_as_point_rejects_non_numeric(value):
    with pytest.raises(TypeError):
        as_point(value)


def test_circle_coerces_center_and_validates_radius():
    c = Circle((1, 1), 2)
    assert c.center == Point(1.0, 1.0)
    assert c.radius == 2.0
    with pytest.raises(ValueError):
        Circle(Point(0, 0), -1.0)
    with pytest.raises(ValueError):
        Circle(Point(0, 0), float("nan"))


def test_circle_on_boundary():
    c = Circle(Point(0, 0), 5.0)
    assert c.on_boundary(Point(3.0, 4.0))
    assert not c.on_boundary(Point(3.0, 4.1))


@pytest.mark.parametrize("value", [(float("nan"), 1.0), np.array([1.0, np.inf]), Point(0.0, float("nan"))])
def test_as_point_rejects_non_finite(value):
    with pytest.raises(ValueError):
        as_point(value)
