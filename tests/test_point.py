import pytest

from picsim.indexing import Axis
from picsim.point import Point, bound_periodic, bound_reflective
from picsim.vector3 import Vector3

GEOM = (10.0, 8.0, 6.0)


def test_default_point_is_at_rest_at_origin():
    point = Point()
    assert point.r == Vector3(0, 0, 0)
    assert point.p == Vector3(0, 0, 0)


def test_accessors_write_through():
    point = Point(Vector3(1.0, 2.0, 3.0), Vector3(0.1, 0.2, 0.3))
    point.y = 5.0
    point.pz = -0.7
    assert point.r == Vector3(1.0, 5.0, 3.0)
    assert point.p == Vector3(0.1, 0.2, -0.7)
    assert (point.x, point.px) == (1.0, 0.1)


def test_default_points_do_not_share_vectors():
    a = Point()
    b = Point()
    a.x = 4.0
    assert b.x == 0


def test_reflective_below_zero():
    point = Point(Vector3(-0.5, 1.0, 1.0), Vector3(0.3, 0.2, 0.1))
    bound_reflective(point, Axis.X, GEOM)
    assert point.x == 0.0
    assert point.px == -0.3
    assert point.py == 0.2


def test_reflective_above_size():
    point = Point(Vector3(1.0, 9.0, 1.0), Vector3(0.3, 0.2, 0.1))
    bound_reflective(point, Axis.Y, GEOM)
    assert point.y == GEOM[1]
    assert point.py == -0.2
    assert point.px == 0.3


def test_reflective_inside_untouched():
    point = Point(Vector3(1.0, 2.0, 3.0), Vector3(0.3, 0.2, 0.1))
    bound_reflective(point, Axis.Z, GEOM)
    assert point == Point(Vector3(1.0, 2.0, 3.0), Vector3(0.3, 0.2, 0.1))


def test_periodic_below_zero():
    point = Point(Vector3(-0.5, 1.0, 1.0), Vector3(0.3, 0.2, 0.1))
    bound_periodic(point, Axis.X, GEOM)
    assert point.x == pytest.approx(GEOM[0] - 0.5)
    assert point.px == 0.3


def test_periodic_above_size():
    point = Point(Vector3(1.0, 1.0, 6.25), Vector3(0.3, 0.2, 0.1))
    bound_periodic(point, Axis.Z, GEOM)
    assert point.z == pytest.approx(6.25 - GEOM[2])
    assert point.y == 1.0


def test_periodic_inside_untouched():
    point = Point(Vector3(10.0, 0.0, 3.0), Vector3(0.3, 0.2, 0.1))
    bound_periodic(point, Axis.X, GEOM)
    bound_periodic(point, Axis.Y, GEOM)
    assert point.r == Vector3(10.0, 0.0, 3.0)