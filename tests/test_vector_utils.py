import pytest

from picsim.vector3 import Vector3
from picsim.vector4 import Vector4
from picsim.vector_utils import vector_cast


def test_widen_sets_c_to_zero():
    v = vector_cast(Vector3(1.5, 2.5, 3.5), 4)
    assert v == Vector4(1.5, 2.5, 3.5, 0)


def test_round_trip_three_to_four_to_three():
    v = Vector3(0.1, -0.2, 0.3)
    assert vector_cast(vector_cast(v, 4), 3) == v


def test_narrow_drops_c():
    v = vector_cast(Vector4(1, 2, 3, 4), 3)
    assert v == Vector3(1, 2, 3)


def test_int_cast_truncates_toward_zero():
    v = vector_cast(Vector3(1.7, -1.7, 2.0), 3, int)
    assert v == Vector3(1, -1, 2)
    assert all(isinstance(c, int) for c in v)


def test_float_cast_of_vector4_keeps_values():
    v = vector_cast(Vector4(1, 2, 3, 4), 4, float)
    assert v == Vector4(1.0, 2.0, 3.0, 4.0)
    assert all(isinstance(c, float) for c in v)


def test_default_dimension_keeps_type():
    src = Vector4(5, 6, 7, 8)
    assert vector_cast(src) == src


def test_unsupported_dimension_raises():
    with pytest.raises(ValueError):
        vector_cast(Vector3(1, 2, 3), 5)