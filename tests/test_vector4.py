import pytest

from picsim.indexing import Axis
from picsim.vector4 import Vector4, maximum, minimum


def approx_vec(a, b, tol=1e-12):
    return all(abs(p - q) < tol for p, q in zip(a, b))


def test_add_then_subtract_round_trip():
    a = Vector4(1.5, -2.0, 3.25, 0.5)
    b = Vector4(0.5, 4.0, -1.0, 2.0)
    assert (a + b) - b == a


def test_in_place_operations_mutate():
    a = Vector4(1, 2, 3, 4)
    a += Vector4(1, 1, 1, 1)
    a -= Vector4(0, 0, 0, 1)
    assert a == Vector4(2, 3, 4, 4)
    a *= 2
    assert a == Vector4(4, 6, 8, 8)


def test_scalar_multiplication_commutes():
    v = Vector4(0.1, 0.0, 0.4, 2.0)
    assert 2.5 * v == v * 2.5


def test_division_inverts_multiplication():
    v = Vector4(3.0, -6.0, 9.0, 1.0)
    assert v / 4.0 == Vector4(0.75, -1.5, 2.25, 0.25)
    assert list((v * 4.0) / 4.0) == pytest.approx([3.0, -6.0, 9.0, 1.0])


def test_indexing_by_axis():
    v = Vector4(7, 8, 9, 10)
    assert v[Axis.C] == 10
    assert v[Axis.Y] == 8
    assert list(v) == [7, 8, 9, 10]
    with pytest.raises(IndexError):
        v[4]


def test_str_formats_each_component():
    assert str(Vector4(1, 2, 3, 4)) == "1 2 3 4 "


def test_normalized_has_unit_length():
    v = Vector4(0.1, 0.01, 7.0, -2.0)
    assert v.normalized().length() == pytest.approx(1.0)


def test_length_matches_squared():
    v = Vector4(1.0, 2.0, -3.0, 4.0)
    assert v.length() ** 2 == pytest.approx(v.squared())


def test_parallel_plus_transverse_is_original():
    v = Vector4(0.3, -1.2, 2.0, 0.7)
    ref = Vector4(1.0, 1.0, 0.0, 1.0)
    assert approx_vec(v.parallel_to(ref) + v.transverse_to(ref), v)
    assert v.transverse_to(ref).dot(ref) == pytest.approx(0.0)


def test_elements_product_with_unit_components():
    assert Vector4(1.0, 6.5, 1.0, 1.0).elements_product() == 6.5


def test_elementwise_product_with_ones_is_identity():
    v = Vector4(2.0, -3.0, 4.0, 5.0)
    assert v.elementwise_product(Vector4.filled(1.0)) == v


def test_swap_order_keeps_c():
    v = Vector4(1, 2, 3, 4)
    v.swap_order()
    assert v == Vector4(3, 2, 1, 4)


def test_minimum_and_maximum():
    a = Vector4(1.0, 5.0, -2.0, 0.0)
    b = Vector4(3.0, -1.0, -2.5, 0.0)
    lo = minimum(a, b)
    hi = maximum(a, b)
    assert all(l <= h for l, h in zip(lo, hi))
    assert lo + hi == a + b