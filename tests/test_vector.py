import math

import pytest

from minirt.vector import EPSILON, Vec


def test_add_then_subtract_round_trip():
    a = Vec(1.5, -2.0, 3.25)
    b = Vec(-4.0, 0.5, 7.0)
    assert (a + b) - b == a


def test_subtract_self_is_zero():
    a = Vec(3.0, -1.0, 2.0)
    assert a - a == Vec()


def test_multiply_then_divide_round_trip():
    a = Vec(1.0, 2.0, -3.0)
    back = (a * 4.0) / 4.0
    assert back == a


def test_right_multiply_matches_left():
    a = Vec(1.0, -2.0, 0.5)
    assert 3.0 * a == a * 3.0


def test_negation_sums_to_zero():
    a = Vec(2.0, -5.0, 0.25)
    assert a + (-a) == Vec()


def test_dot_with_self_is_magnitude_squared():
    a = Vec(2.0, 3.0, 6.0)
    assert a.dot(a) == pytest.approx(a.magnitude() ** 2)


def test_cross_of_axes():
    assert Vec(1, 0, 0).cross(Vec(0, 1, 0)) == Vec(0, 0, 1)


def test_cross_is_orthogonal_to_inputs():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_cross_is_anticommutative():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(4.0, -1.0, 2.0)
    assert a.cross(b) == -b.cross(a)


def test_normalized_has_unit_length():
    n = Vec(3.0, -7.0, 11.0).normalized()
    assert n.magnitude() == pytest.approx(1.0)


def test_normalized_keeps_direction():
    a = Vec(3.0, -7.0, 11.0)
    n = a.normalized()
    assert n.dot(a) == pytest.approx(a.magnitude())


def test_normalized_tiny_vector_is_zero():
    assert Vec(EPSILON / 10, 0.0, 0.0).normalized() == Vec()
    assert Vec().normalized() == Vec()


def test_iteration_unpacks_components():
    x, y, z = Vec(1.0, 2.0, 3.0)
    assert (x, y, z) == (1.0, 2.0, 3.0)


def test_vec_is_immutable():
    v = Vec(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert v == Vec(1.0, 2.0, 3.0)
    assert v.x == 1.0


def test_magnitude_matches_hypot():
    v = Vec(1.0, 2.0, 2.0)
    assert v.magnitude() == pytest.approx(math.hypot(1.0, 2.0, 2.0))