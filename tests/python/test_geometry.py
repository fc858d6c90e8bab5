from __future__ import annotations

import math

from pytest import approx

from shoal.sim.core.geometry import Point, Vector


def test_normalize_zero_vector_is_noop():
    vector = Vector(0.0, 0.0)
    vector.normalize_ip()
    assert vector == Vector(0.0, 0.0)
    assert not math.isnan(vector.x) and not math.isnan(vector.y)
    assert vector.normalize() == Vector(0.0, 0.0)


def test_normalize_in_place_yields_unit_length():
    vector = Vector(3.0, -4.0)
    vector.normalize_ip()
    assert vector.length() == approx(1.0)
    assert vector.x == approx(0.6)
    assert vector.y == approx(-0.8)


def test_normalize_returns_copy():
    vector = Vector(0.0, 2.0)
    unit = vector.normalize()
    assert unit == Vector(0.0, 1.0)
    assert vector == Vector(0.0, 2.0)


def test_vector_arithmetic_and_dot_product():
    a = Vector(1.0, 2.0)
    b = Vector(3.0, -1.0)
    assert a + b == Vector(4.0, 1.0)
    assert a - b == Vector(-2.0, 3.0)
    assert -a == Vector(-1.0, -2.0)
    assert a * 2.0 == Vector(2.0, 4.0)
    assert 2.0 * a == Vector(2.0, 4.0)
    assert a / 2.0 == Vector(0.5, 1.0)
    assert a * b == approx(1.0)
    assert a * b == b * a
    assert a.dot(b) == a * b
    assert Vector(3.0, 4.0).length() == approx(5.0)
    assert Vector(3.0, 4.0).length_squared() == approx(25.0)


def test_operations_do_not_mutate_operands():
    a = Vector(1.0, 1.0)
    b = Vector(2.0, 2.0)
    _ = a + b
    _ = a * 3.0
    assert a == Vector(1.0, 1.0)
    assert b == Vector(2.0, 2.0)


def test_point_translation_and_difference():
    p = Point(10.0, 5.0)
    q = Point(4.0, 1.0)
    assert p + Vector(1.0, -1.0) == Point(11.0, 4.0)
    assert p - Vector(1.0, -1.0) == Point(9.0, 6.0)
    difference = p - q
    assert isinstance(difference, Vector)
    assert difference == Vector(6.0, 4.0)
    assert p * 0.5 == Point(5.0, 2.5)
    assert 2.0 * q == Point(8.0, 2.0)
    assert q.distance_to(Point(7.0, 5.0)) == approx(5.0)
