"""Tests for the elliptic curve engine on a small curve.

y^2 = x^3 + 2x + 3 over F_97 with G = (3, 6) of order 5:
  2G = (80, 10), 3G = (80, 87), 4G = (3, 91), 5G = O.
(30, 0) lies on the curve and has order 2.
"""

import pytest

from curvemath.arith.errors import InvalidCurveParameters, InvalidExponent, InvalidModulus, Overflow
from curvemath.curves.curve import Curve
from curvemath.curves.point import INFINITY, ECPoint


@pytest.fixture()
def curve():
    return Curve(a=2, b=3, field_modulus=97, curve_order=5, generator=ECPoint(3, 6))


def test_parameters_from_strings():
    c = Curve(a="2", b="3", field_modulus="97", curve_order="5", generator=ECPoint.from_values("3", "6"))
    assert (c.a, c.b, c.field_modulus, c.curve_order) == (2, 3, 97, 5)
    assert c.field.modulus == 97
    assert c.G == ECPoint(3, 6)


def test_generator_must_be_on_curve():
    with pytest.raises(InvalidCurveParameters):
        Curve(a=2, b=3, field_modulus=97, curve_order=5, generator=ECPoint(3, 7))


def test_invalid_parameters():
    with pytest.raises(InvalidCurveParameters):
        Curve(a=2, b=3, field_modulus=97, curve_order=5, generator=INFINITY)
    with pytest.raises(InvalidCurveParameters):
        Curve(a=99, b=3, field_modulus=97, curve_order=5, generator=ECPoint(3, 6))
    with pytest.raises(InvalidCurveParameters):
        Curve(a=2, b=3, field_modulus=97, curve_order=0, generator=ECPoint(3, 6))
    with pytest.raises(InvalidCurveParameters):
        Curve(a=2, b=3, field_modulus=97, curve_order=5, generator=ECPoint(100, 6))
    with pytest.raises(InvalidModulus):
        Curve(a=0, b=0, field_modulus=1, curve_order=5, generator=ECPoint(0, 0))


def test_field_modulus_must_be_odd_prime():
    with pytest.raises(InvalidCurveParameters):
        Curve(a=0, b=1, field_modulus=15, curve_order=7, generator=ECPoint(0, 1))
    with pytest.raises(InvalidCurveParameters):
        Curve(a=0, b=1, field_modulus=2, curve_order=1, generator=ECPoint(0, 1))


def test_point_validation():
    with pytest.raises(Overflow):
        ECPoint(2**256, 1)
    with pytest.raises(InvalidCurveParameters):
        ECPoint(1, None)
    assert ECPoint.infinity() is INFINITY
    assert INFINITY.is_infinity
    assert INFINITY.to_dict() is None
    assert ECPoint(3, 6).to_dict() == {"x": "3", "y": "6"}


def test_is_on_curve(curve):
    assert curve.is_on_curve(ECPoint(3, 6))
    assert curve.is_on_curve(ECPoint(30, 0))
    assert curve.is_on_curve(INFINITY)
    assert not curve.is_on_curve(ECPoint(3, 7))
    assert not curve.is_on_curve(ECPoint(3, 103))


def test_identity_cases(curve):
    g = curve.G
    assert curve.point_addition(g, INFINITY) == g
    assert curve.point_addition(INFINITY, g) == g
    assert curve.point_addition(INFINITY, INFINITY) == INFINITY
    assert curve.point_doubling(INFINITY) == INFINITY


def test_addition_of_reflections(curve):
    g = curve.G
    assert curve.negate(g) == ECPoint(3, 91)
    assert curve.point_addition(g, curve.negate(g)) == INFINITY
    assert curve.negate(INFINITY) == INFINITY


def test_vertical_tangent(curve):
    assert curve.point_doubling(ECPoint(30, 0)) == INFINITY
    assert curve.point_addition(ECPoint(30, 0), ECPoint(30, 0)) == INFINITY


def test_group_law(curve):
    g = curve.G
    two_g = curve.point_doubling(g)
    assert two_g == ECPoint(80, 10)
    assert curve.point_addition(g, g) == two_g
    assert curve.add_points(g, g) == two_g
    assert curve.point_addition(two_g, g) == ECPoint(80, 87)
    assert curve.point_addition(g, two_g) == ECPoint(80, 87)
    assert curve.point_doubling(two_g) == ECPoint(3, 91)


def test_scalar_multiplication(curve):
    g = curve.G
    expected = [INFINITY, g, ECPoint(80, 10), ECPoint(80, 87), ECPoint(3, 91), INFINITY]
    for k, point in enumerate(expected):
        assert curve.point_multiplication_scalar(k, g) == point
    assert curve.point_multiplication_scalar(2, g) == curve.point_doubling(g)
    assert curve.point_multiplication_scalar(7, g) == ECPoint(80, 10)
    assert curve.point_multiplication_scalar("3", g) == ECPoint(80, 87)
    assert curve.scalar_multiply_generator(4) == ECPoint(3, 91)
    assert curve.point_multiplication_scalar(3, INFINITY) == INFINITY


def test_scalar_multiplication_results_stay_on_curve(curve):
    for k in range(12):
        assert curve.is_on_curve(curve.scalar_multiply_generator(k))


def test_scalar_not_reduced_for_points_outside_subgroup(curve):
    # (30, 0) has order 2, which does not divide the curve order 5
    t = ECPoint(30, 0)
    assert curve.point_multiplication_scalar(2, t) == INFINITY
    assert curve.point_multiplication_scalar(3, t) == t
    assert curve.point_multiplication_scalar(5, t) == t
    assert curve.point_multiplication_scalar(10, t) == INFINITY


def test_generator_scalar_is_reduced(curve):
    assert curve.scalar_multiply_generator(7) == ECPoint(80, 10)
    assert curve.scalar_multiply_generator(5) == INFINITY


def test_negative_scalar(curve):
    with pytest.raises(InvalidExponent):
        curve.point_multiplication_scalar(-1, curve.G)


def test_curve_is_frozen(curve):
    with pytest.raises(AttributeError):
        curve.a = 5
    assert curve == Curve(a=2, b=3, field_modulus=97, curve_order=5, generator=ECPoint(3, 6))
