"""Elliptic curve arithmetic over prime fields.

Curves have the short Weierstrass form

    y^2 = x^3 + a*x + b  (mod p)

and every coordinate computation goes through a ``ModMath`` bound to the
field modulus ``p``.  Point operations never raise for geometric corner
cases: adding a point to its reflection, doubling a point with ``y = 0``
and operations involving the identity all resolve to ``INFINITY``.
"""

from __future__ import annotations

import dataclasses
import logging

from curvemath.arith.errors import InvalidCurveParameters
from curvemath.arith.modmath import ModMath, is_prime
from curvemath.arith.widen import Operand, parse_exponent, parse_operand
from curvemath.curves.point import INFINITY, ECPoint

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Curve:
    """Weierstrass curve parameters plus the group law.

    Attributes
    ----------
    a, b          : curve coefficients, reduced below ``field_modulus``
    field_modulus : prime ``p`` of the base field
    curve_order   : order ``n`` of the subgroup generated by ``generator``
    generator     : base point ``G``
    name          : label used by the named-curve registry
    """

    a: int
    b: int
    field_modulus: int
    curve_order: int
    generator: ECPoint
    name: str = "custom"
    _field: ModMath = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        math = ModMath(self.field_modulus)
        p = math.modulus
        if p == 2 or not is_prime(p):
            raise InvalidCurveParameters(f"field modulus must be an odd prime, got {p}")
        a = parse_operand(self.a, "a")
        b = parse_operand(self.b, "b")
        n = parse_operand(self.curve_order, "curve order")
        if a >= p or b >= p:
            raise InvalidCurveParameters(f"coefficients a={a}, b={b} must be below p")
        if n == 0:
            raise InvalidCurveParameters("curve order must be positive")
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "field_modulus", p)
        object.__setattr__(self, "curve_order", n)
        object.__setattr__(self, "_field", math)

        g = self.generator
        if g.is_infinity:
            raise InvalidCurveParameters("generator cannot be the point at infinity")
        if g.x >= p or g.y >= p:
            raise InvalidCurveParameters(f"generator {g} has coordinates outside the field")
        if not self.is_on_curve(g):
            raise InvalidCurveParameters(f"generator {g} does not satisfy y^2 = x^3 + {a}x + {b}")
        logger.debug("curve %s ready (%d-bit field)", self.name, p.bit_length())

    @property
    def field(self) -> ModMath:
        """Arithmetic engine for the base field."""
        return self._field

    @property
    def G(self) -> ECPoint:
        return self.generator

    # ---- membership ----

    def is_on_curve(self, point: ECPoint) -> bool:
        """The identity lies on every curve."""
        if point.is_infinity:
            return True
        f = self._field
        if point.x >= f.modulus or point.y >= f.modulus:
            return False
        lhs = f.square(point.y)
        rhs = f.add(f.add(f.mul(f.square(point.x), point.x), f.mul(self.a, point.x)), self.b)
        return lhs == rhs

    def negate(self, point: ECPoint) -> ECPoint:
        """Reflection ``(x, -y)``; the identity is its own negation."""
        if point.is_infinity:
            return INFINITY
        return ECPoint(point.x, self._field.neg(point.y))

    # ---- group law ----

    def point_addition(self, p1: ECPoint, p2: ECPoint) -> ECPoint:
        """P + Q, delegating to ``point_doubling`` when P == Q."""
        if p1.is_infinity:
            return p2
        if p2.is_infinity:
            return p1

        f = self._field
        if p1.x == p2.x and p1.y == f.neg(p2.y):
            return INFINITY
        if p1 == p2:
            return self.point_doubling(p1)

        slope = f.div(f.sub(p2.y, p1.y), f.sub(p2.x, p1.x))
        x3 = f.sub(f.sub(f.square(slope), p1.x), p2.x)
        y3 = f.sub(f.mul(slope, f.sub(p1.x, x3)), p1.y)
        return ECPoint(x3, y3)

    def add_points(self, p1: ECPoint, p2: ECPoint) -> ECPoint:
        return self.point_addition(p1, p2)

    def point_doubling(self, point: ECPoint) -> ECPoint:
        """2P using the tangent line; vertical tangents give the identity."""
        if point.is_infinity or point.y == 0:
            return INFINITY

        f = self._field
        numerator = f.add(f.mul(3, f.square(point.x)), self.a)
        denominator = f.mul(2, point.y)
        slope = f.div(numerator, denominator)
        x3 = f.sub(f.square(slope), f.mul(2, point.x))
        y3 = f.sub(f.mul(slope, f.sub(point.x, x3)), point.y)
        return ECPoint(x3, y3)

    def point_multiplication_scalar(self, scalar: Operand, point: ECPoint) -> ECPoint:
        """k * P by double-and-add over the bits of k (least significant first).

        Correct for any non-negative k and any point on the curve, including
        points outside the subgroup generated by ``G``.
        """
        k = parse_exponent(scalar, "scalar")

        result = INFINITY
        addend = point
        while k and not addend.is_infinity:
            if k & 1:
                result = self.point_addition(result, addend)
            addend = self.point_doubling(addend)
            k >>= 1
        return result

    def scalar_multiply_generator(self, scalar: Operand) -> ECPoint:
        """k * G, with k reduced modulo the curve order first."""
        k = parse_exponent(scalar, "scalar") % self.curve_order
        return self.point_multiplication_scalar(k, self.generator)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "a": str(self.a),
            "b": str(self.b),
            "field_modulus": str(self.field_modulus),
            "curve_order": str(self.curve_order),
            "generator": self.generator.to_dict(),
        }
