"""Affine points on a short Weierstrass curve.

A point is either finite, ``(x, y)`` with both coordinates 256-bit words,
or the point at infinity ``INFINITY`` (the group identity).  Points carry
no reference to a curve; ``Curve.is_on_curve`` checks membership.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from curvemath.arith.errors import InvalidCurveParameters
from curvemath.arith.widen import Operand, check_word, parse_operand


@dataclass(frozen=True)
class ECPoint:
    """Affine point; ``x is None and y is None`` marks the identity."""

    x: Optional[int]
    y: Optional[int]

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise InvalidCurveParameters("a point needs both coordinates or neither")
        if self.x is not None:
            check_word(self.x, "x coordinate")
            check_word(self.y, "y coordinate")

    @classmethod
    def from_values(cls, x: Operand, y: Operand) -> "ECPoint":
        """Build a finite point from ints or decimal strings."""
        return cls(parse_operand(x, "x coordinate"), parse_operand(y, "y coordinate"))

    @classmethod
    def infinity(cls) -> "ECPoint":
        return INFINITY

    @property
    def is_infinity(self) -> bool:
        return self.x is None

    def to_dict(self) -> Optional[dict]:
        """JSON-friendly form: decimal strings, ``None`` for the identity."""
        if self.is_infinity:
            return None
        return {"x": str(self.x), "y": str(self.y)}

    def __repr__(self) -> str:
        if self.is_infinity:
            return "ECPoint(INFINITY)"
        return f"ECPoint({self.x}, {self.y})"


INFINITY = ECPoint(None, None)
