"""Error taxonomy shared by the modular and elliptic-curve engines.

Every failure is a ``CurveMathError`` (a ``ValueError``) so callers can
catch the whole family in one place.  A few also inherit the builtin
exception with the same meaning, e.g. ``NoInverse`` is a
``ZeroDivisionError``.
"""

from __future__ import annotations


class CurveMathError(ValueError):
    """Base class for all curvemath failures."""


class ParseError(CurveMathError):
    """Operand is not an int or a decimal-digit string."""


class Overflow(CurveMathError, OverflowError):
    """Value does not fit the fixed word (or double-word) width."""


class InvalidModulus(CurveMathError):
    """Modulus is 0 or 1, or lacks a property an operation requires."""


class NoInverse(CurveMathError, ZeroDivisionError):
    """Value shares a factor with the modulus (or is zero)."""


class NonResidue(CurveMathError):
    """Value has no square root under the modulus."""


class InvalidExponent(CurveMathError):
    """Negative exponent or scalar."""


class InvalidCurveParameters(CurveMathError):
    """Curve constants or generator are inconsistent."""


class ModulusMismatch(CurveMathError):
    """Bound values under different moduli were combined."""
