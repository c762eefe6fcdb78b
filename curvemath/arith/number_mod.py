"""A value bound to its modulus.

``NumberMod`` is a convenience wrapper: every method forwards to a
``ModMath`` for the bound modulus and returns a fresh ``NumberMod``.
Mixing values under different moduli raises ``ModulusMismatch``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from curvemath.arith.errors import ModulusMismatch
from curvemath.arith.modmath import ModMath
from curvemath.arith.widen import Operand


@dataclass(frozen=True)
class NumberMod:
    """An element of Z/pZ; ``value`` is always stored reduced."""

    value: int
    modulus: int
    _math: ModMath = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # accepts decimal strings too; both fields end up as reduced ints
        math = ModMath(self.modulus)
        object.__setattr__(self, "modulus", math.modulus)
        object.__setattr__(self, "value", math.reduce(self.value))
        object.__setattr__(self, "_math", math)

    @property
    def math(self) -> ModMath:
        return self._math

    def _check(self, other: "NumberMod") -> None:
        if self.modulus != other.modulus:
            raise ModulusMismatch(
                f"cannot combine values modulo {self.modulus} and {other.modulus}"
            )

    def _wrap(self, value: int) -> "NumberMod":
        # value comes reduced from the engine, so skip __post_init__
        result = object.__new__(NumberMod)
        object.__setattr__(result, "value", value)
        object.__setattr__(result, "modulus", self.modulus)
        object.__setattr__(result, "_math", self._math)
        return result

    def add(self, other: "NumberMod") -> "NumberMod":
        self._check(other)
        return self._wrap(self.math.add(self.value, other.value))

    def sub(self, other: "NumberMod") -> "NumberMod":
        self._check(other)
        return self._wrap(self.math.sub(self.value, other.value))

    def mul(self, other: "NumberMod") -> "NumberMod":
        self._check(other)
        return self._wrap(self.math.mul(self.value, other.value))

    def div(self, other: "NumberMod") -> "NumberMod":
        self._check(other)
        return self._wrap(self.math.div(self.value, other.value))

    def neg(self) -> "NumberMod":
        return self._wrap(self.math.neg(self.value))

    def pow(self, exponent: Operand) -> "NumberMod":
        return self._wrap(self.math.exp(self.value, exponent))

    def equals(self, other: "NumberMod") -> bool:
        """Same modulus and congruent values."""
        return self.modulus == other.modulus and self.value == other.value

    def __str__(self) -> str:
        return f"{self.value} (mod {self.modulus})"
