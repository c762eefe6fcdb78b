"""Modular arithmetic over 256-bit words.

``ModMath`` binds a modulus ``p`` (``1 < p < 2**256``) and exposes every
operation of the ring Z/pZ the curve engine needs.  Operands may be ints or
decimal strings; they are parsed into words and reduced into ``[0, p)``
before use, and every result is a reduced word.

API
---
add, sub, mul, div, neg, square, exp, inv, sqrt, congruent, reduce,
legendre, is_quadratic_residue
"""

from __future__ import annotations

import logging
from typing import Any

from curvemath.arith.errors import InvalidModulus, NoInverse, NonResidue
from curvemath.arith.widen import (
    Operand,
    narrow,
    parse_exponent,
    parse_operand,
    wide_add,
    wide_mul,
    wide_sub,
)
from curvemath.config import MILLER_RABIN_BASES

logger = logging.getLogger(__name__)


def is_prime(n: int) -> bool:
    """Miller-Rabin with fixed bases (deterministic well beyond 2**64)."""
    if n < 2:
        return False
    for small in MILLER_RABIN_BASES:
        if n % small == 0:
            return n == small
    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1
    for base in MILLER_RABIN_BASES:
        x = pow(base, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(r - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


class ModMath:
    """Arithmetic engine for a fixed modulus.

    Instances are immutable value objects: two engines with the same
    modulus compare equal, and one engine can be shared freely between
    threads.
    """

    __slots__ = ("_modulus",)

    def __init__(self, modulus: Operand) -> None:
        p = parse_operand(modulus, "modulus")
        if p < 2:
            raise InvalidModulus(f"modulus must be greater than 1, got {p}")
        object.__setattr__(self, "_modulus", p)
        logger.debug("ModMath created for a %d-bit modulus", p.bit_length())

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ModMath is immutable")

    @property
    def modulus(self) -> int:
        return self._modulus

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModMath):
            return NotImplemented
        return self._modulus == other._modulus

    def __hash__(self) -> int:
        return hash(("ModMath", self._modulus))

    def __repr__(self) -> str:
        return f"ModMath({self._modulus})"

    # ---- reduction ----

    def reduce(self, a: Operand) -> int:
        """Parse *a* and reduce it into ``[0, p)``."""
        return narrow(parse_operand(a), self._modulus)

    def congruent(self, a: Operand, b: Operand) -> bool:
        """True if ``a ≡ b (mod p)``."""
        return self.reduce(a) == self.reduce(b)

    # ---- ring operations ----

    def add(self, a: Operand, b: Operand) -> int:
        """Modular addition.

        Both inputs are already below ``p``, so the sum is below ``2p`` and a
        single subtraction brings it back into range.
        """
        total = wide_add(self.reduce(a), self.reduce(b))
        if total >= self._modulus:
            total = wide_sub(total, self._modulus)
        return total

    def sub(self, a: Operand, b: Operand) -> int:
        """Modular subtraction."""
        a, b = self.reduce(a), self.reduce(b)
        if a < b:
            return wide_sub(wide_add(a, self._modulus), b)
        return a - b

    def neg(self, a: Operand) -> int:
        """Additive inverse; ``neg(0) == 0``."""
        a = self.reduce(a)
        return 0 if a == 0 else self._modulus - a

    def mul(self, a: Operand, b: Operand) -> int:
        """Modular multiplication through a 512-bit intermediate product."""
        return narrow(wide_mul(self.reduce(a), self.reduce(b)), self._modulus)

    def square(self, a: Operand) -> int:
        return self.mul(a, a)

    def exp(self, base: Operand, exponent: Operand) -> int:
        """Square-and-multiply, least significant bit first.

        ``exp(a, 0) == 1`` for every ``a``, including ``0``.
        """
        e = parse_exponent(exponent)
        result = 1
        base = self.reduce(base)
        while e:
            if e & 1:
                result = self.mul(result, base)
            base = self.square(base)
            e >>= 1
        return result

    def inv(self, a: Operand) -> int:
        """Multiplicative inverse via the extended Euclidean algorithm.

        Works for any modulus; raises ``NoInverse`` when ``gcd(a, p) != 1``.
        """
        a = self.reduce(a)
        if a == 0:
            raise NoInverse(f"0 has no inverse modulo {self._modulus}")
        old_r, r = a, self._modulus
        old_s, s = 1, 0
        while r != 0:
            quotient = old_r // r
            old_r, r = r, old_r - quotient * r
            old_s, s = s, old_s - quotient * s
        if old_r != 1:
            raise NoInverse(f"{a} shares the factor {old_r} with modulus {self._modulus}")
        return old_s % self._modulus

    def div(self, a: Operand, b: Operand) -> int:
        """``a * inv(b)``; propagates ``NoInverse``."""
        return self.mul(a, self.inv(b))

    # ---- square roots ----

    def legendre(self, a: Operand) -> int:
        """Euler's criterion: 1 for residues, -1 for non-residues, 0 for 0.

        Defined for odd prime moduli only; anything else raises
        ``InvalidModulus``.
        """
        if self._modulus == 2 or not is_prime(self._modulus):
            raise InvalidModulus(f"Legendre symbol needs an odd prime modulus, got {self._modulus}")
        return self._euler(a)

    def _euler(self, a: Operand) -> int:
        symbol = self.exp(a, (self._modulus - 1) // 2)
        if symbol == self._modulus - 1:
            return -1
        return symbol

    def is_quadratic_residue(self, a: Operand) -> bool:
        a = self.reduce(a)
        return a == 0 or self._modulus == 2 or self.legendre(a) == 1

    def sqrt(self, a: Operand) -> int:
        """Square root modulo a prime.

        Returns the smaller of the two roots ``r`` and ``p - r``.  Raises
        ``InvalidModulus`` for composite moduli and ``NonResidue`` when *a*
        has no root.
        """
        p = self._modulus
        if not is_prime(p):
            raise InvalidModulus(f"sqrt needs a prime modulus; {p} is composite")
        a = self.reduce(a)
        if a == 0 or p == 2:
            return a
        if self._euler(a) != 1:
            raise NonResidue(f"{a} is not a quadratic residue modulo {p}")
        if p % 4 == 3:
            logger.debug("sqrt: p = 3 mod 4, using a^((p+1)/4)")
            root = self.exp(a, (p + 1) // 4)
        else:
            root = self._tonelli_shanks(a)
        return min(root, p - root)

    def _tonelli_shanks(self, a: int) -> int:
        p = self._modulus
        # p - 1 = q * 2^s with q odd
        q, s = p - 1, 0
        while q % 2 == 0:
            q //= 2
            s += 1

        z = 2
        while self._euler(z) != -1:
            z += 1
        logger.debug("tonelli-shanks: s=%d, non-residue z=%d", s, z)

        m = s
        c = self.exp(z, q)
        t = self.exp(a, q)
        r = self.exp(a, (q + 1) // 2)
        while t != 1:
            # least i with t^(2^i) == 1
            i, t2i = 0, t
            while t2i != 1:
                t2i = self.square(t2i)
                i += 1
                if i == m:
                    raise NonResidue(f"{a} is not a quadratic residue modulo {p}")
            b = self.exp(c, 1 << (m - i - 1))
            m = i
            c = self.square(b)
            t = self.mul(t, c)
            r = self.mul(r, b)
        return r
