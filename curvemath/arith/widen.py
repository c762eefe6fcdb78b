"""Widened arithmetic on fixed-width words.

Python ints never overflow, so this module is where the fixed-width
discipline lives: operands are 256-bit words, sums and products are taken
in the 512-bit double-width domain, and ``narrow`` reduces a double-width
value by a word-sized modulus back into the base width.

API
---
parse_operand(value)     -> word    (int or decimal string)
parse_hex(value)         -> word    (hex string, optional 0x prefix)
widen(a)                 -> double-width value
wide_add / wide_sub / wide_mul (a, b) -> double-width value
narrow(value, modulus)   -> word
"""

from __future__ import annotations

from typing import Union

from curvemath.arith.errors import InvalidExponent, Overflow, ParseError
from curvemath.config import MAX_WIDE, MAX_WORD, WIDE_BITS, WORD_BITS

Operand = Union[int, str]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def check_word(value: int, what: str = "value") -> int:
    """Return *value* unchanged if it is a word, else raise ``Overflow``."""
    if value < 0:
        raise Overflow(f"{what} {value} is negative; words are unsigned")
    if value > MAX_WORD:
        raise Overflow(f"{what} does not fit in {WORD_BITS} bits")
    return value


def _check_wide(value: int) -> int:
    if value < 0:
        raise Overflow(f"double-width underflow ({value})")
    if value > MAX_WIDE:
        raise Overflow(f"double-width result does not fit in {WIDE_BITS} bits")
    return value


def parse_operand(value: Operand, what: str = "operand") -> int:
    """Convert an int or decimal-digit string into a word.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool):
        raise ParseError(f"{what} must be an int or decimal string, got bool")
    if isinstance(value, int):
        return check_word(value, what)
    if isinstance(value, str):
        # str.isdigit() also accepts superscripts and other unicode digits
        if not value or not value.isascii() or not value.isdigit():
            raise ParseError(f"{what} {value!r} is not a decimal number")
        return check_word(int(value), what)
    raise ParseError(f"{what} must be an int or decimal string, got {type(value).__name__}")


def parse_exponent(value: Operand, what: str = "exponent") -> int:
    """Like ``parse_operand`` but negative values raise ``InvalidExponent``."""
    if isinstance(value, int) and not isinstance(value, bool) and value < 0:
        raise InvalidExponent(f"negative {what} {value} is not supported")
    if isinstance(value, str) and value.startswith("-"):
        digits = value[1:]
        # "-0" is not negative, so it is just a malformed unsigned number
        if not digits.isascii() or not digits.isdigit() or int(digits) == 0:
            raise ParseError(f"{what} {value!r} is not a decimal number")
        raise InvalidExponent(f"negative {what} {value} is not supported")
    return parse_operand(value, what)


def parse_hex(value: str, what: str = "operand") -> int:
    """Convert a hexadecimal string (``0x`` prefix optional) into a word."""
    if not isinstance(value, str):
        raise ParseError(f"{what} must be a hex string, got {type(value).__name__}")
    digits = value[2:] if value[:2].lower() == "0x" else value
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise ParseError(f"{what} {value!r} is not a hexadecimal number")
    return check_word(int(digits, 16), what)


def widen(a: int) -> int:
    """Lift a word into the double-width domain."""
    return check_word(a)


def wide_add(a: int, b: int) -> int:
    """Double-width sum; operands may themselves be double-width."""
    return _check_wide(_check_wide(a) + _check_wide(b))


def wide_sub(a: int, b: int) -> int:
    return _check_wide(_check_wide(a) - _check_wide(b))


def wide_mul(a: int, b: int) -> int:
    """Full 256x256 -> 512-bit product."""
    return _check_wide(widen(a) * widen(b))


def narrow(value: int, modulus: int) -> int:
    """Reduce a double-width *value* by a word-sized *modulus*."""
    _check_wide(value)
    check_word(modulus, "modulus")
    return value % modulus
