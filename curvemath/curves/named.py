"""Standard curves.

API
---
bn128()          -> Curve   (alt_bn128 / BN254, used by Ethereum and circom)
secp256k1()      -> Curve   (Bitcoin / Ethereum signatures)
get_curve(name)  -> Curve   (case-insensitive lookup in CURVES)
"""

from __future__ import annotations

from typing import Callable, Dict

from curvemath import config
from curvemath.arith.widen import parse_hex
from curvemath.curves.curve import Curve
from curvemath.curves.point import ECPoint


def bn128() -> Curve:
    return Curve(
        a=config.BN128_A,
        b=config.BN128_B,
        field_modulus=config.BN128_FIELD_MODULUS,
        curve_order=config.BN128_CURVE_ORDER,
        generator=ECPoint.from_values(*config.BN128_GENERATOR),
        name="bn128",
    )


def secp256k1() -> Curve:
    return Curve(
        a=config.SECP256K1_A,
        b=config.SECP256K1_B,
        field_modulus=parse_hex(config.SECP256K1_FIELD_MODULUS, "field modulus"),
        curve_order=parse_hex(config.SECP256K1_CURVE_ORDER, "curve order"),
        generator=ECPoint.from_values(*config.SECP256K1_GENERATOR),
        name="secp256k1",
    )


CURVES: Dict[str, Callable[[], Curve]] = {
    "bn128": bn128,
    "secp256k1": secp256k1,
}


def get_curve(name: str) -> Curve:
    """Build the named curve; raises ``KeyError`` for unknown names."""
    try:
        factory = CURVES[name.lower()]
    except KeyError:
        raise KeyError(f"unknown curve {name!r}; known curves: {sorted(CURVES)}") from None
    return factory()
