"""Global configuration for curvemath."""

import os

# ---------- Word widths (the fixed-width integer the engines emulate) ----------
# Operands, moduli and coordinates are 256-bit words; products and sums are
# carried in the 512-bit double-width domain before reduction.
WORD_BITS = 256
WIDE_BITS = 2 * WORD_BITS
MAX_WORD = 2**WORD_BITS - 1
MAX_WIDE = 2**WIDE_BITS - 1

# ---------- Primality testing (used by sqrt preconditions) ----------
MILLER_RABIN_BASES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29,
    31, 37, 41, 43, 47, 53, 59, 61, 67, 71,
)

# ---------- BN128 (alt_bn128 / BN254) ----------
BN128_A = 0
BN128_B = 3
BN128_FIELD_MODULUS = "21888242871839275222246405745257275088696311157297823662689037894645226208583"
BN128_CURVE_ORDER = "21888242871839275222246405745257275088548364400416034343698204186575808495617"
BN128_GENERATOR = (1, 2)

# ---------- secp256k1 ----------
SECP256K1_A = 0
SECP256K1_B = 7
# p = 2^256 - 2^32 - 977
SECP256K1_FIELD_MODULUS = "0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F"
SECP256K1_CURVE_ORDER = "0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141"
SECP256K1_GENERATOR = (
    "55066263022277343669578718895168534326250603453777594175500187360389116729240",
    "32670510020758816978083085130507043184471273380659243275938904335757337482424",
)

# ---------- Logging ----------
LOG_LEVEL = os.environ.get("CURVEMATH_LOG_LEVEL", "WARNING").upper()

# ---------- Service (used by the demo client) ----------
SERVICE_URL = os.environ.get("CURVEMATH_SERVICE_URL", "http://localhost:8000")
