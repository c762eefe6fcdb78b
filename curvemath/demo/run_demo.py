#!/usr/bin/env python3
"""curvemath end-to-end demo.

Usage (with the service running, e.g. ``uvicorn curvemath.service.app:app``):
    python -m curvemath.demo.run_demo

The script:
1. Runs the small-modulus arithmetic walkthrough (modulus 101).
2. Takes a modular square root with Tonelli-Shanks.
3. Shows an inverse failing for a value sharing a factor with the modulus.
4. Lists the named curves and fetches secp256k1's parameters.
5. Doubles the secp256k1 generator and checks it against 2 * G.
6. Multiplies the BN128 generator by the curve order (identity expected).
"""

from __future__ import annotations

import sys

import httpx

from curvemath.config import SERVICE_URL


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def main() -> None:
    client = httpx.Client(base_url=SERVICE_URL, timeout=15.0)

    # ---- 1. Arithmetic mod 101 ----
    banner("1) Arithmetic modulo 101")
    for op in ("add", "sub", "mul", "div", "exp"):
        resp = client.post(f"/modmath/{op}", json={"modulus": 101, "a": 8, "b": 12})
        resp.raise_for_status()
        print(f"   {op}(8, 12) = {resp.json()['result']}")
    resp = client.post("/modmath/inv", json={"modulus": 101, "a": 8})
    print(f"   inv(8) = {resp.json()['result']}")

    # ---- 2. Square root ----
    banner("2) Tonelli-Shanks square root of 2 mod 113")
    resp = client.post("/modmath/sqrt", json={"modulus": 113, "a": 2})
    print(f"   sqrt(2) = {resp.json()['result']}")
    resp = client.post("/modmath/sqrt", json={"modulus": 113, "a": 3})
    print(f"   sqrt(3) → HTTP {resp.status_code}: {resp.json()['detail']}")

    # ---- 3. Missing inverse ----
    banner("3) Inverse of 12 mod 100")
    resp = client.post("/modmath/inv", json={"modulus": 100, "a": 12})
    print(f"   HTTP {resp.status_code}: {resp.json()['detail']}")

    # ---- 4. Named curves ----
    banner("4) Named curves")
    names = client.get("/curves").json()["curves"]
    print(f"   Curves: {', '.join(names)}")
    params = client.get("/curves/secp256k1").json()
    print(f"   secp256k1 p = {params['field_modulus']}")
    print(f"   secp256k1 n = {params['curve_order']}")

    # ---- 5. Doubling vs scalar multiplication ----
    banner("5) 2G on secp256k1")
    generator = params["generator"]
    doubled = client.post("/curves/secp256k1/double", json={"p": generator}).json()["point"]
    scaled = client.post("/curves/secp256k1/multiply", json={"scalar": 2}).json()["point"]
    print(f"   double(G)   = ({doubled['x']}, {doubled['y']})")
    print(f"   2 * G       = ({scaled['x']}, {scaled['y']})")
    print(f"   match: {'✓' if doubled == scaled else '✗'}")

    # ---- 6. Order of the generator ----
    banner("6) n * G on bn128")
    order = client.get("/curves/bn128").json()["curve_order"]
    result = client.post("/curves/bn128/multiply", json={"scalar": order}).json()["point"]
    print(f"   n * G = {'INFINITY' if result is None else result}")

    banner("Demo complete")


if __name__ == "__main__":
    try:
        main()
    except httpx.ConnectError:
        print(f"Could not reach the curvemath service at {SERVICE_URL}", file=sys.stderr)
        sys.exit(1)
