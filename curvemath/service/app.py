"""curvemath FastAPI application.

Exposes both engines over HTTP.  Operands travel as decimal strings (or
small JSON ints) because 256-bit values do not survive JSON number
handling in most clients; results are always decimal strings.

Endpoints:
- POST /modmath/{op}            – add, sub, mul, div, exp, congruent,
                                  inv, neg, square, sqrt
- GET  /curves                  – registered curve names
- GET  /curves/{name}           – curve parameters
- POST /curves/{name}/add       – P + Q
- POST /curves/{name}/double    – 2P
- POST /curves/{name}/multiply  – k * P (P defaults to the generator)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from curvemath.arith.errors import CurveMathError
from curvemath.arith.modmath import ModMath
from curvemath.config import LOG_LEVEL
from curvemath.curves.curve import Curve
from curvemath.curves.named import CURVES, get_curve
from curvemath.curves.point import INFINITY, ECPoint

logger = logging.getLogger(__name__)

_BINARY_OPS: Dict[str, Callable[[ModMath], Callable[[Any, Any], Any]]] = {
    "add": lambda m: m.add,
    "sub": lambda m: m.sub,
    "mul": lambda m: m.mul,
    "div": lambda m: m.div,
    "exp": lambda m: m.exp,
    "congruent": lambda m: m.congruent,
}

_UNARY_OPS: Dict[str, Callable[[ModMath], Callable[[Any], Any]]] = {
    "inv": lambda m: m.inv,
    "neg": lambda m: m.neg,
    "square": lambda m: m.square,
    "sqrt": lambda m: m.sqrt,
}

# ------ request models ------


class ModMathRequest(BaseModel):
    modulus: Union[str, int]
    a: Union[str, int]
    b: Optional[Union[str, int]] = None


class PointModel(BaseModel):
    x: Union[str, int]
    y: Union[str, int]


class PointPairRequest(BaseModel):
    p: Optional[PointModel] = None  # None is the point at infinity
    q: Optional[PointModel] = None


class PointRequest(BaseModel):
    p: Optional[PointModel] = None


class ScalarRequest(BaseModel):
    scalar: Union[str, int]
    # omitted -> generator
    p: Optional[PointModel] = None
    use_generator: bool = True


# ------ helpers ------


def _to_point(model: Optional[PointModel]) -> ECPoint:
    if model is None:
        return INFINITY
    return ECPoint.from_values(model.x, model.y)


def _curve_or_404(name: str) -> Curve:
    try:
        return get_curve(name)
    except KeyError:
        raise HTTPException(404, f"Unknown curve {name!r}") from None


def _point_response(curve: Curve, point: ECPoint) -> Dict[str, Any]:
    return {"curve": curve.name, "point": point.to_dict()}


def _check_on_curve(curve: Curve, point: ECPoint) -> None:
    if not curve.is_on_curve(point):
        raise HTTPException(400, f"{point} is not on {curve.name}")


def create_app() -> FastAPI:
    """Build the FastAPI app; every ``CurveMathError`` becomes a 400."""
    logging.basicConfig(level=LOG_LEVEL)
    app = FastAPI(title="curvemath")

    @app.post("/modmath/{op}")
    def modmath(op: str, req: ModMathRequest) -> Dict[str, Any]:
        if op not in _BINARY_OPS and op not in _UNARY_OPS:
            raise HTTPException(404, f"Unknown operation {op!r}")
        try:
            math = ModMath(req.modulus)
            if op in _BINARY_OPS:
                if req.b is None:
                    raise HTTPException(400, f"Operation {op!r} needs operand b")
                result = _BINARY_OPS[op](math)(req.a, req.b)
            else:
                result = _UNARY_OPS[op](math)(req.a)
        except CurveMathError as exc:
            logger.info("modmath %s rejected: %s", op, exc)
            raise HTTPException(400, str(exc)) from exc
        logger.info("modmath %s ok", op)
        if isinstance(result, bool):
            return {"op": op, "result": result}
        return {"op": op, "result": str(result)}

    @app.get("/curves")
    def list_curves() -> Dict[str, List[str]]:
        return {"curves": sorted(CURVES)}

    @app.get("/curves/{name}")
    def curve_params(name: str) -> Dict[str, Any]:
        return _curve_or_404(name).to_dict()

    @app.post("/curves/{name}/add")
    def add(name: str, req: PointPairRequest) -> Dict[str, Any]:
        curve = _curve_or_404(name)
        try:
            p, q = _to_point(req.p), _to_point(req.q)
        except CurveMathError as exc:
            raise HTTPException(400, str(exc)) from exc
        _check_on_curve(curve, p)
        _check_on_curve(curve, q)
        return _point_response(curve, curve.point_addition(p, q))

    @app.post("/curves/{name}/double")
    def double(name: str, req: PointRequest) -> Dict[str, Any]:
        curve = _curve_or_404(name)
        try:
            p = _to_point(req.p)
        except CurveMathError as exc:
            raise HTTPException(400, str(exc)) from exc
        _check_on_curve(curve, p)
        return _point_response(curve, curve.point_doubling(p))

    @app.post("/curves/{name}/multiply")
    def multiply(name: str, req: ScalarRequest) -> Dict[str, Any]:
        curve = _curve_or_404(name)
        try:
            if req.p is None and req.use_generator:
                p = curve.generator
            else:
                p = _to_point(req.p)
            _check_on_curve(curve, p)
            result = curve.point_multiplication_scalar(req.scalar, p)
        except CurveMathError as exc:
            raise HTTPException(400, str(exc)) from exc
        logger.info("multiply on %s ok", curve.name)
        return _point_response(curve, result)

    return app


app = create_app()
