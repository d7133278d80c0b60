"""Arithmetic Routes — seven GET endpoints, one per operation.

Invariants:
    - Operands arrive as raw query text; parsing happens in core/operands.py
    - Every failure is a CalculatorError raised from core (400), handled globally
    - Success body is exactly {"result": <float>}

Design Decisions:
    - Query params typed as str | None: FastAPI's float coercion would accept
      "nan"/"inf" and answer missing params with 422, both off-contract
"""

from fastapi import APIRouter, Query

from calculator_service.core import arithmetic
from calculator_service.core.operands import parse_operand, parse_operands

router = APIRouter(prefix="/api", tags=["arithmetic"])


@router.get("/add")
async def add(num1: str | None = Query(None), num2: str | None = Query(None)):
    a, b = parse_operands(num1, num2)
    return {"result": arithmetic.add(a, b)}


@router.get("/subtract")
async def subtract(num1: str | None = Query(None), num2: str | None = Query(None)):
    a, b = parse_operands(num1, num2)
    return {"result": arithmetic.subtract(a, b)}


@router.get("/multiply")
async def multiply(num1: str | None = Query(None), num2: str | None = Query(None)):
    a, b = parse_operands(num1, num2)
    return {"result": arithmetic.multiply(a, b)}


@router.get("/divide")
async def divide(num1: str | None = Query(None), num2: str | None = Query(None)):
    a, b = parse_operands(num1, num2)
    return {"result": arithmetic.divide(a, b)}


@router.get("/exponent")
async def exponent(num1: str | None = Query(None), num2: str | None = Query(None)):
    a, b = parse_operands(num1, num2)
    return {"result": arithmetic.exponent(a, b)}


@router.get("/sqrt")
async def sqrt(num: str | None = Query(None)):
    x = parse_operand(num, single=True)
    return {"result": arithmetic.sqrt(x)}


@router.get("/modulo")
async def modulo(num1: str | None = Query(None), num2: str | None = Query(None)):
    a, b = parse_operands(num1, num2)
    return {"result": arithmetic.modulo(a, b)}
