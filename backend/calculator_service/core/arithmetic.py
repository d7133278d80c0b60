"""Arithmetic — pure operations with per-operation domain checks.

Invariants:
    - Inputs are finite floats (parsed by core/operands.py)
    - Outputs are finite floats; anything else raises NonFiniteResultError
    - divide/modulo reject a zero divisor, sqrt rejects negative input
    - modulo follows the sign of the dividend (math.fmod), not floor modulo

Design Decisions:
    - math.pow over **: ** returns complex for negative base with fractional
      exponent, math.pow raises ValueError which maps to NonFiniteResultError
"""

import math

from calculator_service.core.domain_types import Operation
from calculator_service.core.errors import (
    DivisionByZeroError, ModuloByZeroError, NegativeSquareRootError,
    NonFiniteResultError,
)


def _finite(value: float, operation: Operation) -> float:
    if not math.isfinite(value):
        raise NonFiniteResultError(operation.value)
    return value


def add(a: float, b: float) -> float:
    return _finite(a + b, Operation.ADD)


def subtract(a: float, b: float) -> float:
    return _finite(a - b, Operation.SUBTRACT)


def multiply(a: float, b: float) -> float:
    return _finite(a * b, Operation.MULTIPLY)


def divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError()
    return _finite(a / b, Operation.DIVIDE)


def exponent(base: float, power: float) -> float:
    """base ** power with IEEE pow semantics (fractional and negative powers)."""
    try:
        value = math.pow(base, power)
    except (ValueError, OverflowError):
        # negative base with fractional power, 0 ** negative, overflow
        raise NonFiniteResultError(Operation.EXPONENT.value)
    return _finite(value, Operation.EXPONENT)


def sqrt(x: float) -> float:
    if x < 0:
        raise NegativeSquareRootError()
    return math.sqrt(x)


def modulo(a: float, b: float) -> float:
    if b == 0:
        raise ModuloByZeroError()
    return math.fmod(a, b)
