"""Arithmetic — tests for the pure operations and their domain checks."""

import math

import pytest

from calculator_service.core import arithmetic
from calculator_service.core.errors import (
    DivisionByZeroError, ModuloByZeroError, NegativeSquareRootError,
    NonFiniteResultError,
)


def test_add_matches_float_addition():
    assert arithmetic.add(0.1, 0.2) == 0.1 + 0.2


def test_subtract_and_multiply():
    assert arithmetic.subtract(5, 7.5) == -2.5
    assert arithmetic.multiply(-3, 4) == -12


def test_divide():
    assert arithmetic.divide(10, 2) == 5


@pytest.mark.parametrize("zero", [0.0, -0.0])
def test_divide_by_zero_raises(zero):
    with pytest.raises(DivisionByZeroError) as exc:
        arithmetic.divide(10, zero)
    assert exc.value.message == "Division by zero is not allowed."


def test_exponent_supports_fractional_and_negative_powers():
    assert arithmetic.exponent(2, 10) == 1024
    assert arithmetic.exponent(9, 0.5) == 3
    assert arithmetic.exponent(2, -1) == 0.5


@pytest.mark.parametrize("base, power", [(-8, 1 / 3), (0, -1), (10, 400)])
def test_exponent_undefined_or_overflowing_result_raises(base, power):
    with pytest.raises(NonFiniteResultError):
        arithmetic.exponent(base, power)


def test_multiply_overflow_raises():
    with pytest.raises(NonFiniteResultError) as exc:
        arithmetic.multiply(1e308, 10)
    assert exc.value.operation == "multiply"


def test_sqrt():
    assert arithmetic.sqrt(16) == 4
    assert arithmetic.sqrt(0) == 0


def test_sqrt_negative_raises():
    with pytest.raises(NegativeSquareRootError):
        arithmetic.sqrt(-4)


def test_modulo_follows_sign_of_dividend():
    assert arithmetic.modulo(7, 2) == 1
    assert arithmetic.modulo(-7, 2) == -1
    assert arithmetic.modulo(7, -2) == 1
    assert math.isclose(arithmetic.modulo(5.5, 2), 1.5)


def test_modulo_by_zero_raises():
    with pytest.raises(ModuloByZeroError):
        arithmetic.modulo(7, 0)
