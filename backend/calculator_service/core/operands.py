"""Operand Parsing — strict text-to-float conversion for query parameters.

Invariants:
    - Only plain ASCII decimal text is accepted: optional sign, digits with an optional
      fraction, optional exponent. Surrounding whitespace is trimmed first.
    - None, empty and whitespace-only input are rejected (never coerced to 0)
    - nan/inf spellings, underscores, hex and trailing garbage ("12abc") are rejected
    - A value that overflows to infinity is rejected

Design Decisions:
    - Regex gate before float(): float() alone accepts "nan", "inf", "1_000"
"""

import math
import re

from calculator_service.core.domain_types import Operand
from calculator_service.core.errors import InvalidOperandError

_DECIMAL = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII,
)


def is_decimal_text(text: str | None) -> bool:
    """True when text is a plain decimal literal (after trimming)."""
    if text is None:
        return False
    return _DECIMAL.fullmatch(text.strip()) is not None


def parse_operand(text: str | None, single: bool = False) -> Operand:
    """Parse one operand or raise InvalidOperandError."""
    if not is_decimal_text(text):
        raise InvalidOperandError(single=single)
    value = float(text.strip())
    if not math.isfinite(value):
        raise InvalidOperandError(single=single)
    return Operand(value)


def parse_operands(
    num1: str | None, num2: str | None,
) -> tuple[Operand, Operand]:
    """Parse both operands. Either failing yields the same plural error."""
    return parse_operand(num1), parse_operand(num2)
