"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the store-assigned UUID — never a bare str once parsed
    - Operand is always a finite float (enforced by core/operands.py)
    - Every supported arithmetic operation is an Operation member

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: the value is the URL path segment and the log "operation" label
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Operand = NewType("Operand", float)     # finite


# ─── Enums ───────────────────────────────────────────────────────

class Operation(str, Enum):
    """Arithmetic operations exposed under /api/<value>."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    EXPONENT = "exponent"
    SQRT = "sqrt"
    MODULO = "modulo"
