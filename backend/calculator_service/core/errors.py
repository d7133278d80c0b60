"""Error Hierarchy — typed, categorized exceptions for every calculator failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) carry a human-readable message safe to return as-is
    - Store errors (500) never put internal detail into to_response()

Design Decisions:
    - Single hierarchy with CalculatorError base: one global handler translates
      all of them to HTTP (ADR: no per-route try/except)
    - Flat {"error": message} envelope kept for wire compatibility with existing clients
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DOMAIN = "domain"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORE = "store"
    INTERNAL = "internal"


class CalculatorError(Exception):
    """Base exception for all calculator service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message, "code": self.code}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidOperandError(CalculatorError):
    """Operand missing or not a finite decimal number."""
    def __init__(self, single: bool = False):
        message = (
            "Invalid parameter. Please provide a valid number."
            if single else
            "Invalid parameters. Please provide valid numbers."
        )
        super().__init__(
            message, "INVALID_PARAMETERS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class DivisionByZeroError(CalculatorError):
    def __init__(self):
        super().__init__(
            "Division by zero is not allowed.",
            "DIVISION_BY_ZERO", ErrorCategory.DOMAIN,
            ErrorSeverity.WARNING, 400,
        )


class ModuloByZeroError(CalculatorError):
    def __init__(self):
        super().__init__(
            "Modulo by zero is not allowed.",
            "MODULO_BY_ZERO", ErrorCategory.DOMAIN,
            ErrorSeverity.WARNING, 400,
        )


class NegativeSquareRootError(CalculatorError):
    def __init__(self):
        super().__init__(
            "Square root of a negative number is not allowed.",
            "NEGATIVE_SQUARE_ROOT", ErrorCategory.DOMAIN,
            ErrorSeverity.WARNING, 400,
        )


class NonFiniteResultError(CalculatorError):
    """Result overflowed or is undefined (JSON cannot carry inf/nan)."""
    def __init__(self, operation: str):
        super().__init__(
            "Result is not a finite number.",
            "NON_FINITE_RESULT", ErrorCategory.DOMAIN,
            ErrorSeverity.WARNING, 400,
        )
        self.operation = operation


class InvalidRecordIdError(CalculatorError):
    """Record identifier is not well-formed for the store."""
    def __init__(self, raw_id: str):
        super().__init__(
            "Invalid user id.",
            "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.raw_id = raw_id


class ResourceNotFoundError(CalculatorError):
    """Requested record does not exist (or an update/delete touched nothing)."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreError(CalculatorError):
    """Store operation failed. Detail goes to the log, never to the client."""
    def __init__(self, operation: str, detail: str = ""):
        super().__init__(
            f"Store {operation} failed: {detail}" if detail else f"Store {operation} failed",
            "STORE_ERROR", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"error": "Internal Server Error", "code": self.code}
