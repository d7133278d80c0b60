"""Error Hierarchy — status codes, categories and client-safe bodies."""

from uuid import uuid4

import pytest

from calculator_service.core.errors import (
    CalculatorError, DivisionByZeroError, ErrorCategory, InvalidOperandError,
    InvalidRecordIdError, ModuloByZeroError, NegativeSquareRootError,
    NonFiniteResultError, ResourceNotFoundError, StoreError,
)
from calculator_service.core.record_ids import parse_user_id


@pytest.mark.parametrize("error", [
    InvalidOperandError(), DivisionByZeroError(), ModuloByZeroError(),
    NegativeSquareRootError(), NonFiniteResultError("add"),
    InvalidRecordIdError("nope"),
])
def test_client_errors_are_400(error):
    assert isinstance(error, CalculatorError)
    assert error.http_status == 400
    assert error.to_response()["error"] == error.message


def test_invalid_parameters_distinct_from_domain_violations():
    assert InvalidOperandError().category == ErrorCategory.VALIDATION
    assert DivisionByZeroError().category == ErrorCategory.DOMAIN
    assert InvalidOperandError().message != DivisionByZeroError().message


def test_not_found_is_404():
    error = ResourceNotFoundError("User", "abc")
    assert error.http_status == 404
    assert error.to_response() == {"error": "User not found", "code": "RESOURCE_NOT_FOUND"}


def test_store_error_hides_detail_from_client():
    error = StoreError("insert", "OperationalError: no such table: users")
    assert error.http_status == 500
    assert "no such table" in error.message
    assert error.to_response() == {"error": "Internal Server Error", "code": "STORE_ERROR"}


def test_parse_user_id_round_trips_uuid():
    uid = uuid4()
    assert parse_user_id(str(uid)) == uid


@pytest.mark.parametrize("raw", ["", "123", "not-a-uuid", "507f1f77bcf86cd799439011"])
def test_parse_user_id_rejects_malformed(raw):
    with pytest.raises(InvalidRecordIdError):
        parse_user_id(raw)
