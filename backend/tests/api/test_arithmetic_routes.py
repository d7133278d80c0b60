"""Arithmetic Routes — HTTP contract for the seven operations.

Tests cover:
    - {"result": ...} bodies for valid input
    - 400 "invalid parameters" for missing/non-numeric operands on every endpoint
    - 400 domain messages for divide/modulo by zero and negative sqrt
"""

import pytest


@pytest.mark.parametrize("path, params, expected", [
    ("/api/add", {"num1": "2", "num2": "3.5"}, 5.5),
    ("/api/subtract", {"num1": "2", "num2": "3.5"}, -1.5),
    ("/api/multiply", {"num1": "-2", "num2": "3"}, -6),
    ("/api/divide", {"num1": "10", "num2": "2"}, 5),
    ("/api/exponent", {"num1": "2", "num2": "-2"}, 0.25),
    ("/api/sqrt", {"num": "16"}, 4),
    ("/api/modulo", {"num1": "7", "num2": "2"}, 1),
    ("/api/modulo", {"num1": "-7", "num2": "2"}, -1),
])
async def test_operation_returns_result(client, path, params, expected):
    res = await client.get(path, params=params)
    assert res.status_code == 200
    assert res.json() == {"result": expected}


async def test_add_matches_float_addition(client):
    res = await client.get("/api/add", params={"num1": "0.1", "num2": "0.2"})
    assert res.json()["result"] == 0.1 + 0.2


BINARY = ["/api/add", "/api/subtract", "/api/multiply", "/api/divide",
          "/api/exponent", "/api/modulo"]


@pytest.mark.parametrize("path", BINARY)
@pytest.mark.parametrize("params", [
    {"num1": "abc", "num2": "2"},
    {"num1": "2", "num2": "abc"},
    {"num1": "2"},
    {},
    {"num1": "", "num2": "2"},
    {"num1": "  ", "num2": "2"},
])
async def test_invalid_operands_return_400(client, path, params):
    res = await client.get(path, params=params)
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid parameters. Please provide valid numbers."


@pytest.mark.parametrize("params", [{}, {"num": "four"}, {"num": ""}])
async def test_sqrt_invalid_operand_returns_400(client, params):
    res = await client.get("/api/sqrt", params=params)
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid parameter. Please provide a valid number."


async def test_divide_by_zero_returns_400(client):
    res = await client.get("/api/divide", params={"num1": "10", "num2": "0"})
    assert res.status_code == 400
    assert res.json()["error"] == "Division by zero is not allowed."


async def test_modulo_by_zero_returns_400(client):
    res = await client.get("/api/modulo", params={"num1": "7", "num2": "0"})
    assert res.status_code == 400
    assert res.json()["error"] == "Modulo by zero is not allowed."


async def test_sqrt_negative_returns_400(client):
    res = await client.get("/api/sqrt", params={"num": "-4"})
    assert res.status_code == 400
    assert res.json()["error"] == "Square root of a negative number is not allowed."


async def test_overflowing_result_returns_400(client):
    res = await client.get("/api/exponent", params={"num1": "10", "num2": "400"})
    assert res.status_code == 400
    assert res.json()["code"] == "NON_FINITE_RESULT"
