"""Application wiring — middleware stack and cross-origin behaviour."""

from calculator_service.api.middleware import RequestLoggingMiddleware
from calculator_service.main import app


def test_request_logging_is_the_only_user_middleware():
    assert [m.cls for m in app.user_middleware] == [RequestLoggingMiddleware]


async def test_no_cors_headers_for_browser_origin(client):
    res = await client.get("/health", headers={"Origin": "http://localhost:5173"})
    assert res.status_code == 200
    assert "access-control-allow-origin" not in res.headers
