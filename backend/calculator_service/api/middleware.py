"""Request Logging Middleware — one structured log record per inbound request.

Invariants:
    - Runs before any route handler; always passes the request through
    - Logs method, full URL, derived operation, and raw num1/num2 query text
    - A failing log handler never fails the request; its traceback goes to stderr,
      the way logging.Handler.handleError reports its own failures

Design Decisions:
    - BaseHTTPMiddleware: request object with parsed query params for free
    - Message built by core/request_summary.py so the format is unit-testable
"""

import logging
import sys
import traceback
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from calculator_service.core.request_summary import derive_operation, summarize_request

logger = logging.getLogger("calculator_service.requests")


def log_request(request: Request) -> None:
    operation = derive_operation(request.url.path)
    num1 = request.query_params.get("num1")
    num2 = request.query_params.get("num2")
    url = str(request.url)
    logger.info(
        summarize_request(request.method, url, operation, num1, num2),
        extra={
            "method": request.method,
            "url": url,
            "operation": operation,
            "num1": num1,
            "num2": num2,
        },
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Emit the per-request operation log line, then continue."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            log_request(request)
        except Exception:
            traceback.print_exc(file=sys.stderr)
        return await call_next(request)
