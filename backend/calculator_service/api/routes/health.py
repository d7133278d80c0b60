"""Health & Readiness Checks — liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 {"success": true, "message": "It is working"}
    - GET /health/ready returns 503 if the store is unreachable

Design Decisions:
    - Separate liveness/readiness: liveness never touches the store
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {"success": True, "message": "It is working"}


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness check — includes store connectivity."""
    manager = getattr(request.app.state, "db_manager", None)
    store_ok = await manager.health_check() if manager else False
    if not store_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "store_unavailable"},
        )
    return {"status": "ready", "checks": {"store": "healthy"}}
