"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable or seeding failed

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - Seed status read from app.state, written once by the lifespan
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

import employee_api.infrastructure.database as db_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "employee-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — database connectivity plus startup seeding."""
    db_manager = db_module.db_manager
    db_ok = await db_manager.health_check() if db_manager else False
    if not db_ok:
        return _not_ready("database_unavailable")
    if not getattr(request.app.state, "seeded", False):
        return _not_ready("seed_incomplete")
    return {"status": "ready", "checks": {"database": "healthy", "seed": "complete"}}


def _not_ready(reason: str) -> JSONResponse:
    logger.warning(f"Readiness check failed: {reason}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
