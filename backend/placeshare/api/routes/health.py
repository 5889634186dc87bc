"""Health & Readiness Probes - liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if the database backend is unreachable
    - The memory backend is always ready
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

import placeshare.infrastructure.database as database
from placeshare.config import Settings, get_settings

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "placeshare-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe - includes storage connectivity."""
    if settings.storage_backend == "memory":
        return {"status": "ready", "checks": {"storage": "memory"}}

    db_ok = (
        await database.db_manager.health_check()
        if database.db_manager else False
    )
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
