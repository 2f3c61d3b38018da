"""Health & App Info: liveness with app metadata, readiness with a store probe.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the store is uninitialized, poisoned or unreachable
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from zetodo.config import get_settings
import zetodo.infrastructure.database as db_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
def health_check():
    """Liveness probe plus app name/version/description."""
    settings = get_settings()
    return {
        "status": "healthy",
        "name": settings.app_name,
        "version": settings.app_version,
        "description": settings.app_description,
    }


@router.get("/ready")
def readiness_check():
    """Readiness probe: the store handle can run a query."""
    manager = db_module.db_manager
    db_ok = manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"database": "healthy"},
        "schema_version": manager.schema_version,
    }
