"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health/ always returns 200 if the process is up
    - Reports table sizes; no readiness probe since storage is in-process
"""

import logging
from fastapi import APIRouter, Depends, status

from filmorate.api.dependencies import get_app_settings, get_relation_service
from filmorate.config import Settings
from filmorate.services.relation_service import RelationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(
    service: RelationService = Depends(get_relation_service),
    settings: Settings = Depends(get_app_settings),
):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "filmorate-api",
        "version": settings.app_version,
        "counts": {
            "users": len(service.list_users()),
            "films": len(service.list_films()),
        },
    }
