"""
Health check and version routes.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from workova.api.deps import get_database
from workova.core.config import settings
from workova.core.database import Database
from workova.schemas.base import BaseSchema

router = APIRouter(tags=["health"])


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str
    timestamp: str
    checks: dict


class VersionResponse(BaseSchema):
    name: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check(db: Database = Depends(get_database)):
    """
    Liveness check for monitoring.

    Always answers 200; status is "degraded" if the local store is unreachable.
    """
    checks = {"store": "healthy" if await db.ping() else "unhealthy"}

    all_healthy = all(v == "healthy" for v in checks.values())

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks=checks,
    )


@router.get("/version", response_model=VersionResponse)
async def version():
    """Application name and version."""
    return VersionResponse(name=settings.app_name, version=settings.app_version)
