"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request
from sqlalchemy import text

from holonet import __version__
from holonet.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its dependencies.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"

    # Check Redis
    try:
        cache = getattr(request.app.state, "cache", None)
        if cache is not None and hasattr(cache, "ping"):
            services["redis"] = "up" if await cache.ping() else "down"
        else:
            services["redis"] = "unknown"
    except Exception:
        services["redis"] = "down"

    if services["redis"] == "down":
        overall_status = "degraded"

    # Check database (query log only, resolution works without it)
    try:
        db_factory = getattr(request.app.state, "db_session_factory", None)
        if db_factory:
            async with db_factory() as session:
                await session.execute(text("SELECT 1"))
            services["database"] = "up"
        else:
            services["database"] = "unknown"
    except Exception:
        services["database"] = "down"
        overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        services=services,
    )
