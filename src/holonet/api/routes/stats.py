"""Query statistics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from holonet.api.dependencies import DBSession
from holonet.api.schemas import (
    StatisticsData,
    StatisticsResponse,
    StatisticsUnavailableResponse,
)
from holonet.querylog.statistics import QueryStatisticsJob, latest_statistics

router = APIRouter(prefix="/stats", tags=["stats"])


def _require_database(session) -> None:
    if session is None:
        raise HTTPException(
            status_code=503,
            detail="Statistics not available. A database may not be configured.",
        )


@router.get(
    "",
    response_model=StatisticsResponse | StatisticsUnavailableResponse,
    operation_id="getStatistics",
    summary="Latest query statistics",
    description="Return the most recently computed query log statistics.",
)
async def get_statistics(
    session: DBSession,
) -> StatisticsResponse | StatisticsUnavailableResponse:
    """Return the latest snapshot, or a placeholder before the first run."""
    _require_database(session)

    stats = await latest_statistics(session)
    if stats is None:
        return StatisticsUnavailableResponse()
    return StatisticsResponse(data=StatisticsData.model_validate(stats.model_dump()))


@router.post(
    "/compute",
    response_model=StatisticsResponse,
    operation_id="computeStatistics",
    summary="Compute query statistics",
    description="Aggregate the query log now and store a new snapshot.",
)
async def compute_statistics(request: Request) -> StatisticsResponse:
    """Run the statistics job on demand."""
    session_factory = getattr(request.app.state, "db_session_factory", None)
    _require_database(session_factory)

    stats = await QueryStatisticsJob(session_factory).run()
    return StatisticsResponse(data=StatisticsData.model_validate(stats.model_dump()))
