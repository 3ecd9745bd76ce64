"""Response schemas for API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from holonet.api.schemas.base import APIBaseSchema
from holonet.core.types import ResourceKind


class SearchResponse(APIBaseSchema):
    """Upstream search payload for one kind and query."""

    kind: ResourceKind
    query: str
    results: Any = Field(default_factory=list)


class ResourceResponse(APIBaseSchema):
    """A single entity with its cross-references resolved."""

    kind: ResourceKind
    metadata: dict[str, Any]


class TopQueryResponse(APIBaseSchema):
    """A query string and its search count."""

    query: str
    count: int


class StatisticsData(APIBaseSchema):
    """Query log aggregates."""

    total_queries: int
    total_cached_queries: int
    average_duration_ms: float
    top_five_queries: list[TopQueryResponse] = Field(default_factory=list)
    most_popular_hour: int | None = None
    calculated_at: datetime


class StatisticsResponse(APIBaseSchema):
    """Latest statistics snapshot."""

    data: StatisticsData


class StatisticsUnavailableResponse(APIBaseSchema):
    """Returned before any statistics have been computed."""

    message: str = "Statistics not yet available"
    calculated_at: datetime | None = None


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
