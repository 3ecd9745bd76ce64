"""Domain models for resolved resources and query logging."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Upstream `result` payload: {"uid": ..., "properties": {...}}
RawResource = dict[str, Any]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResolvedReference(BaseModel):
    """A cross-reference resolved to a display name and a local link."""

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, description="Display name of the target")
    link: str = Field(..., description="Local path of the target, e.g. /movies/1")


class QueryLogEvent(BaseModel):
    """One search invocation, handed to the query log after resolution."""

    model_config = ConfigDict(frozen=True)

    query_string: str
    resource_kind: str = Field(..., description="Kind as given by the caller")
    served_from_cache: bool
    duration_ms: int = Field(..., ge=0)
    timestamp: datetime = Field(default_factory=_utcnow)


class TopQuery(BaseModel):
    """A query string and how often it was searched."""

    query: str
    count: int


class QueryStatistics(BaseModel):
    """Aggregate view over the query log."""

    model_config = ConfigDict(from_attributes=True)

    total_queries: int = 0
    total_cached_queries: int = 0
    average_duration_ms: float = 0.0
    top_five_queries: list[TopQuery] = Field(default_factory=list)
    most_popular_hour: int | None = Field(default=None, ge=0, le=23)
    calculated_at: datetime = Field(default_factory=_utcnow)

    @property
    def cache_hit_ratio(self) -> float:
        """Share of queries served from cache."""
        if not self.total_queries:
            return 0.0
        return self.total_cached_queries / self.total_queries
