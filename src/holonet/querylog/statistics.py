"""Aggregation of the query log into statistics snapshots."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from holonet.core.models import QueryStatistics
from holonet.db.repositories.query import QueryRepository, QueryStatisticRepository
from holonet.db.session import session_scope

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)


class QueryStatisticsJob:
    """
    Computes aggregates over the ``queries`` table and stores a snapshot.

    Aggregates: total queries, queries served from cache, average duration
    (two decimals), the five most frequent query strings and the busiest
    hour of the day.
    """

    TOP_QUERIES_LIMIT = 5

    def __init__(self, session_factory: "async_sessionmaker[AsyncSession]") -> None:
        self._session_factory = session_factory

    async def run(self, now: datetime | None = None) -> QueryStatistics:
        """Compute, persist and return a fresh snapshot."""
        async with session_scope(self._session_factory) as session:
            stats = await self.compute(session, now)
            await QueryStatisticRepository(session).record(stats)

        logger.info(
            f"Computed query statistics: {stats.total_queries} queries, "
            f"{stats.total_cached_queries} cached"
        )
        return stats

    async def compute(
        self,
        session: "AsyncSession",
        now: datetime | None = None,
    ) -> QueryStatistics:
        """Compute a snapshot without persisting it."""
        queries = QueryRepository(session)
        return QueryStatistics(
            total_queries=await queries.count(),
            total_cached_queries=await queries.count_cached(),
            average_duration_ms=await queries.average_duration_ms(),
            top_five_queries=await queries.top_queries(self.TOP_QUERIES_LIMIT),
            most_popular_hour=await queries.most_popular_hour(),
            calculated_at=now or datetime.now(timezone.utc),
        )


async def latest_statistics(session: "AsyncSession") -> QueryStatistics | None:
    """Load the most recent snapshot, if any has been computed."""
    model = await QueryStatisticRepository(session).latest()
    if model is None:
        return None
    return QueryStatistics.model_validate(model)
