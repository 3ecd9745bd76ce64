"""Query log repositories with aggregation queries."""

from sqlalchemy import desc, extract, func, literal_column, select

from holonet.core.models import QueryLogEvent, QueryStatistics, TopQuery
from holonet.db.models.query import QueryModel
from holonet.db.models.query_statistic import QueryStatisticModel
from holonet.db.repositories.base import BaseRepository


class QueryRepository(BaseRepository[QueryModel]):
    """Repository for query log entries."""

    model = QueryModel

    async def record(self, event: QueryLogEvent) -> QueryModel:
        """Persist one log event."""
        return await self.create(QueryModel.from_event(event))

    async def count_cached(self) -> int:
        """Count queries served from cache."""
        stmt = (
            select(func.count())
            .select_from(QueryModel)
            .where(QueryModel.served_from_cache.is_(True))
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def average_duration_ms(self) -> float:
        """Average duration rounded to two decimals, 0.0 when empty."""
        stmt = select(func.round(func.avg(QueryModel.duration_ms), 2))
        result = await self._session.execute(stmt)
        value = result.scalar_one_or_none()
        return float(value) if value is not None else 0.0

    async def top_queries(self, limit: int = 5) -> list[TopQuery]:
        """Most searched query strings, most frequent first."""
        hits = func.count().label("hits")
        stmt = (
            select(QueryModel.query_string, hits)
            .group_by(QueryModel.query_string)
            .order_by(desc(hits), QueryModel.query_string)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [TopQuery(query=row.query_string, count=row.hits) for row in result]

    async def most_popular_hour(self) -> int | None:
        """Hour of day (0-23, UTC) with the most queries, None when empty."""
        utc_created_at = func.timezone(literal_column("'UTC'"), QueryModel.created_at)
        hour = extract("hour", utc_created_at).label("hour")
        hits = func.count().label("hits")
        stmt = select(hour, hits).group_by(hour).order_by(desc(hits), hour).limit(1)
        result = await self._session.execute(stmt)
        row = result.first()
        return int(row.hour) if row is not None else None


class QueryStatisticRepository(BaseRepository[QueryStatisticModel]):
    """Repository for computed statistics snapshots."""

    model = QueryStatisticModel

    async def latest(self) -> QueryStatisticModel | None:
        """The most recently calculated snapshot."""
        stmt = (
            select(QueryStatisticModel)
            .order_by(desc(QueryStatisticModel.calculated_at))
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def record(self, stats: QueryStatistics) -> QueryStatisticModel:
        """Persist a snapshot."""
        return await self.create(
            QueryStatisticModel(
                total_queries=stats.total_queries,
                total_cached_queries=stats.total_cached_queries,
                average_duration_ms=stats.average_duration_ms,
                top_five_queries=[q.model_dump() for q in stats.top_five_queries],
                most_popular_hour=stats.most_popular_hour,
                calculated_at=stats.calculated_at,
            )
        )
