"""Destinations for query log events."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from holonet.core.models import QueryLogEvent
from holonet.db.repositories.query import QueryRepository
from holonet.db.session import session_scope

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)


class LogSink(ABC):
    """Receives query log events. Storage format is up to the sink."""

    @abstractmethod
    async def write(self, event: QueryLogEvent) -> None:
        """Record one event."""
        ...


class LoggingSink(LogSink):
    """Writes events to a standard logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logging.getLogger("holonet.queries")

    async def write(self, event: QueryLogEvent) -> None:
        self._log.info(
            "query=%r kind=%s cached=%s duration_ms=%d",
            event.query_string,
            event.resource_kind,
            event.served_from_cache,
            event.duration_ms,
        )


class DatabaseSink(LogSink):
    """Persists events to the ``queries`` table, one session per event."""

    def __init__(self, session_factory: "async_sessionmaker[AsyncSession]") -> None:
        self._session_factory = session_factory

    async def write(self, event: QueryLogEvent) -> None:
        async with session_scope(self._session_factory) as session:
            await QueryRepository(session).record(event)
