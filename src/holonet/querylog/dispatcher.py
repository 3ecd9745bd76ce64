"""Fire-and-forget delivery of query log events."""

from __future__ import annotations

import asyncio
import logging

from holonet.core.models import QueryLogEvent
from holonet.querylog.sinks import LogSink

logger = logging.getLogger(__name__)


class DeferredLogDispatcher:
    """
    Hands events to a sink on background tasks.

    ``dispatch`` returns immediately; the caller never awaits the write and
    a failing sink is logged, never re-raised. Pending tasks are strongly
    referenced until they finish so they are not garbage collected mid-write.
    """

    def __init__(self, sink: LogSink) -> None:
        self._sink = sink
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def dispatch(self, event: QueryLogEvent) -> None:
        """Schedule ``event`` for writing. Must be called from a running loop."""
        task = asyncio.get_running_loop().create_task(self._write(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _write(self, event: QueryLogEvent) -> None:
        try:
            await self._sink.write(event)
        except Exception as e:
            logger.exception(f"Failed to record query log event: {e}")

    async def drain(self) -> None:
        """Wait for every pending write to settle."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
