"""Per-key joining of concurrent computations."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class InflightGroup:
    """
    Runs at most one computation per key at a time within this process.

    Callers arriving while a computation for the same key is running await
    that computation's outcome (value or exception) instead of starting
    their own. Once it settles the key is released, so later calls start
    fresh; pair this with a cache to make the result stick.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, asyncio.Task[Any]] = {}

    def __len__(self) -> int:
        return len(self._tasks)

    async def do(self, key: str, fn: Callable[[], Awaitable[Any]]) -> Any:
        task = self._tasks.get(key)
        if task is None:
            task = asyncio.ensure_future(fn())
            self._tasks[key] = task
            task.add_done_callback(lambda _t, k=key: self._tasks.pop(k, None))
        else:
            logger.debug(f"Joining in-flight computation for {key}")

        # A cancelled waiter must not cancel the shared computation
        return await asyncio.shield(task)
