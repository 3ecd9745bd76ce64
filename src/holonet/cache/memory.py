"""In-process cache store."""

from __future__ import annotations

import asyncio
import copy
from typing import Any

from holonet.cache.base import CacheStore


class InMemoryCacheStore(CacheStore):
    """
    Dict-backed cache store for tests and single-process deployments.

    Values are deep-copied on the way in and out so callers cannot mutate
    what is cached, matching the behavior of a serializing backend.
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._lock = asyncio.Lock()

    async def exists(self, key: str) -> bool:
        return key in self._data

    async def get(self, key: str) -> Any | None:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    async def add(self, key: str, value: Any) -> bool:
        async with self._lock:
            if key in self._data:
                return False
            self._data[key] = copy.deepcopy(value)
            return True

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: str) -> bool:
        return key in self._data
