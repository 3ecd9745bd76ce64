"""Abstract cache store interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class CacheStore(ABC):
    """
    Key/value store used by the resolvers.

    Values are JSON-compatible. Entries never expire: the catalog is
    treated as immutable once fetched.
    """

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check if a key exists."""

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Get a value, or None if the key is absent."""

    @abstractmethod
    async def add(self, key: str, value: Any) -> bool:
        """
        Store a value only if the key is absent.

        Returns:
            True if this call wrote the value, False if a value was already there.
        """

    async def remember(
        self,
        key: str,
        compute: Callable[[], Awaitable[Any]],
    ) -> Any:
        """
        Return the cached value for key, computing and storing it on a miss.

        The check and the write are not mutually exclusive: concurrent first
        callers may each run ``compute``. The write is set-if-absent, so the
        value returned is always the one that ended up stored.
        """
        if await self.exists(key):
            logger.debug(f"Cache hit: {key}")
            return await self.get(key)

        value = await compute()
        if not await self.add(key, value):
            logger.debug(f"Lost write race for {key}, returning stored value")
            return await self.get(key)
        return value

    async def close(self) -> None:
        """Release any held resources."""
        return None
