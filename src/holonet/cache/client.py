"""Async Redis client wrapper."""

from __future__ import annotations

import json
from typing import Any

import redis.asyncio as aioredis

from holonet.cache.base import CacheStore


class AsyncRedisClient(CacheStore):
    """Async Redis cache store with JSON serialization and no expiry."""

    def __init__(self, redis_url: str, prefix: str = "holonet") -> None:
        self._redis_url = redis_url
        self._prefix = prefix
        self._pool: aioredis.ConnectionPool | None = None
        self._redis: aioredis.Redis | None = None

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}" if self._prefix else key

    async def connect(self) -> None:
        """Connect to Redis."""
        self._pool = aioredis.ConnectionPool.from_url(
            self._redis_url,
            max_connections=20,
            decode_responses=True,
        )
        self._redis = aioredis.Redis(connection_pool=self._pool)

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._redis:
            await self._redis.aclose()
        if self._pool:
            await self._pool.disconnect()
        self._redis = None
        self._pool = None

    async def ping(self) -> bool:
        """Check the connection."""
        if not self._redis:
            return False
        return await self._redis.ping()

    async def get(self, key: str) -> Any | None:
        """Get a value from cache."""
        if not self._redis:
            return None
        value = await self._redis.get(self._key(key))
        if value is None:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value

    async def add(self, key: str, value: Any) -> bool:
        """Set a value only if the key does not exist (SET NX)."""
        if not self._redis:
            return False
        serialized = json.dumps(value, default=str)
        result = await self._redis.set(self._key(key), serialized, nx=True)
        return bool(result)

    async def exists(self, key: str) -> bool:
        """Check if a key exists."""
        if not self._redis:
            return False
        return await self._redis.exists(self._key(key)) > 0

    async def __aenter__(self) -> "AsyncRedisClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
