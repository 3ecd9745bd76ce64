"""Caching layer with Redis and in-memory stores."""

from .base import CacheStore
from .client import AsyncRedisClient
from .decorators import remembered
from .keys import CacheKeys
from .memory import InMemoryCacheStore

__all__ = [
    "AsyncRedisClient",
    "CacheKeys",
    "CacheStore",
    "InMemoryCacheStore",
    "remembered",
]
