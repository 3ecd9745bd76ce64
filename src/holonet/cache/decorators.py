"""Caching decorators for async methods."""

from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")


def remembered(key_builder: Callable[..., str]):
    """
    Decorator caching an async method's result forever.

    Args:
        key_builder: Function that takes the same args as the decorated method
                    and returns a cache key string.

    The cache is taken from ``self._cache``. When ``self._inflight`` is set,
    concurrent first calls for the same key share a single computation.

    Usage:
        @remembered(lambda kind, uid: CacheKeys.meta(kind, uid))
        async def _resolve(self, kind: ResourceKind, uid: str) -> dict:
            ...
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        async def wrapper(self, *args: P.args, **kwargs: P.kwargs) -> R:
            cache = getattr(self, "_cache", None)
            if cache is None:
                return await func(self, *args, **kwargs)

            key = key_builder(*args, **kwargs)

            async def compute():
                return await func(self, *args, **kwargs)

            inflight = getattr(self, "_inflight", None)
            if inflight is None:
                return await cache.remember(key, compute)
            return await inflight.do(key, lambda: cache.remember(key, compute))

        return wrapper

    return decorator
