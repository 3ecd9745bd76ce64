"""Tests for the remembered decorator."""

from __future__ import annotations

import asyncio

from holonet.cache.decorators import remembered
from holonet.cache.memory import InMemoryCacheStore
from holonet.resolution.singleflight import InflightGroup


class Lookup:
    """Minimal owner of a remembered method."""

    def __init__(self, cache, inflight: InflightGroup | None = None) -> None:
        self._cache = cache
        self._inflight = inflight
        self.calls = 0

    @remembered(lambda kind, uid: f"meta:{kind}:{uid}")
    async def fetch(self, kind: str, uid: str) -> dict:
        self.calls += 1
        await asyncio.sleep(0.01)
        return {"kind": kind, "uid": uid, "call": self.calls}


class TestRemembered:
    """Tests for @remembered."""

    async def test_second_call_is_cached(self):
        lookup = Lookup(InMemoryCacheStore())

        first = await lookup.fetch("people", "1")
        second = await lookup.fetch("people", "1")

        assert first == second
        assert lookup.calls == 1

    async def test_key_includes_arguments(self):
        cache = InMemoryCacheStore()
        lookup = Lookup(cache)

        await lookup.fetch("people", "1")
        await lookup.fetch("people", "2")

        assert lookup.calls == 2
        assert "meta:people:1" in cache
        assert "meta:people:2" in cache

    async def test_without_cache_always_calls(self):
        lookup = Lookup(None)

        await lookup.fetch("people", "1")
        await lookup.fetch("people", "1")

        assert lookup.calls == 2

    async def test_concurrent_calls_share_inflight(self):
        """With an in-flight group, concurrent cold calls compute once."""
        lookup = Lookup(InMemoryCacheStore(), InflightGroup())

        results = await asyncio.gather(*(lookup.fetch("films", "1") for _ in range(5)))

        assert lookup.calls == 1
        assert all(result == results[0] for result in results)
