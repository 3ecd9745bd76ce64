"""Tests for in-flight computation sharing."""

from __future__ import annotations

import asyncio

import pytest

from holonet.resolution.singleflight import InflightGroup


class TestInflightGroup:
    """Tests for InflightGroup.do."""

    async def test_concurrent_callers_share_result(self):
        group = InflightGroup()
        calls = 0
        release = asyncio.Event()

        async def compute():
            nonlocal calls
            calls += 1
            await release.wait()
            return "value"

        waiters = [asyncio.create_task(group.do("k", compute)) for _ in range(4)]
        await asyncio.sleep(0)
        assert len(group) == 1

        release.set()
        results = await asyncio.gather(*waiters)

        assert results == ["value"] * 4
        assert calls == 1

    async def test_key_released_after_completion(self):
        """Later calls should start a fresh computation."""
        group = InflightGroup()
        calls = 0

        async def compute():
            nonlocal calls
            calls += 1
            return calls

        assert await group.do("k", compute) == 1
        await asyncio.sleep(0)
        assert await group.do("k", compute) == 2
        assert len(group) == 0

    async def test_exception_shared(self):
        group = InflightGroup()
        release = asyncio.Event()

        async def compute():
            await release.wait()
            raise RuntimeError("boom")

        waiters = [asyncio.create_task(group.do("k", compute)) for _ in range(3)]
        await asyncio.sleep(0)
        release.set()
        results = await asyncio.gather(*waiters, return_exceptions=True)

        assert all(isinstance(r, RuntimeError) for r in results)

    async def test_different_keys_independent(self):
        group = InflightGroup()

        async def compute_a():
            return "a"

        async def compute_b():
            return "b"

        assert await asyncio.gather(group.do("a", compute_a), group.do("b", compute_b)) == [
            "a",
            "b",
        ]

    async def test_cancelled_waiter_does_not_cancel_computation(self):
        group = InflightGroup()
        release = asyncio.Event()

        async def compute():
            await release.wait()
            return "done"

        first = asyncio.create_task(group.do("k", compute))
        second = asyncio.create_task(group.do("k", compute))
        await asyncio.sleep(0)

        first.cancel()
        with pytest.raises(asyncio.CancelledError):
            await first

        release.set()
        assert await second == "done"
