"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
import respx

from holonet.cache.memory import InMemoryCacheStore
from holonet.querylog.dispatcher import DeferredLogDispatcher
from holonet.resolution.base import HttpUpstreamClient, UpstreamConfig
from tests.fakes import RecordingSink
from tests.payloads import BASE_URL


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Capability Fixtures
# ============================================================================


@pytest.fixture
def cache() -> InMemoryCacheStore:
    """Create an empty in-memory cache."""
    return InMemoryCacheStore()


@pytest.fixture
async def upstream() -> AsyncIterator[HttpUpstreamClient]:
    """Create an upstream client pointed at the test base URL."""
    client = HttpUpstreamClient(UpstreamConfig(base_url=BASE_URL, timeout=5.0))
    yield client
    await client.close()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def dispatcher(recording_sink: RecordingSink) -> DeferredLogDispatcher:
    """Dispatcher writing to the recording sink."""
    return DeferredLogDispatcher(recording_sink)

