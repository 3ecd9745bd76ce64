"""API test fixtures with an app wired to in-memory capabilities."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from holonet.api.app import create_app
from holonet.cache.memory import InMemoryCacheStore
from holonet.querylog.dispatcher import DeferredLogDispatcher
from holonet.resolution.base import HttpUpstreamClient
from holonet.resolution.registry import ResolverRegistry


@pytest.fixture
async def test_app(
    cache: InMemoryCacheStore,
    upstream: HttpUpstreamClient,
    dispatcher: DeferredLogDispatcher,
) -> AsyncIterator[FastAPI]:
    """
    Create the application with state set directly.

    The lifespan does not run under ASGITransport, so the state it would
    build is provided here. No database is configured.
    """
    app = create_app()
    app.state.cache = cache
    app.state.db_engine = None
    app.state.db_session_factory = None
    app.state.log_dispatcher = dispatcher
    app.state.resolver_registry = ResolverRegistry(cache, upstream, dispatcher)

    yield app

    app.dependency_overrides.clear()
    await dispatcher.drain()


@pytest.fixture
async def test_client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
