"""FastAPI dependency injection."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from holonet.db.session import session_scope
from holonet.resolution.metadata import MetadataResolver
from holonet.resolution.registry import ResolverRegistry
from holonet.resolution.search import SearchResolver


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession | None]:
    """
    Get database session from app state.

    Yields None when no database is configured; otherwise a session that is
    committed on success and rolled back on error.
    """
    session_factory = getattr(request.app.state, "db_session_factory", None)
    if session_factory is None:
        yield None
        return

    async with session_scope(session_factory) as session:
        yield session


async def get_resolver_registry(request: Request) -> ResolverRegistry:
    """Get resolver registry from app state."""
    return request.app.state.resolver_registry


async def get_search_resolver(
    registry: ResolverRegistry = Depends(get_resolver_registry),
) -> SearchResolver:
    return registry.search


async def get_metadata_resolver(
    registry: ResolverRegistry = Depends(get_resolver_registry),
) -> MetadataResolver:
    return registry.metadata


# Type aliases for cleaner dependency injection
DBSession = Annotated[AsyncSession | None, Depends(get_db_session)]
Search = Annotated[SearchResolver, Depends(get_search_resolver)]
Metadata = Annotated[MetadataResolver, Depends(get_metadata_resolver)]
