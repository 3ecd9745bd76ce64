"""Main library client for standalone usage."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from holonet.cache.memory import InMemoryCacheStore
from holonet.config import HolonetSettings
from holonet.core.models import RawResource, ResolvedReference
from holonet.core.types import ResourceKind
from holonet.querylog.dispatcher import DeferredLogDispatcher
from holonet.querylog.sinks import DatabaseSink, LoggingSink
from holonet.resolution.registry import ResolverRegistry

if TYPE_CHECKING:
    from holonet.cache.base import CacheStore
    from holonet.db.session import DatabaseManager

logger = logging.getLogger(__name__)


class HolonetClient:
    """
    Main client for the holonet library.

    Provides search, metadata lookup and reference expansion against the
    upstream catalog without requiring the web server.

    Usage:
        async with HolonetClient() as client:
            # Search people by name
            results = await client.search("people", "luke")

            # Resolve a film with its characters expanded
            film = await client.resolve_metadata("movies", "1")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: HolonetSettings | None = None,
        *,
        use_cache: bool = True,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            use_cache: Whether to use Redis caching if configured.
        """
        self._settings = settings or HolonetSettings()
        self._use_cache = use_cache
        self._registry: ResolverRegistry | None = None
        self._cache: CacheStore | None = None
        self._database: DatabaseManager | None = None
        self._log_dispatcher: DeferredLogDispatcher | None = None

    async def __aenter__(self) -> HolonetClient:
        """Initialize resources on context entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize client resources."""
        self._cache = await self._create_cache()

        if self._settings.query_log_enabled:
            if self._settings.database_url:
                from holonet.db.session import DatabaseManager

                self._database = DatabaseManager(str(self._settings.database_url))
                sink = DatabaseSink(self._database.session_factory)
            else:
                sink = LoggingSink()
            self._log_dispatcher = DeferredLogDispatcher(sink)

        self._registry = ResolverRegistry.from_settings(
            self._settings,
            cache=self._cache,
            log_dispatcher=self._log_dispatcher,
        )

    async def _create_cache(self) -> CacheStore:
        if self._use_cache and self._settings.redis_url:
            from holonet.cache.client import AsyncRedisClient

            cache = AsyncRedisClient(
                str(self._settings.redis_url),
                prefix=self._settings.cache_prefix,
            )
            try:
                await cache.connect()
                await cache.ping()
                logger.info("Redis cache initialized")
                return cache
            except Exception as e:
                await cache.close()
                logger.warning(f"Failed to initialize Redis, using in-memory cache: {e}")
        return InMemoryCacheStore()

    async def close(self) -> None:
        """Flush pending log writes and close all resources."""
        if self._log_dispatcher:
            await self._log_dispatcher.drain()
            self._log_dispatcher = None

        if self._registry:
            await self._registry.close_all()
            self._registry = None

        if self._cache:
            await self._cache.close()
            self._cache = None

        if self._database:
            await self._database.close()
            self._database = None

    def _ensure_initialized(self) -> ResolverRegistry:
        """Ensure client is initialized."""
        if self._registry is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with HolonetClient() as client:'"
            )
        return self._registry

    async def search(self, kind: str, query: str) -> Any:
        """Search ``kind`` ("people", "movies", ...) for ``query``."""
        return await self._ensure_initialized().search.search(kind, query)

    async def resolve_metadata(self, kind: str, identifier: str) -> RawResource:
        """Resolve one entity with its cross-references expanded."""
        return await self._ensure_initialized().metadata.resolve_metadata(kind, identifier)

    async def resolve_references(
        self,
        kind: ResourceKind | str,
        urls: list[str],
    ) -> list[ResolvedReference]:
        """Resolve upstream URLs of ``kind`` entities to (name, link) pairs."""
        return await self._ensure_initialized().references.resolve_references(kind, urls)
