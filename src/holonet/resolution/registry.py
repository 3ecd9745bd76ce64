"""Resolver registry wiring the resolvers to their shared capabilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from holonet.cache.memory import InMemoryCacheStore
from holonet.resolution.base import HttpUpstreamClient, UpstreamClient, UpstreamConfig
from holonet.resolution.metadata import MetadataResolver
from holonet.resolution.references import ReferenceBatcher
from holonet.resolution.search import SearchResolver

if TYPE_CHECKING:
    from holonet.cache.base import CacheStore
    from holonet.config import HolonetSettings
    from holonet.querylog.dispatcher import DeferredLogDispatcher


class ResolverRegistry:
    """
    Builds and owns the resolvers.

    The cache, upstream client and log dispatcher are injected once here and
    shared by every resolver; nothing is process-global.
    """

    def __init__(
        self,
        cache: "CacheStore",
        upstream: UpstreamClient,
        log_dispatcher: "DeferredLogDispatcher | None" = None,
        *,
        dedupe_inflight: bool = False,
    ) -> None:
        self.cache = cache
        self.upstream = upstream
        self.references = ReferenceBatcher(cache, upstream)
        self.search = SearchResolver(cache, upstream, log_dispatcher)
        self.metadata = MetadataResolver(
            cache,
            upstream,
            self.references,
            dedupe_inflight=dedupe_inflight,
        )

    @classmethod
    def from_settings(
        cls,
        settings: "HolonetSettings",
        cache: "CacheStore | None" = None,
        log_dispatcher: "DeferredLogDispatcher | None" = None,
    ) -> "ResolverRegistry":
        """Create a registry with an HTTP upstream configured from settings."""
        upstream = HttpUpstreamClient(
            UpstreamConfig(
                base_url=settings.upstream_base_url,
                timeout=settings.upstream_timeout,
            )
        )
        return cls(
            cache if cache is not None else InMemoryCacheStore(),
            upstream,
            log_dispatcher,
            dedupe_inflight=settings.dedupe_inflight,
        )

    async def close_all(self) -> None:
        """Close the upstream client."""
        await self.upstream.close()
