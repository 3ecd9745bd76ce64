"""Free-text search against the upstream catalog, read-through cached."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from holonet.cache.keys import CacheKeys
from holonet.core.exceptions import ConnectivityFailure, UpstreamLookupFailed
from holonet.core.models import QueryLogEvent
from holonet.core.types import ResourceKind
from holonet.resolution.base import extract_result

if TYPE_CHECKING:
    from holonet.cache.base import CacheStore
    from holonet.querylog.dispatcher import DeferredLogDispatcher
    from holonet.resolution.base import UpstreamClient

logger = logging.getLogger(__name__)


class SearchResolver:
    """
    Resolves a free-text query against one resource kind.

    Flow:
    1. Normalize the kind
    2. Serve from cache when the search key is present
    3. Otherwise query the upstream and cache the payload (set-if-absent)
    4. Hand one QueryLogEvent to the log dispatcher without waiting on it
    """

    def __init__(
        self,
        cache: "CacheStore",
        upstream: "UpstreamClient",
        log_dispatcher: "DeferredLogDispatcher | None" = None,
    ) -> None:
        self._cache = cache
        self._upstream = upstream
        self._log_dispatcher = log_dispatcher

    async def search(self, kind: str, query: str) -> Any:
        """
        Search ``kind`` for ``query``.

        Returns:
            The upstream ``result`` payload

        Raises:
            InvalidResourceKind: If kind is not recognized (before any I/O)
            UpstreamLookupFailed: On non-2xx, timeout, or connection failure
        """
        start = time.monotonic()
        resource_kind = ResourceKind.parse(kind)
        cache_key = CacheKeys.search(resource_kind, query)

        served_from_cache = False
        if await self._cache.exists(cache_key):
            served_from_cache = True
            logger.debug(f"Cache hit for search: {cache_key}")
            data = await self._cache.get(cache_key)
        else:
            data = await self._fetch(resource_kind, query)
            if not await self._cache.add(cache_key, data):
                data = await self._cache.get(cache_key)

        duration_ms = round((time.monotonic() - start) * 1000)

        if self._log_dispatcher is not None:
            self._log_dispatcher.dispatch(
                QueryLogEvent(
                    query_string=query,
                    resource_kind=kind,
                    served_from_cache=served_from_cache,
                    duration_ms=duration_ms,
                )
            )

        return data

    async def _fetch(self, kind: ResourceKind, query: str) -> Any:
        url = f"/{kind}"
        try:
            response = await self._upstream.get(url, params={kind.search_param: query})
        except ConnectivityFailure as e:
            raise UpstreamLookupFailed(
                message=f"Search against {kind} failed: {e.message}",
                url=e.url,
            ) from e

        if not response.is_success:
            raise UpstreamLookupFailed(
                message=f"Search against {kind} failed: HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        return extract_result(response, default=[])
