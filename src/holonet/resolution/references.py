"""Cross-reference expansion with cached, concurrent batch fetching."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from holonet.cache.keys import CacheKeys
from holonet.core.exceptions import ConnectivityFailure
from holonet.core.identifiers import extract_identifier
from holonet.core.models import RawResource, ResolvedReference
from holonet.core.types import ResourceKind
from holonet.resolution.base import BatchResult, extract_result

if TYPE_CHECKING:
    from holonet.cache.base import CacheStore
    from holonet.resolution.base import UpstreamClient

logger = logging.getLogger(__name__)


class ReferenceBatcher:
    """
    Resolves a list of cross-reference URLs to (name, link) pairs.

    Entities already in the cache are used as-is; the rest are fetched in
    one concurrent batch and cached individually. Entries whose fetch fails
    are logged and left out, so the result may be shorter than the input.
    Results follow the input URL order.
    """

    def __init__(
        self,
        cache: "CacheStore",
        upstream: "UpstreamClient",
    ) -> None:
        self._cache = cache
        self._upstream = upstream

    async def resolve_references(
        self,
        kind: ResourceKind | str,
        urls: list[str],
    ) -> list[ResolvedReference]:
        """
        Resolve cross-reference URLs pointing at entities of ``kind``.

        Args:
            kind: Kind of the referenced entities
            urls: Upstream URLs of the referenced entities

        Returns:
            One ResolvedReference per URL that could be resolved, in input order
        """
        if not urls:
            return []

        kind = ResourceKind.parse(kind)

        # slot i holds the raw entity for urls[i], or None if unresolved
        slots: list[RawResource | None] = [None] * len(urls)
        to_fetch: list[int] = []

        for i, url in enumerate(urls):
            try:
                key = CacheKeys.xref(kind, extract_identifier(url))
            except ValueError:
                logger.warning(f"Skipping malformed reference URL: {url!r}")
                continue
            if await self._cache.exists(key):
                slots[i] = await self._cache.get(key)
            else:
                to_fetch.append(i)

        if to_fetch:
            logger.debug(f"Fetching {len(to_fetch)} uncached {kind} references")
            responses = await self._upstream.get_many([urls[i] for i in to_fetch])

            for i, response in zip(to_fetch, responses):
                slots[i] = await self._store_fetched(kind, urls[i], response)

        return [
            self._to_reference(kind, resource, urls[i])
            for i, resource in enumerate(slots)
            if resource is not None
        ]

    async def _store_fetched(
        self,
        kind: ResourceKind,
        url: str,
        response: BatchResult,
    ) -> RawResource | None:
        """Cache a successful batch response; log and drop a failed one."""
        if isinstance(response, ConnectivityFailure):
            logger.warning(f"Reference fetch failed for {url}: {response.message}")
            return None

        if not response.is_success:
            logger.warning(
                f"Reference fetch failed for {url}: HTTP {response.status_code}"
            )
            return None

        data = extract_result(response)
        if not isinstance(data, dict):
            logger.warning(f"Reference fetch for {url} returned no result payload")
            return None

        await self._cache.add(CacheKeys.xref(kind, extract_identifier(url)), data)
        return data

    @staticmethod
    def _to_reference(
        kind: ResourceKind,
        resource: RawResource,
        url: str,
    ) -> ResolvedReference:
        properties = resource.get("properties") or {}
        uid = resource.get("uid") or extract_identifier(url)
        return ResolvedReference(
            name=properties.get(kind.name_field),
            link=f"/{kind.route_segment}/{uid}",
        )
