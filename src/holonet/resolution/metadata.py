"""Single-resource lookup with cross-reference expansion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from holonet.cache.decorators import remembered
from holonet.cache.keys import CacheKeys
from holonet.core.exceptions import UpstreamLookupFailed
from holonet.core.models import RawResource
from holonet.core.types import ResourceKind
from holonet.resolution.base import extract_result
from holonet.resolution.references import ReferenceBatcher
from holonet.resolution.singleflight import InflightGroup

if TYPE_CHECKING:
    from holonet.cache.base import CacheStore
    from holonet.resolution.base import UpstreamClient

logger = logging.getLogger(__name__)


class MetadataResolver:
    """
    Resolves one entity by identifier and expands its cross-references.

    The resolved entity is cached forever under ``meta:{kind}:{uid}``.
    Concurrent first requests for the same cold key may each hit the
    upstream unless ``dedupe_inflight`` is enabled, in which case they share
    one computation within this process.
    """

    def __init__(
        self,
        cache: "CacheStore",
        upstream: "UpstreamClient",
        references: ReferenceBatcher | None = None,
        *,
        dedupe_inflight: bool = False,
    ) -> None:
        self._cache = cache
        self._upstream = upstream
        self._references = references or ReferenceBatcher(cache, upstream)
        self._inflight = InflightGroup() if dedupe_inflight else None

    async def resolve_metadata(self, kind: str, identifier: str) -> RawResource:
        """
        Resolve the entity ``identifier`` of ``kind``.

        Returns:
            The upstream ``result`` payload with its cross-reference field
            replaced by resolved ``{name, link}`` pairs

        Raises:
            InvalidResourceKind: If kind is not recognized (before any I/O)
            UpstreamLookupFailed: If the upstream answers with a failure status
            ConnectivityFailure: If the upstream cannot be reached in time
        """
        return await self._resolve(ResourceKind.parse(kind), identifier)

    @remembered(lambda kind, identifier: CacheKeys.meta(kind, identifier))
    async def _resolve(self, kind: ResourceKind, identifier: str) -> RawResource:
        url = f"/{kind}/{identifier}"
        response = await self._upstream.get(url)

        if not response.is_success:
            raise UpstreamLookupFailed(
                message=f"Lookup of {kind} {identifier} failed: HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        result = extract_result(response)
        if not isinstance(result, dict):
            raise UpstreamLookupFailed(
                message=f"Lookup of {kind} {identifier} returned no result payload",
                url=url,
                status_code=response.status_code,
            )

        properties = result.get("properties") or {}
        result["properties"] = properties
        field = kind.reference_field
        urls = properties.get(field) or []

        references = await self._references.resolve_references(kind.opposite, urls)
        properties[field] = [ref.model_dump() for ref in references]

        logger.info(
            f"Resolved {kind} {identifier} with {len(references)}/{len(urls)} {field}"
        )
        return result
