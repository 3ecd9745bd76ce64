"""Resolution layer: search, metadata lookup, and reference expansion."""

from holonet.resolution.base import (
    HttpUpstreamClient,
    UpstreamClient,
    UpstreamConfig,
    extract_result,
)
from holonet.resolution.metadata import MetadataResolver
from holonet.resolution.references import ReferenceBatcher
from holonet.resolution.registry import ResolverRegistry
from holonet.resolution.search import SearchResolver
from holonet.resolution.singleflight import InflightGroup

__all__ = [
    # Upstream
    "HttpUpstreamClient",
    "UpstreamClient",
    "UpstreamConfig",
    "extract_result",
    # Resolvers
    "MetadataResolver",
    "ReferenceBatcher",
    "SearchResolver",
    # Wiring
    "InflightGroup",
    "ResolverRegistry",
]
