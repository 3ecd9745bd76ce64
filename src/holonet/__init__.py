"""Holonet - Cached search and cross-reference resolution for the Star Wars catalog."""

from holonet.client import HolonetClient
from holonet.core.exceptions import (
    ConnectivityFailure,
    HolonetError,
    InvalidResourceKind,
    UpstreamLookupFailed,
)
from holonet.core.models import QueryLogEvent, QueryStatistics, ResolvedReference, TopQuery
from holonet.core.types import ResourceKind

__version__ = "0.1.0"
__all__ = [
    # Client
    "HolonetClient",
    # Types
    "ResourceKind",
    # Models
    "QueryLogEvent",
    "QueryStatistics",
    "ResolvedReference",
    "TopQuery",
    # Errors
    "ConnectivityFailure",
    "HolonetError",
    "InvalidResourceKind",
    "UpstreamLookupFailed",
    # Version
    "__version__",
]
