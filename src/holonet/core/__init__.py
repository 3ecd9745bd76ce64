"""Core types, models, and utilities."""

from .exceptions import (
    ConnectivityFailure,
    HolonetError,
    InvalidResourceKind,
    ResolutionError,
    UpstreamLookupFailed,
    ValidationError,
)
from .identifiers import extract_identifier
from .models import (
    QueryLogEvent,
    QueryStatistics,
    RawResource,
    ResolvedReference,
    TopQuery,
)
from .types import CacheNamespace, ResourceKind

__all__ = [
    # Types
    "CacheNamespace",
    "ResourceKind",
    # Identifiers
    "extract_identifier",
    # Models
    "QueryLogEvent",
    "QueryStatistics",
    "RawResource",
    "ResolvedReference",
    "TopQuery",
    # Exceptions
    "ConnectivityFailure",
    "HolonetError",
    "InvalidResourceKind",
    "ResolutionError",
    "UpstreamLookupFailed",
    "ValidationError",
]
