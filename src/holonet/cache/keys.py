"""Cache key builders for consistent key formatting."""

from holonet.core.types import CacheNamespace, ResourceKind


class CacheKeys:
    """
    Cache key builders.

    Keys follow ``{namespace}:{kind}:{identifier}``. The layout is stable so
    a persistent cache stays valid across restarts; kinds must be parsed
    before a key is built.
    """

    @staticmethod
    def _build(namespace: CacheNamespace, kind: ResourceKind, value: str) -> str:
        return f"{namespace}:{ResourceKind.parse(kind)}:{value}"

    @classmethod
    def search(cls, kind: ResourceKind, query: str) -> str:
        """Key for the result payload of a free-text search."""
        return cls._build(CacheNamespace.SEARCH, kind, query)

    @classmethod
    def meta(cls, kind: ResourceKind, identifier: str) -> str:
        """Key for a fully resolved entity."""
        return cls._build(CacheNamespace.META, kind, identifier)

    @classmethod
    def xref(cls, kind: ResourceKind, identifier: str) -> str:
        """Key for a raw entity fetched while expanding cross-references."""
        return cls._build(CacheNamespace.XREF, kind, identifier)
