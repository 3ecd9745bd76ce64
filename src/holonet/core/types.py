"""Core enums and type definitions."""

from __future__ import annotations

from enum import StrEnum

from holonet.core.exceptions import InvalidResourceKind


class ResourceKind(StrEnum):
    """The two cross-referencing resource kinds exposed by the catalog."""

    PEOPLE = "people"
    FILMS = "films"

    @classmethod
    def parse(cls, value: str | ResourceKind) -> ResourceKind:
        """
        Normalize a free-form kind string.

        Accepts the canonical value or the display spelling, case-insensitive
        ("People", "films", "Movies", ...).

        Raises:
            InvalidResourceKind: If the value matches no known spelling.
        """
        if isinstance(value, ResourceKind):
            return value

        kind = _SPELLINGS.get(str(value).strip().casefold())
        if kind is None:
            raise InvalidResourceKind(value)
        return kind

    @property
    def opposite(self) -> ResourceKind:
        """The kind this kind's entities link to."""
        return _OPPOSITE[self]

    @property
    def search_param(self) -> str:
        """Upstream query parameter used for free-text search."""
        return _SEARCH_PARAM[self]

    @property
    def reference_field(self) -> str:
        """Property holding cross-reference URLs on an entity of this kind."""
        return _REFERENCE_FIELD[self]

    @property
    def name_field(self) -> str:
        """Display property of an entity of this kind."""
        return _NAME_FIELD[self]

    @property
    def route_segment(self) -> str:
        """Local route segment used in links to entities of this kind."""
        return _ROUTE_SEGMENT[self]


class CacheNamespace(StrEnum):
    """Cache key namespaces."""

    SEARCH = "search"
    META = "meta"
    XREF = "xref"


_SPELLINGS: dict[str, ResourceKind] = {
    "people": ResourceKind.PEOPLE,
    "films": ResourceKind.FILMS,
    "movies": ResourceKind.FILMS,
}

_OPPOSITE = {
    ResourceKind.PEOPLE: ResourceKind.FILMS,
    ResourceKind.FILMS: ResourceKind.PEOPLE,
}

_SEARCH_PARAM = {
    ResourceKind.PEOPLE: "name",
    ResourceKind.FILMS: "title",
}

# People appear in films, films star characters
_REFERENCE_FIELD = {
    ResourceKind.PEOPLE: "films",
    ResourceKind.FILMS: "characters",
}

_NAME_FIELD = {
    ResourceKind.PEOPLE: "name",
    ResourceKind.FILMS: "title",
}

_ROUTE_SEGMENT = {
    ResourceKind.PEOPLE: "people",
    ResourceKind.FILMS: "movies",
}
