"""Identifier extraction from upstream resource URLs."""

from __future__ import annotations

from urllib.parse import urlsplit


def extract_identifier(url: str) -> str:
    """
    Extract the trailing path segment of a resource URL.

    Query strings, fragments and trailing slashes are ignored, so
    ``https://swapi.tech/api/films/2/?format=json`` yields ``"2"``.

    Raises:
        ValueError: If the URL has no path segment to extract.
    """
    path = urlsplit(url.strip()).path.rstrip("/")
    identifier = path.rsplit("/", 1)[-1]
    if not identifier:
        raise ValueError(f"No identifier in URL: {url!r}")
    return identifier
