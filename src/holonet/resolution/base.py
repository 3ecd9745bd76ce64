"""Upstream HTTP client with bounded timeouts and batched fetching."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx
from pydantic import BaseModel

from holonet.core.exceptions import ConnectivityFailure

logger = logging.getLogger(__name__)

BatchResult = httpx.Response | ConnectivityFailure


class UpstreamConfig(BaseModel):
    """Configuration for the upstream catalog client."""

    base_url: str = "https://swapi.tech/api"
    timeout: float = 5.0


class UpstreamClient(ABC):
    """
    HTTP access to the upstream catalog.

    Non-success statuses are returned as responses. Any httpx request error,
    including timeouts and redirect loops, raises ConnectivityFailure.
    """

    @abstractmethod
    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Issue a single bounded-timeout GET."""
        ...

    async def get_many(self, urls: list[str]) -> list[BatchResult]:
        """
        Issue GETs for all URLs concurrently and wait for every one.

        Each slot of the returned list, in input order, holds either the
        response or the ConnectivityFailure for that URL. One failure never
        cancels the others.
        """

        async def _one(url: str) -> BatchResult:
            try:
                return await self.get(url)
            except ConnectivityFailure as e:
                return e

        return list(await asyncio.gather(*(_one(url) for url in urls)))

    async def close(self) -> None:
        """Release the underlying connection pool."""
        return None

    async def __aenter__(self) -> "UpstreamClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class HttpUpstreamClient(UpstreamClient):
    """UpstreamClient backed by a pooled httpx.AsyncClient."""

    def __init__(self, config: UpstreamConfig | None = None) -> None:
        self.config = config or UpstreamConfig()
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self.config.base_url.rstrip("/")

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )
        yield self._client

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": "holonet/0.1",
            "Accept": "application/json",
        }

    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        logger.debug(f"Reaching out to upstream {url} params={params}")
        async with self._get_client() as client:
            try:
                return await client.get(url, params=params)
            except httpx.RequestError as e:
                raise ConnectivityFailure(
                    message=f"Upstream request failed: {e}",
                    url=url,
                ) from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None


def extract_result(response: httpx.Response, default: Any = None) -> Any:
    """Return the ``result`` member of an upstream JSON envelope."""
    try:
        body = response.json()
    except ValueError:
        return default
    if not isinstance(body, dict):
        return default
    return body.get("result", default)
