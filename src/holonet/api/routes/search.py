"""Search endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query

from holonet.api.dependencies import Search
from holonet.api.schemas import SearchResponse
from holonet.core.types import ResourceKind

router = APIRouter(prefix="/search", tags=["search"])


@router.get(
    "/{kind}",
    response_model=SearchResponse,
    operation_id="searchResources",
    summary="Search a resource kind",
    description="Search people by name or films by title. Accepts 'people', 'films' or 'movies'.",
)
async def search_resources(
    kind: str,
    search: Search,
    q: str = Query(..., min_length=1, max_length=500, description="Search query"),
) -> SearchResponse:
    """Search the upstream catalog, served from cache when possible."""
    results = await search.search(kind, q)
    return SearchResponse(kind=ResourceKind.parse(kind), query=q, results=results)
