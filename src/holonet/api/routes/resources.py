"""Single-resource endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Path

from holonet.api.dependencies import Metadata
from holonet.api.schemas import ResourceResponse
from holonet.core.types import ResourceKind

router = APIRouter(prefix="/resources", tags=["resources"])


@router.get(
    "/{kind}/{uid}",
    response_model=ResourceResponse,
    operation_id="getResource",
    summary="Get a resource",
    description=(
        "Fetch one person or film with its cross-references resolved to "
        "name and local link pairs."
    ),
)
async def get_resource(
    kind: str,
    metadata: Metadata,
    uid: str = Path(..., min_length=1, max_length=50),
) -> ResourceResponse:
    """Resolve a single resource."""
    result = await metadata.resolve_metadata(kind, uid)
    return ResourceResponse(kind=ResourceKind.parse(kind), metadata=result)
