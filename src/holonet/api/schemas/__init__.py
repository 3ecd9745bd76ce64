"""API schema definitions."""

from holonet.api.schemas.base import (
    APIBaseSchema,
    APIError,
    ErrorDetail,
)
from holonet.api.schemas.responses import (
    HealthResponse,
    ResourceResponse,
    SearchResponse,
    StatisticsData,
    StatisticsResponse,
    StatisticsUnavailableResponse,
    TopQueryResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    "ErrorDetail",
    # Responses
    "HealthResponse",
    "ResourceResponse",
    "SearchResponse",
    "StatisticsData",
    "StatisticsResponse",
    "StatisticsUnavailableResponse",
    "TopQueryResponse",
]
