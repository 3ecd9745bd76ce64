"""API route modules."""

from holonet.api.routes.health import router as health_router
from holonet.api.routes.resources import router as resources_router
from holonet.api.routes.search import router as search_router
from holonet.api.routes.stats import router as stats_router

__all__ = [
    "health_router",
    "resources_router",
    "search_router",
    "stats_router",
]
