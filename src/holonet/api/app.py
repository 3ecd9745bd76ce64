"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from holonet.api.errors import register_exception_handlers
from holonet.api.routes import health_router, resources_router, search_router, stats_router
from holonet.cache.memory import InMemoryCacheStore
from holonet.config import get_settings
from holonet.querylog.dispatcher import DeferredLogDispatcher
from holonet.querylog.sinks import DatabaseSink, LoggingSink

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown of resources.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    # Initialize cache (Redis when configured, in-process otherwise)
    app.state.cache = None
    if settings.redis_url:
        from holonet.cache.client import AsyncRedisClient

        logger.info("Initializing Redis cache...")
        app.state.cache = AsyncRedisClient(
            str(settings.redis_url),
            prefix=settings.cache_prefix,
        )
        try:
            await app.state.cache.connect()
            await app.state.cache.ping()
            logger.info("Redis cache initialized")
        except Exception as e:
            logger.warning(f"Failed to initialize Redis, using in-memory cache: {e}")
            await app.state.cache.close()
            app.state.cache = None
    if app.state.cache is None:
        app.state.cache = InMemoryCacheStore()

    # Initialize database (optional, backs the query log and statistics)
    app.state.db_engine = None
    app.state.db_session_factory = None
    if settings.database_url:
        from holonet.db.base import create_engine, create_session_factory

        logger.info("Initializing database connection...")
        app.state.db_engine = create_engine(str(settings.database_url), echo=settings.debug)
        app.state.db_session_factory = create_session_factory(app.state.db_engine)

    # Initialize query log
    app.state.log_dispatcher = None
    if settings.query_log_enabled:
        if app.state.db_session_factory is not None:
            sink = DatabaseSink(app.state.db_session_factory)
        else:
            sink = LoggingSink()
        app.state.log_dispatcher = DeferredLogDispatcher(sink)

    # Initialize resolver registry
    from holonet.resolution.registry import ResolverRegistry

    logger.info("Initializing resolver registry...")
    app.state.resolver_registry = ResolverRegistry.from_settings(
        settings,
        cache=app.state.cache,
        log_dispatcher=app.state.log_dispatcher,
    )

    logger.info("Application startup complete")

    yield

    # Cleanup
    logger.info("Shutting down application...")

    # Flush query log writes still in flight
    if app.state.log_dispatcher:
        await app.state.log_dispatcher.drain()

    # Close resolvers
    await app.state.resolver_registry.close_all()

    # Close cache
    await app.state.cache.close()

    # Close database connections
    if app.state.db_engine is not None:
        await app.state.db_engine.dispose()

    logger.info("Application shutdown complete")


def create_app(
    *,
    title: str = "Holonet API",
    description: str = "Cached search and cross-reference resolution for the Star Wars catalog",
    version: str = "0.1.0",
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version
        cors_origins: List of allowed CORS origins

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Configure CORS
    if cors_origins is None:
        cors_origins = get_settings().cors_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(search_router, prefix="/api/v1")
    app.include_router(resources_router, prefix="/api/v1")
    app.include_router(stats_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
