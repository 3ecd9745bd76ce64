"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, PostgresDsn, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class HolonetSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="HOLONET_",
    )

    # Upstream catalog
    upstream_base_url: str = Field(
        default="https://swapi.tech/api",
        description="Base URL of the upstream catalog API",
    )
    upstream_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Per-request timeout in seconds for upstream calls",
    )

    # Redis
    redis_url: RedisDsn | None = Field(
        default=None,
        description="Redis connection URL (in-memory cache when unset)",
    )
    cache_prefix: str = Field(
        default="holonet",
        description="Prefix prepended to every Redis key",
    )

    # Database
    database_url: PostgresDsn | None = Field(
        default=None,
        description="PostgreSQL connection URL for the query log (optional)",
    )
    query_log_enabled: bool = Field(
        default=True,
        description="Record one log event per search",
    )

    # Resolution
    dedupe_inflight: bool = Field(
        default=False,
        description="Share one upstream computation between concurrent first lookups",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Allowed CORS origins for the API",
    )


@lru_cache
def get_settings() -> HolonetSettings:
    """Get cached settings instance."""
    return HolonetSettings()
