from functools import lru_cache
from typing import Self

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Portfolio"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True
    site_url: str = "http://localhost:3000"  # Used for absolute URLs in the sitemap

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Content source - read once at startup, never mixed within a process
    database_content_enabled: bool = False
    content_dir: str = "content"
    content_cache_ttl: int = 60  # seconds, database source only; 0 disables

    # Database (fallback order: pooler -> public -> direct)
    database_pooler_url: str | None = None
    database_public_url: str | None = None
    database_url: str | None = None
    database_pool_size: int = 10
    database_idle_timeout: int = 20  # seconds before an idle connection is recycled
    database_connect_timeout: int = 10

    # Redis (optional - content cache falls back to in-process memory)
    redis_url: str | None = None
    redis_pool_size: int = 10
    redis_retry_interval: int = 30  # seconds between reconnect attempts after a failure

    # Search
    search_index_path: str = "search-index.json"
    search_max_results: int = 10
    search_debounce_ms: int = 200

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    @property
    def resolved_database_url(self) -> str | None:
        """First configured connection string in priority order."""
        return self.database_pooler_url or self.database_public_url or self.database_url or None

    @model_validator(mode="after")
    def validate_database_source(self) -> Self:
        """Refuse to start in database mode without a connection string."""
        if self.database_content_enabled and not self.resolved_database_url:
            raise ValueError(
                "DATABASE_URL, DATABASE_PUBLIC_URL or DATABASE_POOLER_URL is required "
                "when DATABASE_CONTENT_ENABLED=true. "
                "Set DATABASE_CONTENT_ENABLED=false to serve static content instead."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
