"""Database engine management."""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.portfolio.core.config import Settings, get_settings
from src.portfolio.core.exceptions import ConfigurationError

_engine: AsyncEngine | None = None

_ASYNC_SCHEMES = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
}


def to_async_url(url: str) -> str:
    """Point plain PostgreSQL URLs at the asyncpg driver."""
    for prefix, replacement in _ASYNC_SCHEMES.items():
        if url.startswith(prefix):
            return replacement + url[len(prefix) :]
    return url


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create an async engine with a bounded pool and idle-connection expiry."""
    url = settings.resolved_database_url
    if not url:
        raise ConfigurationError(
            "DATABASE_URL, DATABASE_PUBLIC_URL or DATABASE_POOLER_URL must be set "
            "to use database content."
        )
    return create_async_engine(
        to_async_url(url),
        pool_size=settings.database_pool_size,
        max_overflow=0,
        pool_recycle=settings.database_idle_timeout,
        pool_pre_ping=True,
        connect_args={"timeout": settings.database_connect_timeout},
    )


def get_engine(settings: Settings | None = None) -> AsyncEngine:
    """Get or create the database engine singleton.

    Args:
        settings: Settings used when the engine is first created. Defaults to
            the environment settings.
    """
    global _engine
    if _engine is None:
        _engine = create_engine_from_settings(settings or get_settings())
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
