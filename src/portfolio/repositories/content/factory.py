"""Content source selection.

The source is chosen once per process from DATABASE_CONTENT_ENABLED and the
resulting repository is shared for the process lifetime.
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from src.portfolio.content.collection import load_collection
from src.portfolio.core.cache import ContentCache
from src.portfolio.core.config import Settings
from src.portfolio.core.db import get_engine, session_factory_for
from src.portfolio.core.logging import get_logger
from src.portfolio.repositories.content.base import ContentRepository
from src.portfolio.repositories.content.database import DatabaseContentRepository
from src.portfolio.repositories.content.static import StaticContentRepository

logger = get_logger(__name__)


def build_content_repository(
    settings: Settings,
    engine: AsyncEngine | None = None,
) -> ContentRepository:
    """Build the repository for the configured content source.

    Raises:
        ContentCollectionError: Static mode and the content tree is missing or invalid.
        ConfigurationError: Database mode and no connection string is configured.
    """
    if settings.database_content_enabled:
        engine = engine or get_engine(settings)
        logger.info(
            "Using database content source",
            cache_ttl=settings.content_cache_ttl,
            pool_size=settings.database_pool_size,
        )
        return DatabaseContentRepository(
            session_factory_for(engine),
            ContentCache(ttl=settings.content_cache_ttl),
        )

    logger.info("Using static content source", content_dir=settings.content_dir)
    return StaticContentRepository(load_collection(settings.content_dir))
