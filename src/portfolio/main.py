from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.portfolio.api.middlewares import setup_middlewares
from src.portfolio.api.sitemap import router as sitemap_router
from src.portfolio.api.v1.router import api_router
from src.portfolio.core.config import Settings, get_settings
from src.portfolio.core.db import dispose_engine
from src.portfolio.core.exceptions import setup_exception_handlers
from src.portfolio.core.health import setup_health_endpoint, setup_metrics_endpoint
from src.portfolio.core.logging import get_logger, setup_logging
from src.portfolio.core.redis import close_redis
from src.portfolio.repositories.content import ContentRepository, build_content_repository
from src.portfolio.search.index import SearchIndex, lazy_index_from_path

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", environment=settings.app_env)

    # Content source is fixed for the process lifetime
    if getattr(app.state, "content_repository", None) is None:
        app.state.content_repository = build_content_repository(settings)
    logger.info("Content source ready", source=app.state.content_repository.source)

    yield

    logger.info("Closing connections...")
    await app.state.content_repository.close()
    await close_redis()
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "projects", "description": "Portfolio projects and case studies"},
    {"name": "experiences", "description": "Work history"},
    {"name": "blog", "description": "Blog posts, tags and related posts"},
    {"name": "skills", "description": "Skills and certifications"},
    {"name": "pages", "description": "Now, about and uses pages"},
    {"name": "search", "description": "Site-wide search"},
]


def create_app(
    settings: Settings | None = None,
    *,
    repository: ContentRepository | None = None,
    search_index: SearchIndex | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Defaults to the environment-derived settings.
        repository: Content repository to serve; built at startup when omitted.
        search_index: Search index to query; defaults to the lazily loaded
            index file at ``SEARCH_INDEX_PATH``.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Portfolio and blog content API",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )
    app.state.settings = settings
    app.state.content_repository = repository
    app.state.search_index = search_index or lazy_index_from_path(settings.search_index_path)

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)
    app.include_router(sitemap_router)

    setup_metrics_endpoint(app, settings)
    setup_health_endpoint(app)

    return app


app = create_app()
