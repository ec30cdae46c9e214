"""Content source dependencies.

The repository and search index are built once during application startup
and stored on ``app.state``; requests only read them.
"""

from typing import Annotated

from fastapi import Depends, Request

from src.portfolio.core.config import Settings
from src.portfolio.repositories.content import ContentRepository
from src.portfolio.search.index import SearchIndex


def get_content_repository(request: Request) -> ContentRepository:
    """Get the process-wide content repository."""
    return request.app.state.content_repository


def get_search_index(request: Request) -> SearchIndex:
    """Get the lazily loaded search index."""
    return request.app.state.search_index


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was built with."""
    return request.app.state.settings


ContentRepo = Annotated[ContentRepository, Depends(get_content_repository)]
SearchIndexDep = Annotated[SearchIndex, Depends(get_search_index)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
