"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

from src.portfolio.api.dependencies.content import (
    AppSettings,
    ContentRepo,
    SearchIndexDep,
    get_app_settings,
    get_content_repository,
    get_search_index,
)

__all__ = [
    "AppSettings",
    "ContentRepo",
    "SearchIndexDep",
    "get_app_settings",
    "get_content_repository",
    "get_search_index",
]
