"""Repository layer - data access abstraction."""

from src.portfolio.repositories.content import (
    ContentRepository,
    DatabaseContentRepository,
    StaticContentRepository,
    build_content_repository,
)

__all__ = [
    "ContentRepository",
    "DatabaseContentRepository",
    "StaticContentRepository",
    "build_content_repository",
]
