"""Content repositories: one interface, a static and a database implementation."""

from src.portfolio.repositories.content.base import ContentRepository
from src.portfolio.repositories.content.database import DatabaseContentRepository
from src.portfolio.repositories.content.factory import build_content_repository
from src.portfolio.repositories.content.static import StaticContentRepository

__all__ = [
    "ContentRepository",
    "DatabaseContentRepository",
    "StaticContentRepository",
    "build_content_repository",
]
