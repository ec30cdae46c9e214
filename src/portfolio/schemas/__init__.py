"""Pydantic schemas for content, front matter and search."""

from src.portfolio.schemas.content import (
    AboutContent,
    BlogPost,
    Certification,
    Experience,
    NowContent,
    Project,
    Skill,
    SkillCategory,
    UsesContent,
)
from src.portfolio.schemas.search import SearchHit, SearchMeta, SearchResult

__all__ = [
    "AboutContent",
    "BlogPost",
    "Certification",
    "Experience",
    "NowContent",
    "Project",
    "SearchHit",
    "SearchMeta",
    "SearchResult",
    "Skill",
    "SkillCategory",
    "UsesContent",
]
