"""Shared enums for models."""

from enum import Enum


class Proficiency(str, Enum):
    """Skill proficiency, strongest first."""

    EXPERT = "expert"
    ADVANCED = "advanced"
    INTERMEDIATE = "intermediate"


class SearchResultType(str, Enum):
    """Display grouping for search results."""

    BLOG = "blog"
    PROJECT = "project"
    PAGE = "page"
