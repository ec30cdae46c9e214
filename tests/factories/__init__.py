"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import BlogPostFactory, sample_collection, ...
"""

from tests.factories.base import BaseFactory, days_ago, next_id
from tests.factories.content import (
    BlogPostFactory,
    ExperienceFactory,
    ProjectFactory,
    SkillFactory,
    sample_collection,
)

__all__ = [
    # Base
    "BaseFactory",
    "days_ago",
    "next_id",
    # Content
    "BlogPostFactory",
    "ExperienceFactory",
    "ProjectFactory",
    "SkillFactory",
    "sample_collection",
]
