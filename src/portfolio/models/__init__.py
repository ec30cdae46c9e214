"""Model exports.

Import from here: `from src.portfolio.models import BlogPostRecord`
"""

from src.portfolio.models.content import (
    AboutContentRecord,
    BlogPostRecord,
    CertificationRecord,
    ExperienceRecord,
    NowContentRecord,
    ProjectRecord,
    SkillRecord,
    UsesContentRecord,
)
from src.portfolio.models.enums import Proficiency, SearchResultType

__all__ = [
    # Enums
    "Proficiency",
    "SearchResultType",
    # Tables
    "AboutContentRecord",
    "BlogPostRecord",
    "CertificationRecord",
    "ExperienceRecord",
    "NowContentRecord",
    "ProjectRecord",
    "SkillRecord",
    "UsesContentRecord",
]
