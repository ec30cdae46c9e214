"""Content repository interface.

One read API per content type, independent of where the content lives.
Missing records are an expected outcome: lookups return ``None`` and
filters return empty lists rather than raising.
"""

from abc import ABC, abstractmethod

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
from src.portfolio.services.content_ordering import find_current_experience, group_skills
from src.portfolio.services.related_posts import DEFAULT_RELATED_LIMIT


class ContentRepository(ABC):
    """Read-only access to site content."""

    source: str

    # Projects

    @abstractmethod
    async def get_projects(self) -> list[Project]:
        """All projects by display order."""

    @abstractmethod
    async def get_featured_projects(self) -> list[Project]: ...

    @abstractmethod
    async def get_project_by_slug(self, slug: str) -> Project | None: ...

    @abstractmethod
    async def get_all_project_tech_stack(self) -> list[str]: ...

    # Experiences

    @abstractmethod
    async def get_experiences(self) -> list[Experience]: ...

    async def get_current_experience(self) -> Experience | None:
        return find_current_experience(await self.get_experiences())

    # Singleton pages

    @abstractmethod
    async def get_now_content(self) -> NowContent | None: ...

    @abstractmethod
    async def get_about_content(self) -> AboutContent | None: ...

    @abstractmethod
    async def get_uses_content(self) -> UsesContent | None: ...

    # Blog

    @abstractmethod
    async def get_blog_posts(self) -> list[BlogPost]:
        """All posts, newest published first."""

    @abstractmethod
    async def get_featured_blog_posts(self) -> list[BlogPost]: ...

    @abstractmethod
    async def get_blog_post_by_slug(self, slug: str) -> BlogPost | None: ...

    @abstractmethod
    async def get_all_blog_tags(self) -> list[str]: ...

    @abstractmethod
    async def get_posts_by_tag(self, tag: str) -> list[BlogPost]: ...

    @abstractmethod
    async def get_related_posts(
        self, slug: str, limit: int = DEFAULT_RELATED_LIMIT
    ) -> list[BlogPost]: ...

    # Skills and certifications

    @abstractmethod
    async def get_skills(self) -> list[Skill]:
        """All skills by category, then order within the category."""

    async def get_skills_by_category(self) -> list[SkillCategory]:
        return group_skills(await self.get_skills())

    @abstractmethod
    async def get_certifications(self) -> list[Certification]: ...

    async def close(self) -> None:
        """Release resources held by the repository."""
