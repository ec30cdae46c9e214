"""Content repository backed by the in-memory static collection."""

from src.portfolio.content.collection import StaticContentCollection
from src.portfolio.data.certifications import CERTIFICATIONS
from src.portfolio.repositories.content.base import ContentRepository
from src.portfolio.schemas.content import (
    AboutContent,
    BlogPost,
    Certification,
    Experience,
    NowContent,
    Project,
    Skill,
    UsesContent,
)
from src.portfolio.services.content_ordering import (
    collect_tags,
    collect_tech_stack,
    filter_posts_by_tag,
    find_by_slug,
    sort_by_order,
    sort_posts_by_recency,
    sort_skills,
)
from src.portfolio.services.related_posts import DEFAULT_RELATED_LIMIT, rank_related_posts


class StaticContentRepository(ContentRepository):
    """Serves content from a collection loaded once at startup."""

    source = "static"

    def __init__(self, collection: StaticContentCollection):
        self.collection = collection

    async def get_projects(self) -> list[Project]:
        return sort_by_order(self.collection.projects)

    async def get_featured_projects(self) -> list[Project]:
        return sort_by_order(p for p in self.collection.projects if p.featured)

    async def get_project_by_slug(self, slug: str) -> Project | None:
        return find_by_slug(self.collection.projects, slug)

    async def get_all_project_tech_stack(self) -> list[str]:
        return collect_tech_stack(self.collection.projects)

    async def get_experiences(self) -> list[Experience]:
        return sort_by_order(self.collection.experiences)

    async def get_now_content(self) -> NowContent | None:
        return self.collection.now

    async def get_about_content(self) -> AboutContent | None:
        return self.collection.about

    async def get_uses_content(self) -> UsesContent | None:
        return self.collection.uses

    async def get_blog_posts(self) -> list[BlogPost]:
        return sort_posts_by_recency(self.collection.blog)

    async def get_featured_blog_posts(self) -> list[BlogPost]:
        return sort_posts_by_recency(p for p in self.collection.blog if p.featured)

    async def get_blog_post_by_slug(self, slug: str) -> BlogPost | None:
        return find_by_slug(self.collection.blog, slug)

    async def get_all_blog_tags(self) -> list[str]:
        return collect_tags(self.collection.blog)

    async def get_posts_by_tag(self, tag: str) -> list[BlogPost]:
        return filter_posts_by_tag(self.collection.blog, tag)

    async def get_related_posts(
        self, slug: str, limit: int = DEFAULT_RELATED_LIMIT
    ) -> list[BlogPost]:
        return rank_related_posts(self.collection.blog, slug, limit)

    async def get_skills(self) -> list[Skill]:
        return sort_skills(self.collection.skills)

    async def get_certifications(self) -> list[Certification]:
        return list(CERTIFICATIONS)
