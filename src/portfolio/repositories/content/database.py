"""Content repository backed by PostgreSQL.

Rows are mapped onto the same schemas the static source produces and pass
through the same ordering rules. Every read goes through the time-boxed
content cache. Driver failures surface as ContentSourceUnavailableError;
there is no fallback to static content.
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from pydantic import TypeAdapter
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from src.portfolio.core.cache import ContentCache, cache_key
from src.portfolio.core.db import SessionFactory
from src.portfolio.core.exceptions import ContentSourceUnavailableError
from src.portfolio.core.logging import get_logger
from src.portfolio.models import (
    AboutContentRecord,
    BlogPostRecord,
    CertificationRecord,
    ExperienceRecord,
    NowContentRecord,
    ProjectRecord,
    SkillRecord,
    UsesContentRecord,
)
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
    sort_by_order,
    sort_posts_by_recency,
    sort_skills,
)
from src.portfolio.services.related_posts import DEFAULT_RELATED_LIMIT, rank_related_posts

logger = get_logger(__name__)

T = TypeVar("T")

_projects = TypeAdapter(list[Project])
_project = TypeAdapter(Project | None)
_experiences = TypeAdapter(list[Experience])
_posts = TypeAdapter(list[BlogPost])
_post = TypeAdapter(BlogPost | None)
_skills = TypeAdapter(list[Skill])
_certifications = TypeAdapter(list[Certification])
_now = TypeAdapter(NowContent | None)
_about = TypeAdapter(AboutContent | None)
_uses = TypeAdapter(UsesContent | None)


class DatabaseContentRepository(ContentRepository):
    """Serves content from relational tables."""

    source = "database"

    def __init__(self, session_factory: SessionFactory, cache: ContentCache):
        self._session_factory = session_factory
        self.cache = cache

    async def _query(self, query: Callable[[AsyncSession], Awaitable[T]]) -> T:
        try:
            async with self._session_factory() as session:
                return await query(session)
        except (OperationalError, InterfaceError, OSError) as e:
            logger.error("Database content read failed", error=str(e))
            raise ContentSourceUnavailableError("Database content source unavailable") from e

    async def _cached(
        self,
        key: str,
        query: Callable[[AsyncSession], Awaitable[T]],
        adapter: TypeAdapter[T],
    ) -> T:
        return await self.cache.get_or_load(key, lambda: self._query(query), adapter)

    # Projects

    async def get_projects(self) -> list[Project]:
        async def query(session: AsyncSession) -> list[Project]:
            result = await session.execute(
                select(ProjectRecord).order_by(
                    col(ProjectRecord.order), col(ProjectRecord.created_at)
                )
            )
            return sort_by_order(Project.model_validate(r) for r in result.scalars().all())

        return await self._cached("projects", query, _projects)

    async def get_featured_projects(self) -> list[Project]:
        return [p for p in await self.get_projects() if p.featured]

    async def get_project_by_slug(self, slug: str) -> Project | None:
        async def query(session: AsyncSession) -> Project | None:
            result = await session.execute(
                select(ProjectRecord).where(ProjectRecord.slug == slug).limit(1)
            )
            record = result.scalar_one_or_none()
            return Project.model_validate(record) if record is not None else None

        return await self._cached(cache_key("project", slug), query, _project)

    async def get_all_project_tech_stack(self) -> list[str]:
        return collect_tech_stack(await self.get_projects())

    # Experiences

    async def get_experiences(self) -> list[Experience]:
        async def query(session: AsyncSession) -> list[Experience]:
            result = await session.execute(
                select(ExperienceRecord).order_by(
                    col(ExperienceRecord.order), col(ExperienceRecord.created_at)
                )
            )
            return sort_by_order(Experience.model_validate(r) for r in result.scalars().all())

        return await self._cached("experiences", query, _experiences)

    # Singleton pages

    async def get_now_content(self) -> NowContent | None:
        async def query(session: AsyncSession) -> NowContent | None:
            result = await session.execute(
                select(NowContentRecord)
                .order_by(col(NowContentRecord.updated_at).desc())
                .limit(1)
            )
            record = result.scalar_one_or_none()
            return NowContent.model_validate(record) if record is not None else None

        return await self._cached("now", query, _now)

    async def get_about_content(self) -> AboutContent | None:
        async def query(session: AsyncSession) -> AboutContent | None:
            result = await session.execute(
                select(AboutContentRecord)
                .order_by(col(AboutContentRecord.updated_at).desc())
                .limit(1)
            )
            record = result.scalar_one_or_none()
            return AboutContent.model_validate(record) if record is not None else None

        return await self._cached("about", query, _about)

    async def get_uses_content(self) -> UsesContent | None:
        async def query(session: AsyncSession) -> UsesContent | None:
            result = await session.execute(
                select(UsesContentRecord)
                .order_by(col(UsesContentRecord.updated_at).desc())
                .limit(1)
            )
            record = result.scalar_one_or_none()
            return UsesContent.model_validate(record) if record is not None else None

        return await self._cached("uses", query, _uses)

    # Blog

    async def get_blog_posts(self) -> list[BlogPost]:
        async def query(session: AsyncSession) -> list[BlogPost]:
            result = await session.execute(
                select(BlogPostRecord).order_by(
                    col(BlogPostRecord.published_date).desc(), col(BlogPostRecord.created_at)
                )
            )
            return sort_posts_by_recency(
                BlogPost.model_validate(r) for r in result.scalars().all()
            )

        return await self._cached("blog-posts", query, _posts)

    async def get_featured_blog_posts(self) -> list[BlogPost]:
        return [p for p in await self.get_blog_posts() if p.featured]

    async def get_blog_post_by_slug(self, slug: str) -> BlogPost | None:
        async def query(session: AsyncSession) -> BlogPost | None:
            result = await session.execute(
                select(BlogPostRecord).where(BlogPostRecord.slug == slug).limit(1)
            )
            record = result.scalar_one_or_none()
            return BlogPost.model_validate(record) if record is not None else None

        return await self._cached(cache_key("blog-post", slug), query, _post)

    async def get_all_blog_tags(self) -> list[str]:
        return collect_tags(await self.get_blog_posts())

    async def get_posts_by_tag(self, tag: str) -> list[BlogPost]:
        return filter_posts_by_tag(await self.get_blog_posts(), tag)

    async def get_related_posts(
        self, slug: str, limit: int = DEFAULT_RELATED_LIMIT
    ) -> list[BlogPost]:
        return rank_related_posts(await self.get_blog_posts(), slug, limit)

    # Skills and certifications

    async def get_skills(self) -> list[Skill]:
        async def query(session: AsyncSession) -> list[Skill]:
            result = await session.execute(
                select(SkillRecord).order_by(col(SkillRecord.category), col(SkillRecord.order))
            )
            return sort_skills(Skill.model_validate(r) for r in result.scalars().all())

        return await self._cached("skills", query, _skills)

    async def get_certifications(self) -> list[Certification]:
        async def query(session: AsyncSession) -> list[Certification]:
            result = await session.execute(
                select(CertificationRecord).order_by(col(CertificationRecord.created_at))
            )
            return [Certification.model_validate(r) for r in result.scalars().all()]

        return await self._cached("certifications", query, _certifications)

