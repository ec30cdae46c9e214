"""Content tables.

Natural keys (project slug, blog slug, skill name, certification abbreviation
and experience company/role/start date) carry unique constraints so the
seeder can upsert idempotently.
"""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlalchemy import Column, Text, UniqueConstraint
from sqlalchemy import Enum as SAEnum
from sqlalchemy.dialects.postgresql import ARRAY
from sqlmodel import Field, SQLModel

from src.portfolio.models.base import utc_now
from src.portfolio.models.enums import Proficiency


def _text_array() -> Column:
    return Column(ARRAY(Text), nullable=False, server_default="{}")


class ProjectRecord(SQLModel, table=True):
    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str
    description: str
    slug: str = Field(unique=True, index=True)
    featured: bool = Field(default=False)
    order: int = Field(default=0)
    tech_stack: list[str] = Field(default_factory=list, sa_column=_text_array())
    github: str | None = None
    private: bool = Field(default=False)
    live_url: str | None = None
    image: str | None = None
    # Case study
    challenge: str | None = None
    approach: str | None = None
    impact: str | None = None
    learnings: str | None = None
    body: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class ExperienceRecord(SQLModel, table=True):
    __tablename__ = "experiences"
    __table_args__ = (
        UniqueConstraint(
            "company", "role", "start_date", name="experiences_company_role_start_unique"
        ),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company: str
    role: str
    start_date: date
    end_date: date | None = None
    location: str | None = None
    order: int = Field(default=0)
    body: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class BlogPostRecord(SQLModel, table=True):
    __tablename__ = "blog_posts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=100)
    description: str = Field(max_length=200)
    slug: str = Field(unique=True, index=True)
    published_date: date = Field(index=True)
    updated_date: date | None = None
    tags: list[str] = Field(default_factory=list, sa_column=_text_array())
    featured: bool = Field(default=False)
    reading_time: int = Field(default=1)
    body: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class SkillRecord(SQLModel, table=True):
    __tablename__ = "skills"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True)
    category: str
    category_slug: str
    proficiency: Proficiency = Field(
        sa_column=Column(
            SAEnum(
                Proficiency,
                name="proficiency",
                values_callable=lambda enum: [member.value for member in enum],
            ),
            nullable=False,
        )
    )
    order: int = Field(default=0)
    body: str = Field(default="")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class NowContentRecord(SQLModel, table=True):
    """Singleton: at most one row is live."""

    __tablename__ = "now_content"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str
    last_updated: date
    body: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class AboutContentRecord(SQLModel, table=True):
    """Singleton: at most one row is live."""

    __tablename__ = "about_content"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str
    description: str
    current_role: str
    current_company: str
    location: str
    focus_areas: list[str] = Field(default_factory=list, sa_column=_text_array())
    body: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class UsesContentRecord(SQLModel, table=True):
    """Singleton: at most one row is live."""

    __tablename__ = "uses_content"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str
    body: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class CertificationRecord(SQLModel, table=True):
    __tablename__ = "certifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    abbreviation: str = Field(unique=True)
    issuer: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
