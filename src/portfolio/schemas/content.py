"""Source-agnostic content schemas.

Both the static collection and the database produce these shapes, so callers
never need to know which source is active.
"""

from datetime import date

from pydantic import BaseModel, Field

from src.portfolio.models.enums import Proficiency


class ContentModel(BaseModel):
    model_config = {"from_attributes": True, "frozen": True}


class Project(ContentModel):
    title: str
    description: str
    slug: str
    featured: bool = False
    order: int = 0
    tech_stack: list[str] = Field(default_factory=list)
    github: str | None = None
    private: bool = False
    live_url: str | None = None
    image: str | None = None
    challenge: str | None = None
    approach: str | None = None
    impact: str | None = None
    learnings: str | None = None
    body: str

    @property
    def has_case_study(self) -> bool:
        return any((self.challenge, self.approach, self.impact, self.learnings))


class Experience(ContentModel):
    company: str
    role: str
    start_date: date
    end_date: date | None = None
    location: str | None = None
    order: int = 0
    body: str

    @property
    def is_current(self) -> bool:
        """An experience without an end date is the current one."""
        return self.end_date is None


class BlogPost(ContentModel):
    title: str = Field(max_length=100)
    description: str = Field(max_length=200)
    slug: str
    published_date: date
    updated_date: date | None = None
    tags: list[str] = Field(default_factory=list)
    featured: bool = False
    reading_time: int = Field(default=1, ge=1)
    body: str

    @property
    def last_modified(self) -> date:
        return self.updated_date or self.published_date


class Skill(ContentModel):
    name: str
    category: str
    category_slug: str
    proficiency: Proficiency
    order: int = 0
    body: str = ""


class NowContent(ContentModel):
    title: str
    last_updated: date
    body: str


class AboutContent(ContentModel):
    title: str
    description: str
    current_role: str
    current_company: str
    location: str
    focus_areas: list[str] = Field(default_factory=list)
    body: str


class UsesContent(ContentModel):
    title: str
    body: str


class Certification(ContentModel):
    name: str
    abbreviation: str
    issuer: str


class SkillCategory(BaseModel):
    """Skills grouped under one category, in display order."""

    name: str
    slug: str
    skills: list[Skill]
