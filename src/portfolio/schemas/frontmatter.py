"""Front-matter schemas for authored content files.

Keys are camelCase as written in the files; validated values are converted to
the source-agnostic content schemas by the collection loader.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.portfolio.models.enums import Proficiency


class FrontMatter(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ProjectFrontMatter(FrontMatter):
    title: str = Field(min_length=1)
    description: str
    slug: str | None = None
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


class ExperienceFrontMatter(FrontMatter):
    company: str
    role: str
    start_date: date
    end_date: date | None = None
    location: str | None = None
    order: int = 0


class BlogFrontMatter(FrontMatter):
    title: str = Field(min_length=1, max_length=100)
    description: str = Field(max_length=200)
    slug: str | None = None
    published_date: date
    updated_date: date | None = None
    tags: list[str] = Field(default_factory=list)
    featured: bool = False

    @field_validator("tags")
    @classmethod
    def strip_tags(cls, v: list[str]) -> list[str]:
        return [tag.strip() for tag in v if tag.strip()]


class SkillFrontMatter(FrontMatter):
    name: str
    category: str
    category_slug: str | None = None
    proficiency: Proficiency
    order: int = 0


class NowFrontMatter(FrontMatter):
    title: str
    last_updated: date


class AboutFrontMatter(FrontMatter):
    title: str
    description: str
    current_role: str
    current_company: str
    location: str
    focus_areas: list[str] = Field(default_factory=list)


class UsesFrontMatter(FrontMatter):
    title: str
