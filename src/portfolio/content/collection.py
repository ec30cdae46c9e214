"""Static content collection built from front-matter files.

Layout under the content root::

    projects/**/*.md(x)    experience/**/*.md(x)    blog/**/*.md(x)
    skills/**/*.md(x)      now.md(x)    about.md(x)    uses.md(x)

The collection is loaded once and is immutable afterwards. Any invalid file
fails the whole load, so a broken content tree stops the process at startup
instead of surfacing at request time.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeVar
from pathlib import Path

from pydantic import BaseModel, ValidationError

from src.portfolio.content.frontmatter import ContentFile, read_content_file, reading_time
from src.portfolio.core.exceptions import ContentCollectionError
from src.portfolio.core.logging import get_logger
from src.portfolio.schemas.content import (
    AboutContent,
    BlogPost,
    Experience,
    NowContent,
    Project,
    Skill,
    UsesContent,
)
from src.portfolio.schemas.frontmatter import (
    AboutFrontMatter,
    BlogFrontMatter,
    ExperienceFrontMatter,
    NowFrontMatter,
    ProjectFrontMatter,
    SkillFrontMatter,
    UsesFrontMatter,
)

logger = get_logger(__name__)

F = TypeVar("F", bound=BaseModel)

CONTENT_SUFFIXES = (".md", ".mdx")


@dataclass(frozen=True)
class StaticContentCollection:
    projects: tuple[Project, ...] = ()
    experiences: tuple[Experience, ...] = ()
    blog: tuple[BlogPost, ...] = ()
    skills: tuple[Skill, ...] = ()
    now: NowContent | None = None
    about: AboutContent | None = None
    uses: UsesContent | None = None

    def counts(self) -> dict[str, int]:
        return {
            "projects": len(self.projects),
            "experiences": len(self.experiences),
            "blog_posts": len(self.blog),
            "skills": len(self.skills),
            "now": int(self.now is not None),
            "about": int(self.about is not None),
            "uses": int(self.uses is not None),
        }


def slugify(value: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    return slug


def _content_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(
        path for path in directory.rglob("*") if path.is_file() and path.suffix in CONTENT_SUFFIXES
    )


def _singleton_file(root: Path, name: str) -> Path | None:
    for suffix in CONTENT_SUFFIXES:
        path = root / f"{name}{suffix}"
        if path.is_file():
            return path
    return None


def _validate(schema: type[F], file: ContentFile) -> F:
    try:
        return schema.model_validate(file.data)
    except ValidationError as e:
        raise ContentCollectionError(f"{file.path}: {e}") from e


def _build_project(file: ContentFile) -> Project:
    meta = _validate(ProjectFrontMatter, file)
    return Project(
        **meta.model_dump(exclude={"slug"}),
        slug=meta.slug or slugify(file.path.stem),
        body=file.body,
    )


def _build_experience(file: ContentFile) -> Experience:
    meta = _validate(ExperienceFrontMatter, file)
    return Experience(**meta.model_dump(), body=file.body)


def _build_post(file: ContentFile) -> BlogPost:
    meta = _validate(BlogFrontMatter, file)
    return BlogPost(
        **meta.model_dump(exclude={"slug"}),
        slug=meta.slug or slugify(file.path.stem),
        reading_time=reading_time(file.body),
        body=file.body,
    )


def _build_skill(file: ContentFile) -> Skill:
    meta = _validate(SkillFrontMatter, file)
    return Skill(
        **meta.model_dump(exclude={"category_slug"}),
        category_slug=meta.category_slug or slugify(meta.category),
        body=file.body,
    )


def _ensure_unique(items: Iterable[object], key: Callable[[object], str], kind: str) -> None:
    seen: set[str] = set()
    for item in items:
        value = key(item)
        if value in seen:
            raise ContentCollectionError(f"Duplicate {kind}: {value!r}")
        seen.add(value)


def load_collection(content_dir: str | Path) -> StaticContentCollection:
    """Load and validate every content file under ``content_dir``.

    Raises:
        ContentCollectionError: If the directory is missing, a file is invalid,
            or a slug/skill name is used twice.
    """
    root = Path(content_dir)
    if not root.is_dir():
        raise ContentCollectionError(f"Content directory not found: {root}")

    projects = tuple(_build_project(read_content_file(p)) for p in _content_files(root / "projects"))
    experiences = tuple(
        _build_experience(read_content_file(p)) for p in _content_files(root / "experience")
    )
    blog = tuple(_build_post(read_content_file(p)) for p in _content_files(root / "blog"))
    skills = tuple(_build_skill(read_content_file(p)) for p in _content_files(root / "skills"))

    _ensure_unique(projects, lambda p: p.slug, "project slug")  # type: ignore[attr-defined]
    _ensure_unique(blog, lambda p: p.slug, "blog slug")  # type: ignore[attr-defined]
    _ensure_unique(skills, lambda s: s.name, "skill name")  # type: ignore[attr-defined]

    now = about = uses = None
    if path := _singleton_file(root, "now"):
        file = read_content_file(path)
        now = NowContent(**_validate(NowFrontMatter, file).model_dump(), body=file.body)
    if path := _singleton_file(root, "about"):
        file = read_content_file(path)
        about = AboutContent(**_validate(AboutFrontMatter, file).model_dump(), body=file.body)
    if path := _singleton_file(root, "uses"):
        file = read_content_file(path)
        uses = UsesContent(**_validate(UsesFrontMatter, file).model_dump(), body=file.body)

    collection = StaticContentCollection(
        projects=projects,
        experiences=experiences,
        blog=blog,
        skills=skills,
        now=now,
        about=about,
        uses=uses,
    )
    logger.info("Static content loaded", root=str(root), **collection.counts())
    return collection
