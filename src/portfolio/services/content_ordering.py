"""Ordering and filtering rules shared by every content source.

Both repositories route their results through these functions, which is what
keeps the static and database sources interchangeable. All sorts are stable:
ties keep their input order.
"""

from collections.abc import Iterable, Sequence
from typing import TypeVar

from src.portfolio.schemas.content import BlogPost, Experience, Project, Skill, SkillCategory

_OrderedT = TypeVar("_OrderedT", Project, Experience)
_SluggedT = TypeVar("_SluggedT", Project, BlogPost)


def sort_posts_by_recency(posts: Iterable[BlogPost]) -> list[BlogPost]:
    """Newest published first."""
    return sorted(posts, key=lambda post: post.published_date, reverse=True)


def sort_by_order(items: Iterable[_OrderedT]) -> list[_OrderedT]:
    return sorted(items, key=lambda item: item.order)


def sort_skills(skills: Iterable[Skill]) -> list[Skill]:
    """Category first, then order within the category."""
    return sorted(skills, key=lambda skill: (skill.category, skill.order))


def normalize_tag(tag: str) -> str:
    return tag.strip().lower()


def collect_tags(posts: Iterable[BlogPost]) -> list[str]:
    """Lower-cased, deduplicated, alphabetically sorted tags across posts."""
    return sorted({normalize_tag(tag) for post in posts for tag in post.tags})


def filter_posts_by_tag(posts: Iterable[BlogPost], tag: str) -> list[BlogPost]:
    """Posts carrying ``tag`` (case-insensitive), newest first."""
    wanted = normalize_tag(tag)
    return sort_posts_by_recency(
        post for post in posts if any(normalize_tag(t) == wanted for t in post.tags)
    )


def collect_tech_stack(projects: Iterable[Project]) -> list[str]:
    return sorted({tech for project in projects for tech in project.tech_stack})


def find_by_slug(items: Iterable[_SluggedT], slug: str) -> _SluggedT | None:
    return next((item for item in items if item.slug == slug), None)


def find_current_experience(experiences: Sequence[Experience]) -> Experience | None:
    """First experience in display order without an end date.

    Several open-ended entries are a display ambiguity, not an error; the
    earliest in display order wins.
    """
    return next((exp for exp in sort_by_order(experiences) if exp.is_current), None)


def group_skills(skills: Iterable[Skill]) -> list[SkillCategory]:
    """Group skills by category, preserving the category/order sort."""
    groups: dict[str, SkillCategory] = {}
    for skill in sort_skills(skills):
        group = groups.get(skill.category)
        if group is None:
            group = SkillCategory(name=skill.category, slug=skill.category_slug, skills=[])
            groups[skill.category] = group
        group.skills.append(skill)
    return list(groups.values())
