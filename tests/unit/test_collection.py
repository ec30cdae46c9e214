"""Tests for loading the static content collection from disk."""

from datetime import date
from pathlib import Path

import pytest

from src.portfolio.content.collection import load_collection, slugify
from src.portfolio.core.exceptions import ContentCollectionError
from src.portfolio.models.enums import Proficiency
from tests.helpers import write_file

pytestmark = pytest.mark.unit


class TestLoadCollection:
    def test_loads_every_kind(self, content_dir: Path) -> None:
        collection = load_collection(content_dir)
        assert collection.counts() == {
            "projects": 1,
            "experiences": 1,
            "blog_posts": 2,
            "skills": 1,
            "now": 1,
            "about": 1,
            "uses": 1,
        }

    def test_project_fields_from_camel_case(self, content_dir: Path) -> None:
        (project,) = load_collection(content_dir).projects
        assert project.slug == "inventory-optimizer"
        assert project.tech_stack == ["Python", "PostgreSQL"]
        assert project.live_url == "https://example.com/inventory"
        assert project.has_case_study

    def test_blog_post_reading_time_and_tags(self, content_dir: Path) -> None:
        posts = {post.slug: post for post in load_collection(content_dir).blog}
        tuning = posts["postgres-tuning"]
        assert tuning.reading_time == 2
        assert tuning.tags == ["Database", "Postgres"]
        assert tuning.published_date == date(2024, 3, 1)
        assert posts["sql-basics"].last_modified == date(2024, 4, 2)

    def test_skill_category_slug_derived(self, content_dir: Path) -> None:
        (skill,) = load_collection(content_dir).skills
        assert skill.category_slug == "programming-languages"
        assert skill.proficiency is Proficiency.EXPERT

    def test_current_experience_has_no_end_date(self, content_dir: Path) -> None:
        (experience,) = load_collection(content_dir).experiences
        assert experience.is_current

    def test_singletons_are_optional(self, tmp_path: Path) -> None:
        (tmp_path / "blog").mkdir()
        collection = load_collection(tmp_path)
        assert collection.now is None
        assert collection.about is None
        assert collection.uses is None
        assert collection.blog == ()

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ContentCollectionError, match="not found"):
            load_collection(tmp_path / "nope")

    def test_duplicate_slug_fails(self, content_dir: Path) -> None:
        write_file(
            content_dir / "blog" / "nested" / "copy.md",
            """
            ---
            title: Copy
            description: Same slug as another post
            slug: sql-basics
            publishedDate: 2024-02-02
            ---
            Body.
            """,
        )
        with pytest.raises(ContentCollectionError, match="Duplicate blog slug"):
            load_collection(content_dir)

    def test_invalid_front_matter_names_the_file(self, content_dir: Path) -> None:
        write_file(
            content_dir / "blog" / "broken.md",
            """
            ---
            title: Missing the published date
            description: Broken
            ---
            Body.
            """,
        )
        with pytest.raises(ContentCollectionError, match="broken.md"):
            load_collection(content_dir)

    def test_title_longer_than_limit_fails(self, content_dir: Path) -> None:
        write_file(
            content_dir / "blog" / "long.md",
            f"""
            ---
            title: {"x" * 101}
            description: Too long
            publishedDate: 2024-02-02
            ---
            Body.
            """,
        )
        with pytest.raises(ContentCollectionError):
            load_collection(content_dir)

    def test_other_files_are_ignored(self, content_dir: Path) -> None:
        write_file(content_dir / "blog" / "notes.txt", "not content")
        assert len(load_collection(content_dir).blog) == 2


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Programming Languages", "programming-languages"),
        ("  Supply Chain & Ops ", "supply-chain-ops"),
        ("already-slugged", "already-slugged"),
    ],
)
def test_slugify(value: str, expected: str) -> None:
    assert slugify(value) == expected
