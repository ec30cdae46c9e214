"""Tests for related-post ranking."""

from datetime import date, timedelta

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.portfolio.schemas.content import BlogPost
from src.portfolio.services.related_posts import rank_related_posts, shared_tag_count
from tests.factories import BlogPostFactory

pytestmark = pytest.mark.unit


def post(slug: str, tags: list[str], day: int) -> BlogPost:
    return BlogPostFactory.tagged(slug, tags, date(2024, 1, 1) + timedelta(days=day))


def slugs(posts: list[BlogPost]) -> list[str]:
    return [p.slug for p in posts]


class TestRankRelatedPosts:
    def test_more_shared_tags_rank_first(self) -> None:
        posts = [
            post("ref", ["a", "b"], 0),
            post("one-shared", ["a"], 10),
            post("two-shared", ["a", "b"], 1),
            post("unrelated", ["z"], 20),
        ]
        assert slugs(rank_related_posts(posts, "ref", 2)) == ["two-shared", "one-shared"]

    def test_ties_go_to_the_newer_post(self) -> None:
        posts = [
            post("ref", ["a"], 0),
            post("older", ["a"], 1),
            post("newer", ["a"], 5),
        ]
        assert slugs(rank_related_posts(posts, "ref", 3)) == ["newer", "older"]

    def test_fills_with_recent_posts(self) -> None:
        posts = [
            post("ref", ["a"], 0),
            post("shared", ["a"], 1),
            post("recent", ["z"], 9),
            post("middle", ["y"], 5),
            post("oldest", ["x"], 2),
        ]
        assert slugs(rank_related_posts(posts, "ref", 3)) == ["shared", "recent", "middle"]

    def test_reference_without_tags_returns_most_recent(self) -> None:
        posts = [post("ref", [], 0), post("b", ["a"], 1), post("c", ["b"], 2)]
        assert slugs(rank_related_posts(posts, "ref", 3)) == ["c", "b"]

    def test_repeated_tags_raise_the_score(self) -> None:
        posts = [
            post("ref", ["a", "b"], 0),
            post("repeated", ["a", "A"], 1),
            post("single", ["a"], 5),
        ]
        assert slugs(rank_related_posts(posts, "ref", 2)) == ["repeated", "single"]

    def test_tag_matching_ignores_case(self) -> None:
        posts = [post("ref", ["Python"], 0), post("other", ["python"], 1), post("x", ["go"], 9)]
        assert slugs(rank_related_posts(posts, "ref", 1)) == ["other"]

    def test_unknown_slug_is_empty(self) -> None:
        assert rank_related_posts([post("a", ["x"], 0)], "missing", 3) == []

    def test_non_positive_limit_is_empty(self) -> None:
        posts = [post("ref", ["a"], 0), post("b", ["a"], 1)]
        assert rank_related_posts(posts, "ref", 0) == []

    def test_only_post_has_no_related(self) -> None:
        assert rank_related_posts([post("ref", ["a"], 0)], "ref", 3) == []


def test_shared_tag_count_counts_repeated_tags() -> None:
    assert shared_tag_count({"a", "b"}, post("p", ["A", "a", "b", "c"], 0)) == 3


tag_lists = st.lists(st.sampled_from(["a", "b", "c", "d"]), max_size=3, unique=True)


@given(
    tags=st.lists(tag_lists, min_size=1, max_size=12),
    limit=st.integers(min_value=0, max_value=6),
    data=st.data(),
)
def test_ranking_invariants(tags: list[list[str]], limit: int, data: st.DataObject) -> None:
    posts = [post(f"p{i}", t, i) for i, t in enumerate(tags)]
    reference = data.draw(st.sampled_from(posts))

    related = rank_related_posts(posts, reference.slug, limit)

    assert reference.slug not in slugs(related)
    assert len(related) == min(limit, len(posts) - 1)
    assert len(set(slugs(related))) == len(related)
