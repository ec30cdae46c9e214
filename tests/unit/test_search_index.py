"""Tests for the static search index and result shaping."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from src.portfolio.core.config import get_settings
from src.portfolio.models.enums import SearchResultType
from src.portfolio.repositories.content import StaticContentRepository
from src.portfolio.schemas.search import SearchDocument, SearchHit, SearchMeta
from src.portfolio.search.__main__ import main as build_index_main
from src.portfolio.search.index import (
    LazySearchIndex,
    StaticSearchIndex,
    build_search_documents,
    lazy_index_from_path,
    make_excerpt,
    plain_text,
    write_search_index,
)
from src.portfolio.search.results import classify_result, to_results

pytestmark = pytest.mark.unit


def doc(url: str, title: str, content: str, kind=SearchResultType.BLOG) -> SearchDocument:
    return SearchDocument(url=url, title=title, type=kind, content=content)


class TestStaticSearchIndex:
    async def test_requires_every_term(self) -> None:
        index = StaticSearchIndex(
            [
                doc("/blog/a", "Databases", "postgres and indexes"),
                doc("/blog/b", "Other", "postgres only"),
            ]
        )
        hits = await index.search("postgres indexes")
        assert [h.url for h in hits] == ["/blog/a"]

    async def test_title_matches_rank_first(self) -> None:
        index = StaticSearchIndex(
            [
                doc("/blog/body", "Notes", "data data data"),
                doc("/blog/title", "Data Pipelines", "about pipelines"),
            ]
        )
        hits = await index.search("data")
        assert [h.url for h in hits] == ["/blog/title", "/blog/body"]

    async def test_case_insensitive(self) -> None:
        index = StaticSearchIndex(
            [doc("/uses", "Uses", "A Mechanical Keyboard", SearchResultType.PAGE)]
        )
        (hit,) = await index.search("KEYBOARD")
        assert hit.meta.type == "page"
        assert "<mark>Keyboard</mark>" in hit.excerpt

    async def test_blank_query(self) -> None:
        index = StaticSearchIndex([doc("/blog/a", "A", "text")])
        assert await index.search("   ") == []

    async def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "index.json"
        path.write_text(
            json.dumps(
                {
                    "version": 1,
                    "documents": [
                        {"url": "/blog/a", "title": "Alpha", "type": "blog", "content": "x"}
                    ],
                }
            )
        )
        index = await StaticSearchIndex.load(path)
        assert [h.url for h in await index.search("alpha")] == ["/blog/a"]


class TestExcerpt:
    def test_escapes_html_and_marks_matches(self) -> None:
        excerpt = make_excerpt("use <script> with data", ["data"])
        assert "&lt;script&gt;" in excerpt
        assert excerpt.endswith("<mark>data</mark>")

    def test_terms_never_match_inside_entities(self) -> None:
        excerpt = make_excerpt("An example with Tom & Jerry", ["amp"])
        assert excerpt == "An ex<mark>amp</mark>le with Tom &amp; Jerry"

    def test_special_characters_in_terms_are_escaped(self) -> None:
        assert make_excerpt("Tom & Jerry", ["&"]) == "Tom <mark>&amp;</mark> Jerry"

    def test_window_starts_near_the_match(self) -> None:
        content = " ".join(["filler"] * 100) + " needle " + " ".join(["tail"] * 10)
        excerpt = make_excerpt(content, ["needle"])
        assert "<mark>needle</mark>" in excerpt
        assert len(excerpt) < len(content)

    def test_plain_text_strips_markup(self) -> None:
        assert plain_text("# Title\n\n**bold** [link](https://x.y)") == "Title bold link"


class TestLazySearchIndex:
    async def test_loads_once(self) -> None:
        calls = 0

        async def loader() -> StaticSearchIndex:
            nonlocal calls
            calls += 1
            return StaticSearchIndex([doc("/blog/a", "Alpha", "")])

        index = LazySearchIndex(loader)
        assert not index.available
        await index.search("alpha")
        await index.search("alpha")
        assert calls == 1
        assert index.available

    async def test_missing_file_degrades_to_no_results(self, tmp_path: Path) -> None:
        index = lazy_index_from_path(tmp_path / "missing.json")
        assert await index.search("anything") == []
        assert await index.search("anything") == []
        assert not index.available

    async def test_corrupt_file_degrades_to_no_results(self, tmp_path: Path) -> None:
        path = tmp_path / "index.json"
        path.write_text("{not json")
        assert await lazy_index_from_path(path).search("x") == []


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """Re-read settings from the environment around a CLI run."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestBuildIndex:
    async def test_documents_cover_posts_projects_pages(
        self, static_repo: StaticContentRepository
    ) -> None:
        documents = await build_search_documents(static_repo)
        urls = {d.url for d in documents}
        assert "/blog/postgres-tuning" in urls
        assert "/projects/inventory-optimizer" in urls
        assert {"/now", "/about", "/uses"} <= urls

    async def test_written_index_is_searchable(
        self, static_repo: StaticContentRepository, tmp_path: Path
    ) -> None:
        path = tmp_path / "out" / "search-index.json"
        count = await write_search_index(static_repo, path)
        index = await StaticSearchIndex.load(path)
        assert count == len(index.documents)
        hits = await index.search("vacuum")
        assert [h.url for h in hits] == ["/blog/postgres-tuning"]

    @pytest.mark.usefixtures("fresh_settings")
    def test_cli_writes_index(
        self, content_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        output = tmp_path / "search-index.json"
        monkeypatch.setenv("CONTENT_DIR", str(content_dir))
        get_settings.cache_clear()
        assert build_index_main(["--output", str(output)]) == 0
        assert output.exists()

    @pytest.mark.usefixtures("fresh_settings")
    def test_cli_fails_on_missing_content(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CONTENT_DIR", str(tmp_path / "missing"))
        get_settings.cache_clear()
        assert build_index_main(["--output", str(tmp_path / "x.json")]) == 1


class TestResults:
    def test_type_from_meta(self) -> None:
        meta = SearchMeta(title="T", type="project")
        assert classify_result(meta, "/anything") is SearchResultType.PROJECT

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("/blog/post", SearchResultType.BLOG),
            ("/projects/p", SearchResultType.PROJECT),
            ("/now", SearchResultType.PAGE),
        ],
    )
    def test_type_from_url(self, url: str, expected: SearchResultType) -> None:
        assert classify_result(SearchMeta(type="unknown"), url) is expected

    def test_untitled_and_limit(self) -> None:
        hits = [SearchHit(url=f"/blog/{i}", meta=SearchMeta(), excerpt="") for i in range(15)]
        results = to_results(hits)
        assert len(results) == 10
        assert results[0].title == "Untitled"
