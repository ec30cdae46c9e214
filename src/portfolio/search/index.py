"""Prebuilt static search index.

The index is a JSON artifact built from the content repository ahead of time
(``python -m src.portfolio.search``) and queried by free text at runtime.
"""

import asyncio
import html
import re
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Protocol

from src.portfolio.core.logging import get_logger
from src.portfolio.models.enums import SearchResultType
from src.portfolio.repositories.content.base import ContentRepository
from src.portfolio.schemas.search import (
    SearchDocument,
    SearchHit,
    SearchIndexData,
    SearchMeta,
)

logger = get_logger(__name__)

TITLE_WEIGHT = 10
EXCERPT_BEFORE = 60
EXCERPT_AFTER = 140

_MARKUP = re.compile(r"[#*_`>|~]+|\[|\]\([^)]*\)|<[^>]+>")
_WHITESPACE = re.compile(r"\s+")


class SearchIndex(Protocol):
    async def search(self, query: str) -> list[SearchHit]: ...


def plain_text(body: str) -> str:
    """Strip the common markup characters from a content body."""
    return _WHITESPACE.sub(" ", _MARKUP.sub(" ", body)).strip()


def query_terms(query: str) -> list[str]:
    return [term for term in query.lower().split() if term]


def make_excerpt(content: str, terms: list[str]) -> str:
    """HTML excerpt around the first match with every match wrapped in <mark>."""
    lowered = content.lower()
    positions = [pos for term in terms if (pos := lowered.find(term)) >= 0]
    start = max(0, min(positions) - EXCERPT_BEFORE) if positions else 0
    end = min(len(content), start + EXCERPT_BEFORE + EXCERPT_AFTER)

    # Snap to word boundaries
    if start > 0:
        space = content.find(" ", start)
        start = space + 1 if 0 <= space < end else start
    if end < len(content):
        space = content.rfind(" ", start, end)
        end = space if space > start else end

    snippet = content[start:end]
    if not terms:
        return html.escape(snippet)

    # Terms match the raw text, then each piece is escaped on its own
    alternatives = sorted(terms, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(t) for t in alternatives), re.IGNORECASE)
    parts: list[str] = []
    last = 0
    for match in pattern.finditer(snippet):
        parts.append(html.escape(snippet[last : match.start()]))
        parts.append(f"<mark>{html.escape(match.group(0))}</mark>")
        last = match.end()
    parts.append(html.escape(snippet[last:]))
    return "".join(parts)


class StaticSearchIndex:
    """In-memory index over prebuilt search documents."""

    def __init__(self, documents: list[SearchDocument]):
        self.documents = documents

    @classmethod
    async def load(cls, path: str | Path) -> "StaticSearchIndex":
        """Read the artifact without blocking the event loop."""
        raw = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
        data = SearchIndexData.model_validate_json(raw)
        logger.info("Search index loaded", path=str(path), documents=len(data.documents))
        return cls(data.documents)

    def _score(self, document: SearchDocument, terms: list[str]) -> int:
        title = document.title.lower()
        content = document.content.lower()
        score = 0
        for term in terms:
            title_hits = title.count(term)
            content_hits = content.count(term)
            if not title_hits and not content_hits:
                return 0
            score += title_hits * TITLE_WEIGHT + content_hits
        return score

    async def search(self, query: str) -> list[SearchHit]:
        """Documents containing every query term, best match first."""
        terms = query_terms(query)
        if not terms:
            return []

        scored = [(self._score(doc, terms), doc) for doc in self.documents]
        ranked = sorted(
            ((score, doc) for score, doc in scored if score > 0),
            key=lambda pair: pair[0],
            reverse=True,
        )
        return [
            SearchHit(
                url=doc.url,
                meta=SearchMeta(title=doc.title, type=doc.type.value),
                excerpt=make_excerpt(doc.content, terms),
            )
            for _, doc in ranked
        ]


class LazySearchIndex:
    """Loads the underlying index once, on first use.

    A failed load is logged and remembered: every later search returns no
    results instead of raising, since search is an optional enhancement.
    """

    def __init__(self, loader: Callable[[], Awaitable[SearchIndex]]):
        self._loader = loader
        self._index: SearchIndex | None = None
        self._failed = False
        self._lock = asyncio.Lock()

    @property
    def available(self) -> bool:
        return self._index is not None

    async def _get_index(self) -> SearchIndex | None:
        if self._index is not None or self._failed:
            return self._index
        async with self._lock:
            if self._index is None and not self._failed:
                try:
                    self._index = await self._loader()
                except Exception as e:
                    logger.warning(f"Search index not available - search disabled: {e}")
                    self._failed = True
        return self._index

    async def search(self, query: str) -> list[SearchHit]:
        index = await self._get_index()
        if index is None:
            return []
        return await index.search(query)


def lazy_index_from_path(path: str | Path) -> LazySearchIndex:
    async def loader() -> SearchIndex:
        return await StaticSearchIndex.load(path)

    return LazySearchIndex(loader)


async def build_search_documents(repository: ContentRepository) -> list[SearchDocument]:
    """Collect one search document per blog post, project and singleton page."""
    documents = [
        SearchDocument(
            url=f"/blog/{post.slug}",
            title=post.title,
            type=SearchResultType.BLOG,
            content=plain_text(" ".join([post.description, " ".join(post.tags), post.body])),
        )
        for post in await repository.get_blog_posts()
    ]
    documents.extend(
        SearchDocument(
            url=f"/projects/{project.slug}",
            title=project.title,
            type=SearchResultType.PROJECT,
            content=plain_text(
                " ".join([project.description, " ".join(project.tech_stack), project.body])
            ),
        )
        for project in await repository.get_projects()
    )

    pages = [
        ("/now", await repository.get_now_content()),
        ("/about", await repository.get_about_content()),
        ("/uses", await repository.get_uses_content()),
    ]
    for url, page in pages:
        if page is not None:
            documents.append(
                SearchDocument(
                    url=url,
                    title=page.title,
                    type=SearchResultType.PAGE,
                    content=plain_text(page.body),
                )
            )
    return documents


async def write_search_index(repository: ContentRepository, path: str | Path) -> int:
    """Build the artifact and write it to ``path``. Returns the document count."""
    data = SearchIndexData(documents=await build_search_documents(repository))
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    await asyncio.to_thread(target.write_text, data.model_dump_json(indent=2), encoding="utf-8")
    logger.info("Search index written", path=str(target), documents=len(data.documents))
    return len(data.documents)
