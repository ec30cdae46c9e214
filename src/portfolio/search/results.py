"""Turning raw index hits into display results."""

from collections.abc import Iterable

from src.portfolio.models.enums import SearchResultType
from src.portfolio.schemas.search import SearchHit, SearchMeta, SearchResult

MAX_SEARCH_RESULTS = 10
UNTITLED = "Untitled"

_URL_PREFIXES = (
    ("/blog/", SearchResultType.BLOG),
    ("/projects/", SearchResultType.PROJECT),
)


def classify_result(meta: SearchMeta, url: str) -> SearchResultType:
    """Result type from index metadata, falling back to the URL shape."""
    if meta.type:
        try:
            return SearchResultType(meta.type)
        except ValueError:
            pass
    for prefix, result_type in _URL_PREFIXES:
        if url.startswith(prefix):
            return result_type
    return SearchResultType.PAGE


def to_results(hits: Iterable[SearchHit], limit: int = MAX_SEARCH_RESULTS) -> list[SearchResult]:
    results: list[SearchResult] = []
    for hit in hits:
        if len(results) >= limit:
            break
        results.append(
            SearchResult(
                url=hit.url,
                title=hit.meta.title or UNTITLED,
                excerpt=hit.excerpt,
                type=classify_result(hit.meta, hit.url),
            )
        )
    return results
