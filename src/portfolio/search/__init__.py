"""Static search: prebuilt index and result shaping."""

from src.portfolio.search.index import (
    LazySearchIndex,
    SearchIndex,
    StaticSearchIndex,
    build_search_documents,
    lazy_index_from_path,
    write_search_index,
)
from src.portfolio.search.results import MAX_SEARCH_RESULTS, classify_result, to_results

__all__ = [
    "MAX_SEARCH_RESULTS",
    "LazySearchIndex",
    "SearchIndex",
    "StaticSearchIndex",
    "build_search_documents",
    "classify_result",
    "lazy_index_from_path",
    "to_results",
    "write_search_index",
]
