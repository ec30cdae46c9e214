"""Search endpoint over the prebuilt static index."""

from typing import Annotated

from fastapi import APIRouter, Query

from src.portfolio.api.dependencies import AppSettings, SearchIndexDep
from src.portfolio.schemas.search import SearchResult
from src.portfolio.search.results import to_results

router = APIRouter(prefix="/search", tags=["search"])


@router.get(
    "",
    response_model=list[SearchResult],
    summary="Search site content",
    description=(
        "Free-text search over posts, projects and pages. "
        "Returns an empty list when the index is unavailable."
    ),
)
async def search(
    index: SearchIndexDep,
    settings: AppSettings,
    q: Annotated[str, Query(max_length=200, description="Search text")] = "",
) -> list[SearchResult]:
    if not q.strip():
        return []
    hits = await index.search(q)
    return to_results(hits, settings.search_max_results)
