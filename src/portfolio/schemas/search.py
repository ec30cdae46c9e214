"""Search index schemas."""

from pydantic import BaseModel, Field

from src.portfolio.models.enums import SearchResultType


class SearchDocument(BaseModel):
    """One indexed page of the prebuilt search artifact."""

    url: str
    title: str
    type: SearchResultType
    content: str


class SearchIndexData(BaseModel):
    version: int = 1
    documents: list[SearchDocument] = Field(default_factory=list)


class SearchMeta(BaseModel):
    title: str | None = None
    type: str | None = None


class SearchHit(BaseModel):
    """Raw ranked match returned by an index."""

    url: str
    meta: SearchMeta
    excerpt: str  # HTML, matches wrapped in <mark>


class SearchResult(BaseModel):
    """Display-ready result."""

    url: str
    title: str
    excerpt: str
    type: SearchResultType
