"""Singleton page endpoints (now, about, uses)."""

from fastapi import APIRouter, HTTPException, status

from src.portfolio.api.dependencies import ContentRepo
from src.portfolio.schemas.content import AboutContent, NowContent, UsesContent

router = APIRouter(prefix="/pages", tags=["pages"])

_NOT_FOUND = {404: {"description": "Page has no content"}}


def _missing(page: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No {page} content",
    )


@router.get("/now", response_model=NowContent, summary="Get now page", responses=_NOT_FOUND)
async def get_now(repo: ContentRepo) -> NowContent:
    content = await repo.get_now_content()
    if content is None:
        raise _missing("now")
    return content


@router.get("/about", response_model=AboutContent, summary="Get about page", responses=_NOT_FOUND)
async def get_about(repo: ContentRepo) -> AboutContent:
    content = await repo.get_about_content()
    if content is None:
        raise _missing("about")
    return content


@router.get("/uses", response_model=UsesContent, summary="Get uses page", responses=_NOT_FOUND)
async def get_uses(repo: ContentRepo) -> UsesContent:
    content = await repo.get_uses_content()
    if content is None:
        raise _missing("uses")
    return content
