"""Experience timeline endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.portfolio.api.dependencies import ContentRepo
from src.portfolio.schemas.content import Experience

router = APIRouter(prefix="/experiences", tags=["experiences"])


@router.get(
    "",
    response_model=list[Experience],
    summary="List experiences",
    description="Experience timeline in display order.",
)
async def list_experiences(repo: ContentRepo) -> list[Experience]:
    return await repo.get_experiences()


@router.get(
    "/current",
    response_model=Experience,
    summary="Get current experience",
    description="The first experience in display order without an end date.",
    responses={404: {"description": "No current experience"}},
)
async def get_current_experience(repo: ContentRepo) -> Experience:
    experience = await repo.get_current_experience()
    if experience is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No current experience",
        )
    return experience
