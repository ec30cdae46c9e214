"""Skills and certifications endpoints."""

from fastapi import APIRouter

from src.portfolio.api.dependencies import ContentRepo
from src.portfolio.schemas.content import Certification, Skill, SkillCategory

router = APIRouter(tags=["skills"])


@router.get(
    "/skills",
    response_model=list[Skill],
    summary="List skills",
    description="Skills ordered by category, then by order within the category.",
)
async def list_skills(repo: ContentRepo) -> list[Skill]:
    return await repo.get_skills()


@router.get(
    "/skills/by-category",
    response_model=list[SkillCategory],
    summary="List skills grouped by category",
)
async def list_skills_by_category(repo: ContentRepo) -> list[SkillCategory]:
    return await repo.get_skills_by_category()


@router.get(
    "/certifications",
    response_model=list[Certification],
    summary="List certifications",
)
async def list_certifications(repo: ContentRepo) -> list[Certification]:
    return await repo.get_certifications()
