"""Project endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.portfolio.api.dependencies import ContentRepo
from src.portfolio.schemas.content import Project

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[Project],
    summary="List projects",
    description="All projects in display order.",
)
async def list_projects(repo: ContentRepo) -> list[Project]:
    return await repo.get_projects()


@router.get(
    "/featured",
    response_model=list[Project],
    summary="List featured projects",
)
async def list_featured_projects(repo: ContentRepo) -> list[Project]:
    return await repo.get_featured_projects()


@router.get(
    "/tech-stack",
    response_model=list[str],
    summary="List technologies",
    description="Every technology used across projects, deduplicated and sorted.",
)
async def list_tech_stack(repo: ContentRepo) -> list[str]:
    return await repo.get_all_project_tech_stack()


@router.get(
    "/{slug}",
    response_model=Project,
    summary="Get project",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(slug: str, repo: ContentRepo) -> Project:
    project = await repo.get_project_by_slug(slug)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project '{slug}' not found",
        )
    return project
