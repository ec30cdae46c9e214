from fastapi import APIRouter

from src.portfolio.api.v1 import blog, experiences, pages, projects, search, skills

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(projects.router)
api_router.include_router(experiences.router)
api_router.include_router(blog.router)
api_router.include_router(skills.router)
api_router.include_router(pages.router)
api_router.include_router(search.router)
