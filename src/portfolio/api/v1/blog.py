"""Blog endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from src.portfolio.api.dependencies import ContentRepo
from src.portfolio.schemas.content import BlogPost
from src.portfolio.services.related_posts import DEFAULT_RELATED_LIMIT

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get(
    "",
    response_model=list[BlogPost],
    summary="List blog posts",
    description="All posts, newest published first.",
)
async def list_posts(repo: ContentRepo) -> list[BlogPost]:
    return await repo.get_blog_posts()


@router.get(
    "/featured",
    response_model=list[BlogPost],
    summary="List featured blog posts",
)
async def list_featured_posts(repo: ContentRepo) -> list[BlogPost]:
    return await repo.get_featured_blog_posts()


@router.get(
    "/tags",
    response_model=list[str],
    summary="List tags",
    description="Every tag across posts, lower-cased, deduplicated and sorted.",
)
async def list_tags(repo: ContentRepo) -> list[str]:
    return await repo.get_all_blog_tags()


@router.get(
    "/tags/{tag}",
    response_model=list[BlogPost],
    summary="List posts by tag",
    description="Posts carrying the tag (case-insensitive). Unknown tags return an empty list.",
)
async def list_posts_by_tag(tag: str, repo: ContentRepo) -> list[BlogPost]:
    return await repo.get_posts_by_tag(tag)


@router.get(
    "/{slug}",
    response_model=BlogPost,
    summary="Get blog post",
    responses={
        200: {"description": "Blog post"},
        404: {"description": "Blog post not found"},
    },
)
async def get_post(slug: str, repo: ContentRepo) -> BlogPost:
    post = await repo.get_blog_post_by_slug(slug)
    if post is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Blog post '{slug}' not found",
        )
    return post


@router.get(
    "/{slug}/related",
    response_model=list[BlogPost],
    summary="List related posts",
    description=(
        "Posts sharing the most tags with the given post, most recent first on ties, "
        "filled with recent posts when too few share a tag."
    ),
)
async def list_related_posts(
    slug: str,
    repo: ContentRepo,
    limit: Annotated[int, Query(ge=1, le=20, description="Max posts to return")] = (
        DEFAULT_RELATED_LIMIT
    ),
) -> list[BlogPost]:
    return await repo.get_related_posts(slug, limit)
