"""Sitemap endpoint (served at the site root, outside the versioned API)."""

from fastapi import APIRouter, Response

from src.portfolio.api.dependencies import AppSettings, ContentRepo
from src.portfolio.services.sitemap import build_sitemap, render_sitemap

router = APIRouter(tags=["sitemap"])


@router.get("/sitemap.xml", include_in_schema=False)
async def sitemap(repo: ContentRepo, settings: AppSettings) -> Response:
    entries = await build_sitemap(repo, settings.site_url)
    return Response(content=render_sitemap(entries), media_type="application/xml")
