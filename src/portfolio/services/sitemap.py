"""Sitemap generation from the content repository."""

from dataclasses import dataclass
from datetime import date
from xml.etree import ElementTree as ET

from src.portfolio.repositories.content.base import ContentRepository

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(frozen=True)
class SitemapEntry:
    url: str
    last_modified: date
    change_frequency: str
    priority: float


# (path, change frequency, priority); the now page is added separately
STATIC_PAGES = (
    ("", "monthly", 1.0),
    ("/about", "monthly", 0.8),
    ("/experience", "monthly", 0.8),
    ("/projects", "weekly", 0.8),
    ("/blog", "weekly", 0.7),
    ("/contact", "yearly", 0.5),
)


async def build_sitemap(
    repository: ContentRepository,
    base_url: str,
    today: date | None = None,
) -> list[SitemapEntry]:
    today = today or date.today()
    base_url = base_url.rstrip("/")

    entries = [
        SitemapEntry(f"{base_url}{path}", today, frequency, priority)
        for path, frequency, priority in STATIC_PAGES
    ]

    now = await repository.get_now_content()
    entries.append(
        SitemapEntry(f"{base_url}/now", now.last_updated if now else today, "weekly", 0.7)
    )
    entries.extend(
        SitemapEntry(f"{base_url}/projects/{project.slug}", today, "monthly", 0.6)
        for project in await repository.get_projects()
    )
    entries.extend(
        SitemapEntry(f"{base_url}/blog/{post.slug}", post.last_modified, "monthly", 0.7)
        for post in await repository.get_blog_posts()
    )
    return entries


def render_sitemap(entries: list[SitemapEntry]) -> str:
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.url
        ET.SubElement(url, "lastmod").text = entry.last_modified.isoformat()
        ET.SubElement(url, "changefreq").text = entry.change_frequency
        ET.SubElement(url, "priority").text = f"{entry.priority:.1f}"
    body = ET.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'
