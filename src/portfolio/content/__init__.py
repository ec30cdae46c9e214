"""Static content collection loaded from front-matter files."""

from src.portfolio.content.collection import StaticContentCollection, load_collection, slugify
from src.portfolio.content.frontmatter import ContentFile, parse_content, reading_time

__all__ = [
    "ContentFile",
    "StaticContentCollection",
    "load_collection",
    "parse_content",
    "reading_time",
    "slugify",
]
