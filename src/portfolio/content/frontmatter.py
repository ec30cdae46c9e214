"""Front-matter parsing for content files."""

import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.portfolio.core.exceptions import ContentCollectionError

WORDS_PER_MINUTE = 200

_FENCE = re.compile(r"^---[ \t]*\r?$", flags=re.MULTILINE)


@dataclass(frozen=True)
class ContentFile:
    """A parsed content file: metadata mapping plus raw body."""

    path: Path
    data: dict[str, Any]
    body: str


def parse_content(raw: str, path: Path) -> ContentFile:
    """Split a ``---`` fenced YAML header from the body.

    Files without a header have empty metadata and the whole text as body.
    """
    if not raw.startswith("---"):
        return ContentFile(path=path, data={}, body=raw.strip())

    parts = _FENCE.split(raw, maxsplit=2)
    if len(parts) < 3:
        raise ContentCollectionError(f"{path}: unterminated front matter")

    try:
        data = yaml.safe_load(parts[1]) or {}
    except yaml.YAMLError as e:
        raise ContentCollectionError(f"{path}: invalid front matter: {e}") from e
    if not isinstance(data, dict):
        raise ContentCollectionError(f"{path}: front matter must be a mapping")

    return ContentFile(path=path, data=data, body=parts[2].strip())


def read_content_file(path: Path) -> ContentFile:
    return parse_content(path.read_text(encoding="utf-8"), path)


def count_words(text: str) -> int:
    return len(text.split())


def reading_time(body: str) -> int:
    """Minutes to read ``body`` at 200 words per minute, never less than 1."""
    return max(1, math.ceil(count_words(body) / WORDS_PER_MINUTE))
