"""Build the static search index.

Usage: python -m src.portfolio.search [--output search-index.json]
"""

import argparse
import asyncio
import sys

from src.portfolio.core.config import get_settings
from src.portfolio.core.db import dispose_engine
from src.portfolio.core.exceptions import ContentError
from src.portfolio.core.logging import get_logger, setup_logging
from src.portfolio.repositories.content import build_content_repository
from src.portfolio.search.index import write_search_index

logger = get_logger(__name__)


async def run(output: str) -> int:
    settings = get_settings()
    repository = build_content_repository(settings)
    try:
        return await write_search_index(repository, output)
    finally:
        await dispose_engine()


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Build the static search index.")
    parser.add_argument("--output", default=settings.search_index_path)
    args = parser.parse_args(argv)

    setup_logging(settings.debug)
    try:
        asyncio.run(run(args.output))
    except ContentError as e:
        logger.error("Search index build failed", error=str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
