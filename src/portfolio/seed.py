"""Seed the database from the static content collection.

Usage: python -m src.portfolio.seed [--content-dir content] [--create-tables]

Every record is upserted by its natural key, so the job is safe to re-run.
Each entity type is committed on its own: if a later type fails the run
aborts, and the types already written stay written.
"""

import argparse
import asyncio
import sys
from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass
from typing import Any
from uuid import uuid4

from pydantic import BaseModel
from sqlalchemy import delete
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlmodel import SQLModel

from src.portfolio.content.collection import StaticContentCollection, load_collection
from src.portfolio.core.config import get_settings
from src.portfolio.core.db import create_engine_from_settings, get_session
from src.portfolio.core.exceptions import SeedError
from src.portfolio.core.logging import get_logger, setup_logging
from src.portfolio.data.certifications import CERTIFICATIONS
from src.portfolio.models import (
    AboutContentRecord,
    BlogPostRecord,
    CertificationRecord,
    ExperienceRecord,
    NowContentRecord,
    ProjectRecord,
    SkillRecord,
    UsesContentRecord,
)
from src.portfolio.models.base import utc_now
from src.portfolio.schemas.content import Certification

logger = get_logger(__name__)


@dataclass
class SeedSummary:
    projects: int = 0
    experiences: int = 0
    blog_posts: int = 0
    skills: int = 0
    now: int = 0
    about: int = 0
    uses: int = 0
    certifications: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


async def upsert_records(
    session: AsyncSession,
    model: type[SQLModel],
    items: Iterable[BaseModel],
    conflict_columns: Sequence[str],
) -> int:
    """Insert-or-update each item by its natural key. Returns the item count."""
    count = 0
    for item in items:
        values: dict[str, Any] = item.model_dump()
        now = utc_now()
        stmt = insert(model).values(id=uuid4(), created_at=now, updated_at=now, **values)
        update = {key: stmt.excluded[key] for key in values if key not in conflict_columns}
        update["updated_at"] = now
        await session.execute(
            stmt.on_conflict_do_update(index_elements=list(conflict_columns), set_=update)
        )
        count += 1
    return count


async def replace_singleton(
    session: AsyncSession,
    model: type[SQLModel],
    item: BaseModel | None,
) -> int:
    """Replace the single live row of a singleton table."""
    await session.execute(delete(model))
    if item is None:
        return 0
    session.add(model(**item.model_dump()))
    return 1


async def seed_database(
    session: AsyncSession,
    collection: StaticContentCollection,
    certifications: Sequence[Certification] = CERTIFICATIONS,
) -> SeedSummary:
    """Write the whole collection to the database.

    Raises:
        SeedError: If any entity type fails to seed.
    """
    summary = SeedSummary()
    steps = [
        (
            "projects",
            lambda: upsert_records(session, ProjectRecord, collection.projects, ["slug"]),
        ),
        (
            "experiences",
            lambda: upsert_records(
                session,
                ExperienceRecord,
                collection.experiences,
                ["company", "role", "start_date"],
            ),
        ),
        (
            "blog_posts",
            lambda: upsert_records(session, BlogPostRecord, collection.blog, ["slug"]),
        ),
        (
            "skills",
            lambda: upsert_records(session, SkillRecord, collection.skills, ["name"]),
        ),
        ("now", lambda: replace_singleton(session, NowContentRecord, collection.now)),
        ("about", lambda: replace_singleton(session, AboutContentRecord, collection.about)),
        ("uses", lambda: replace_singleton(session, UsesContentRecord, collection.uses)),
        (
            "certifications",
            lambda: upsert_records(session, CertificationRecord, certifications, ["abbreviation"]),
        ),
    ]

    for name, step in steps:
        logger.info("Seeding", entity=name)
        try:
            count = await step()
            await session.commit()
        except Exception as e:
            await session.rollback()
            logger.error("Seeding failed", entity=name, error=str(e))
            raise SeedError(f"Seeding {name} failed: {e}") from e
        setattr(summary, name, count)
        logger.info("Seeded", entity=name, count=count)

    logger.info("Database seeded", **summary.as_dict())
    return summary


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def run(content_dir: str, with_tables: bool) -> SeedSummary:
    settings = get_settings()
    collection = load_collection(content_dir)
    engine = create_engine_from_settings(settings)
    try:
        if with_tables:
            await create_tables(engine)
        async with get_session(engine) as session:
            return await seed_database(session, collection)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Seed the database from static content.")
    parser.add_argument("--content-dir", default=settings.content_dir)
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing content tables before seeding",
    )
    args = parser.parse_args(argv)

    setup_logging(settings.debug)
    try:
        asyncio.run(run(args.content_dir, args.create_tables))
    except Exception as e:
        logger.exception("Seed failed", error=str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
