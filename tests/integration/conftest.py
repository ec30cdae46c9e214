"""Integration test fixtures for database operations.

These fixtures require a PostgreSQL database reachable through DATABASE_URL
(or DATABASE_PUBLIC_URL / DATABASE_POOLER_URL). Tests are skipped otherwise.
"""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from src.portfolio.core import db
from src.portfolio.core import redis as redis_core
from src.portfolio.core.config import get_settings
from src.portfolio.core.db.engine import to_async_url
from src.portfolio.seed import create_tables
from tests.utils import truncate_content_tables


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
async def _reset_redis_between_tests() -> AsyncGenerator[None]:
    """Reset Redis state between tests to prevent event loop issues.

    Redis clients hold references to their event loop. When pytest creates
    a new event loop for each test, stale Redis clients cause
    'Event loop is closed' errors.
    """
    redis_core.reset_redis_state()
    yield
    await redis_core.close_redis()


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create test database engine with the content tables in place."""
    await db.dispose_engine()

    url = get_settings().resolved_database_url
    if not url:
        pytest.skip("DATABASE_URL is not set")

    test_engine = create_async_engine(to_async_url(url), poolclass=NullPool)
    await create_tables(test_engine)
    async with test_engine.begin() as conn:
        await truncate_content_tables(conn)

    yield test_engine

    async with test_engine.begin() as conn:
        await truncate_content_tables(conn)
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does not auto-commit; the seeder commits per entity type.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session
