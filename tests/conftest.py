"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set APP_ENV before any app imports; static content is the default source
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_CONTENT_ENABLED", "false")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fakeredis import aioredis as fakeredis_aio
from httpx import ASGITransport, AsyncClient
from redis.asyncio import Redis

from src.portfolio.content.collection import StaticContentCollection
from src.portfolio.core import redis as redis_core
from src.portfolio.core.config import Settings, get_settings
from src.portfolio.core.health import reset_health_cache
from src.portfolio.main import create_app
from src.portfolio.repositories.content import StaticContentRepository
from src.portfolio.search.index import StaticSearchIndex, build_search_documents
from tests.factories import sample_collection
from tests.helpers import write_content_tree

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


# --- Redis Test Fixtures (shared) ---


@pytest.fixture
async def fake_redis() -> AsyncGenerator[Redis]:
    """Provides a fakeredis client for testing.

    Returns an in-memory Redis implementation that behaves like
    a real Redis server but doesn't require external dependencies.
    """
    client = fakeredis_aio.FakeRedis()
    yield client
    await client.aclose()


@pytest.fixture
async def mock_redis(fake_redis: Redis, monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[Redis]:
    """Patches get_redis() to return fakeredis client."""
    redis_core.reset_redis_state()

    async def _get_fake_redis() -> Redis:
        return fake_redis

    monkeypatch.setattr("src.portfolio.core.redis.get_redis", _get_fake_redis)
    monkeypatch.setattr("src.portfolio.core.health.get_redis", _get_fake_redis)
    yield fake_redis
    redis_core.reset_redis_state()


@pytest.fixture
async def mock_redis_unavailable(monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[None]:
    """Patches get_redis() to return None (simulates Redis unavailable)."""
    redis_core.reset_redis_state()

    async def _get_none() -> None:
        return None

    monkeypatch.setattr("src.portfolio.core.redis.get_redis", _get_none)
    monkeypatch.setattr("src.portfolio.core.health.get_redis", _get_none)
    yield
    redis_core.reset_redis_state()


# --- Content Fixtures ---


@pytest.fixture
def collection() -> StaticContentCollection:
    """A small, fully populated static collection."""
    return sample_collection()


@pytest.fixture
def static_repo(collection: StaticContentCollection) -> StaticContentRepository:
    return StaticContentRepository(collection)


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """A content tree on disk with one file of every kind."""
    return write_content_tree(tmp_path / "content")


@pytest.fixture
def test_settings(content_dir: Path, tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        app_env="testing",
        database_content_enabled=False,
        content_dir=str(content_dir),
        search_index_path=str(tmp_path / "missing-index.json"),
        site_url="https://example.com",
    )


# --- HTTP Client Fixtures ---


@pytest.fixture
async def client(
    test_settings: Settings,
    static_repo: StaticContentRepository,
    mock_redis_unavailable: None,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client over an app serving the sample collection.

    ASGITransport does not run the lifespan, so the repository and the search
    index are injected directly.
    """
    reset_health_cache()
    index = StaticSearchIndex(await build_search_documents(static_repo))
    app = create_app(test_settings, repository=static_repo, search_index=index)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    reset_health_cache()
