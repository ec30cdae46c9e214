"""Shared Redis client for the content cache.

Redis is optional. Without REDIS_URL, or while the server is unreachable,
``get_redis()`` returns None and the content cache keeps entries in process
memory instead. A failed connection is retried at most once per
``REDIS_RETRY_INTERVAL`` seconds so an outage does not add a connect timeout
to every request.
"""

import time
from collections.abc import Callable

from redis.asyncio import ConnectionPool, Redis

from src.portfolio.core.config import get_settings
from src.portfolio.core.logging import get_logger

logger = get_logger(__name__)

_pool: ConnectionPool | None = None
_client: Redis | None = None
_retry_after: float = 0.0
_not_configured_logged = False
_clock: Callable[[], float] = time.monotonic


async def _connect(url: str, pool_size: int) -> Redis:
    pool = ConnectionPool.from_url(url, max_connections=pool_size)
    client = Redis(connection_pool=pool)
    try:
        await client.ping()  # type: ignore[misc]
    except Exception:
        await client.aclose()
        await pool.disconnect()
        raise

    global _pool
    _pool = pool
    return client


async def get_redis() -> Redis | None:
    """Return the shared client, connecting lazily; None when unavailable."""
    global _client, _retry_after, _not_configured_logged

    if _client is not None:
        return _client

    settings = get_settings()
    if not settings.redis_url:
        if not _not_configured_logged:
            logger.info("Redis not configured (REDIS_URL not set), caching in memory")
            _not_configured_logged = True
        return None

    now = _clock()
    if now < _retry_after:
        return None

    try:
        _client = await _connect(settings.redis_url, settings.redis_pool_size)
    except Exception as e:
        _retry_after = now + settings.redis_retry_interval
        logger.warning(
            "Redis unavailable, caching in memory",
            error=str(e),
            retry_in_seconds=settings.redis_retry_interval,
        )
        return None

    logger.info("Redis connected")
    return _client


async def mark_redis_unavailable(error: Exception) -> None:
    """Drop the shared client after a failed command and start the retry backoff."""
    global _pool, _client, _retry_after

    client, pool = _client, _pool
    _client = None
    _pool = None

    settings = get_settings()
    _retry_after = _clock() + settings.redis_retry_interval
    logger.warning(
        "Redis command failed, caching in memory",
        error=str(error),
        retry_in_seconds=settings.redis_retry_interval,
    )

    if client is not None:
        await client.aclose()
    if pool is not None:
        await pool.disconnect()


async def close_redis() -> None:
    """Close the client and its pool. Called during application shutdown."""
    if _client is not None:
        await _client.aclose()
        logger.info("Redis connection closed")
    if _pool is not None:
        await _pool.disconnect()
    reset_redis_state()


def reset_redis_state() -> None:
    """Forget the client and any retry backoff (for tests)."""
    global _pool, _client, _retry_after, _not_configured_logged
    _pool = None
    _client = None
    _retry_after = 0.0
    _not_configured_logged = False
