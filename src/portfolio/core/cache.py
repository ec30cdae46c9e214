"""Time-boxed read cache for content queries.

Entries live in Redis when it is reachable and in process memory otherwise.
They expire after a fixed TTL and are never invalidated early: content is
read-only at request time and a short staleness window is acceptable.
"""

import time
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from pydantic import TypeAdapter
from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.portfolio.core.logging import get_logger
from src.portfolio.core.redis import get_redis, mark_redis_unavailable

logger = get_logger(__name__)

T = TypeVar("T")

PREFIX_CONTENT = "content"

RedisGetter = Callable[[], Awaitable[Redis | None]]
RedisErrorHandler = Callable[[Exception], Awaitable[None]]


class ContentCache:
    """Cache of serialized query results keyed by logical query name.

    A Redis command that fails mid-request is reported to ``on_redis_error``
    and the entry is kept in memory instead. Expired in-memory entries are
    swept on every write, so the store only holds live keys.

    Args:
        ttl: Seconds an entry stays valid. ``0`` or less disables caching.
        redis_getter: Coroutine returning a Redis client or None.
        clock: Monotonic time source for in-memory expiry (overridable in tests).
        on_redis_error: Coroutine called with the error when a Redis command fails.
    """

    def __init__(
        self,
        ttl: int,
        redis_getter: RedisGetter | None = None,
        clock: Callable[[], float] = time.monotonic,
        on_redis_error: RedisErrorHandler | None = None,
    ):
        self.ttl = ttl
        self._redis_getter = redis_getter or get_redis
        self._on_redis_error = on_redis_error or mark_redis_unavailable
        self._clock = clock
        self._memory: dict[str, tuple[float, bytes]] = {}

    @property
    def enabled(self) -> bool:
        return self.ttl > 0

    async def get_or_load(
        self,
        key: str,
        loader: Callable[[], Awaitable[T]],
        adapter: TypeAdapter[T],
    ) -> T:
        """Return the cached value for ``key`` or load, store and return it."""
        if not self.enabled:
            return await loader()

        full_key = f"{PREFIX_CONTENT}:{key}"
        cached = await self._get(full_key)
        if cached is not None:
            return adapter.validate_json(cached)

        logger.debug("Content cache miss", key=key)
        value = await loader()
        await self._set(full_key, adapter.dump_json(value))
        return value

    async def clear(self) -> None:
        """Drop in-memory entries (Redis entries expire on their own)."""
        self._memory.clear()

    async def _get(self, key: str) -> str | bytes | None:
        redis = await self._redis_getter()
        if redis is not None:
            try:
                return await redis.get(key)
            except RedisError as e:
                await self._on_redis_error(e)

        entry = self._memory.get(key)
        if entry is None:
            return None
        expires_at, payload = entry
        if self._clock() >= expires_at:
            del self._memory[key]
            return None
        return payload

    async def _set(self, key: str, payload: bytes) -> None:
        redis = await self._redis_getter()
        if redis is not None:
            try:
                await redis.setex(key, self.ttl, payload)
                return
            except RedisError as e:
                await self._on_redis_error(e)

        now = self._clock()
        self._sweep(now)
        self._memory[key] = (now + self.ttl, payload)

    def _sweep(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self._memory.items() if now >= expires_at]
        for key in expired:
            del self._memory[key]


def cache_key(name: str, *args: Any) -> str:
    """Build a cache key from a query name and its arguments."""
    if not args:
        return name
    return ":".join([name, *(str(arg) for arg in args)])
