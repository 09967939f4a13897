"""Redis cache for dashboard aggregations (TTL expiry + explicit invalidation)."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from pydantic import BaseModel
from redis.asyncio import Redis
from redis.exceptions import RedisError

from tracker.core.config import settings

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

PAGE_VIEWS_KEY = "page-views"
VOTES_KEY = "votes"
VISITORS_KEY = "visitors"
CACHED_QUERIES = (PAGE_VIEWS_KEY, VOTES_KEY, VISITORS_KEY)


class AnalyticsCache:
    """Stores each aggregation as JSON under ``{prefix}:{name}``.

    A Redis outage never fails a dashboard read: errors are logged and the
    value is computed directly.
    """

    def __init__(
        self,
        redis: Redis,
        ttl: int = settings.ANALYTICS_CACHE_TTL,
        prefix: str = settings.ANALYTICS_CACHE_PREFIX,
    ):
        self.redis = redis
        self.ttl = ttl
        self.prefix = prefix

    def key(self, name: str) -> str:
        return f"{self.prefix}:{name}"

    async def get_or_compute(
        self,
        name: str,
        model: type[M],
        compute: Callable[[], Awaitable[M]],
    ) -> M:
        key = self.key(name)
        try:
            cached = await self.redis.get(key)
        except RedisError as exc:
            logger.warning("Analytics cache read failed for %s: %s", key, exc)
            cached = None

        if cached is not None:
            return model.model_validate_json(cached)

        value = await compute()
        try:
            await self.redis.set(key, value.model_dump_json(by_alias=True), ex=self.ttl)
        except RedisError as exc:
            logger.warning("Analytics cache write failed for %s: %s", key, exc)
        return value

    async def invalidate(self) -> int:
        """Drop every cached aggregation. Returns the number of keys removed."""
        removed = await self.redis.delete(*(self.key(name) for name in CACHED_QUERIES))
        logger.info("Invalidated %d analytics cache entries", removed)
        return removed
