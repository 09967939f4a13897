"""FastAPI dependencies: DB session, Redis client, analytics cache."""

from collections.abc import AsyncGenerator
from functools import lru_cache

import redis.asyncio as aioredis
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.config import settings
from tracker.db.session import async_session_factory
from tracker.services.cache import AnalyticsCache


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session. Commits on success, rolls back on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@lru_cache(maxsize=1)
def get_redis_client() -> aioredis.Redis:
    """Process-wide connection pool; connections open lazily on first command."""
    return aioredis.from_url(settings.REDIS_URL)


async def get_redis() -> aioredis.Redis:
    return get_redis_client()


async def get_analytics_cache(redis: aioredis.Redis = Depends(get_redis)) -> AnalyticsCache:
    return AnalyticsCache(redis)
