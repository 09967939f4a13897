"""Health check endpoint."""

import logging

import redis.asyncio as aioredis
from fastapi import APIRouter, Depends
from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from tracker import __version__
from tracker.core.dependencies import get_redis
from tracker.db.session import engine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(redis: aioredis.Redis = Depends(get_redis)):
    """Check DB and Redis connectivity."""
    db_status = "ok"
    redis_status = "ok"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("Health check: database unreachable: %s", exc)
        db_status = "error"

    try:
        await redis.ping()
    except (RedisError, OSError) as exc:
        logger.warning("Health check: redis unreachable: %s", exc)
        redis_status = "error"

    status = "ok" if db_status == "ok" and redis_status == "ok" else "degraded"
    return {
        "status": status,
        "db": db_status,
        "redis": redis_status,
        "version": __version__,
    }
