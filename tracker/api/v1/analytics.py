"""Dashboard aggregation endpoints, served through the Redis analytics cache.

GET    /analytics/page-views
GET    /analytics/votes
GET    /analytics/visitors
DELETE /analytics/cache
"""

from fastapi import APIRouter, Depends, Response
from redis.exceptions import RedisError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.dependencies import get_analytics_cache, get_db
from tracker.core.exceptions import ProblemDetailError
from tracker.schemas.analytics import AggregatedVisitorInfo, PageViewsResponse, VoteStats
from tracker.services import aggregation
from tracker.services.cache import PAGE_VIEWS_KEY, VISITORS_KEY, VOTES_KEY, AnalyticsCache

router = APIRouter()


@router.get("/page-views", response_model=PageViewsResponse)
async def get_page_views(
    db: AsyncSession = Depends(get_db),
    cache: AnalyticsCache = Depends(get_analytics_cache),
) -> PageViewsResponse:
    return await cache.get_or_compute(
        PAGE_VIEWS_KEY, PageViewsResponse, lambda: aggregation.get_page_views(db)
    )


@router.get("/votes", response_model=VoteStats)
async def get_votes(
    db: AsyncSession = Depends(get_db),
    cache: AnalyticsCache = Depends(get_analytics_cache),
) -> VoteStats:
    return await cache.get_or_compute(VOTES_KEY, VoteStats, lambda: aggregation.get_votes(db))


@router.get("/visitors", response_model=AggregatedVisitorInfo)
async def get_aggregated_visitor_info(
    db: AsyncSession = Depends(get_db),
    cache: AnalyticsCache = Depends(get_analytics_cache),
) -> AggregatedVisitorInfo:
    return await cache.get_or_compute(
        VISITORS_KEY,
        AggregatedVisitorInfo,
        lambda: aggregation.get_aggregated_visitor_info(db),
    )


@router.delete("/cache", status_code=204)
async def invalidate_cache(cache: AnalyticsCache = Depends(get_analytics_cache)) -> Response:
    """Drop cached aggregations so the next read recomputes them."""
    try:
        await cache.invalidate()
    except RedisError as exc:
        raise ProblemDetailError(
            status=503,
            title="Service Unavailable",
            detail="Analytics cache is unreachable",
            error="CacheUnavailable",
        ) from exc
    return Response(status_code=204)
