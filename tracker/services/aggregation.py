"""Read-only dashboard aggregations over visitors, page views and votes.

Definitions used by the dashboard:

- a *day* is the calendar date of ``viewed_at``; ``avgPerDay`` divides by the
  number of days that have at least one view.
- a *session* is every view of one visitor on one day; its duration is the
  time between the first and last view.
- a visitor *bounced* when they have exactly one page view. ``bounceRate`` is
  the bounced share of unique visitors, in percent.

Every ratio is rounded to two decimals and is 0 when its denominator is 0.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.models.page_view import PageView
from tracker.models.visitor import Visitor
from tracker.models.vote import Vote
from tracker.schemas.analytics import (
    AggregatedVisitorInfo,
    CountItem,
    DailyPageViews,
    PageViewStats,
    PageViewsResponse,
    VoteStats,
)


def _ratio(numerator: float, denominator: float) -> float:
    if not denominator:
        return 0
    return round(numerator / denominator, 2)


async def _scalar(db: AsyncSession, stmt) -> int:
    return (await db.execute(stmt)).scalar() or 0


async def get_page_views(db: AsyncSession) -> PageViewsResponse:
    day = func.date(PageView.viewed_at)

    total = await _scalar(db, select(func.count(PageView.id)))
    unique = await _scalar(db, select(func.count(func.distinct(PageView.visitor_id))))

    daily_rows = await db.execute(
        select(
            day.label("day"),
            func.count(PageView.id),
            func.count(func.distinct(PageView.visitor_id)),
        )
        .group_by(day)
        .order_by(day)
    )
    # date() comes back as a date on PostgreSQL and as text on SQLite
    daily = [
        DailyPageViews(date=str(d), views=views, unique=visitors)
        for d, views, visitors in daily_rows.all()
    ]

    session_rows = await db.execute(
        select(func.min(PageView.viewed_at), func.max(PageView.viewed_at)).group_by(
            PageView.visitor_id, day
        )
    )
    session_minutes = [
        (last - first).total_seconds() / 60 for first, last in session_rows.all()
    ]

    views_per_visitor = (
        select(func.count(PageView.id).label("views"))
        .group_by(PageView.visitor_id)
        .subquery()
    )
    bounced = await _scalar(
        db, select(func.count()).select_from(views_per_visitor).where(views_per_visitor.c.views == 1)
    )

    route_count = func.count(PageView.id).label("value")
    route_rows = await db.execute(
        select(PageView.route, route_count)
        .group_by(PageView.route)
        .order_by(route_count.desc(), PageView.route)
    )

    stats = PageViewStats(
        total=total,
        unique=unique,
        avg_per_day=_ratio(total, len(daily)),
        views_per_visit=_ratio(total, unique),
        duration=_ratio(sum(session_minutes), len(session_minutes)),
        bounce_rate=_ratio(100 * bounced, unique),
    )
    return PageViewsResponse(
        stats=stats,
        daily=daily,
        routes=[CountItem(name=name, value=value) for name, value in route_rows.all()],
    )


async def get_votes(db: AsyncSession) -> VoteStats:
    row = (
        await db.execute(
            select(
                func.count(Vote.id),
                func.count(func.distinct(func.date(Vote.created_at))),
                func.avg(Vote.amount_of_estimations),
                func.avg(Vote.amount_of_spectators),
                func.avg(Vote.min_estimation),
                func.avg(Vote.avg_estimation),
                func.avg(Vote.max_estimation),
                func.avg(Vote.duration),
            )
        )
    ).one()
    total, days, estimations, spectators, lowest, average, highest, duration = row
    visitors = await _scalar(db, select(func.count(Visitor.id)))

    def avg(value) -> float:
        # AVG is NUMERIC on PostgreSQL
        return round(float(value), 2) if value is not None else 0

    return VoteStats(
        total_votes=total,
        votes_per_day=_ratio(total, days),
        votes_per_visitor=_ratio(total, visitors),
        amount_of_votes=avg(estimations),
        amount_of_spectators=avg(spectators),
        lowest_vote_avg=avg(lowest),
        vote_avg=avg(average),
        highest_vote_avg=avg(highest),
        duration=avg(duration),
    )


async def _count_visitors_by(db: AsyncSession, column) -> list[CountItem]:
    value = func.count(Visitor.id).label("value")
    result = await db.execute(
        select(column, value)
        .where(column.is_not(None))
        .group_by(column)
        .order_by(value.desc(), column)
    )
    return [CountItem(name=name, value=count) for name, count in result.all()]


async def get_aggregated_visitor_info(db: AsyncSession) -> AggregatedVisitorInfo:
    return AggregatedVisitorInfo(
        country_counts=await _count_visitors_by(db, Visitor.country),
        region_counts=await _count_visitors_by(db, Visitor.region),
        city_counts=await _count_visitors_by(db, Visitor.city),
        os_counts=await _count_visitors_by(db, Visitor.os),
        device_counts=await _count_visitors_by(db, Visitor.device),
        browser_counts=await _count_visitors_by(db, Visitor.browser),
    )
