"""Seeding helpers and sample user agents for tracker tests."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.models.page_view import PageView
from tracker.models.visitor import Visitor
from tracker.models.vote import Vote

CHROME_WINDOWS_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
SAFARI_IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)


async def count_rows(db: AsyncSession, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


async def seed_visitor(db: AsyncSession, **fields) -> Visitor:
    visitor = Visitor(id=fields.pop("id", uuid.uuid4()), **fields)
    db.add(visitor)
    await db.commit()
    return visitor


async def seed_page_view(
    db: AsyncSession,
    visitor: Visitor,
    viewed_at: datetime,
    route: str = "HOME",
    room: str | None = None,
) -> PageView:
    page_view = PageView(visitor_id=visitor.id, route=route, room=room, viewed_at=viewed_at)
    db.add(page_view)
    await db.commit()
    return page_view


async def seed_vote(db: AsyncSession, created_at: datetime | None = None, **fields) -> Vote:
    defaults = {
        "room": "planning",
        "avg_estimation": 5.0,
        "min_estimation": 3.0,
        "max_estimation": 8.0,
        "amount_of_estimations": 4,
        "amount_of_spectators": 1,
        "duration": 120,
    }
    defaults.update(fields)
    vote = Vote(created_at=created_at or datetime.now(UTC), **defaults)
    db.add(vote)
    await db.commit()
    return vote
