from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from tracker.core.config import settings


def engine_connect_args(database_url: str) -> dict:
    """Pin PostgreSQL sessions to UTC so date() buckets are UTC calendar days."""
    if make_url(database_url).get_driver_name() == "asyncpg":
        return {"server_settings": {"timezone": "UTC"}}
    return {}


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    connect_args=engine_connect_args(settings.DATABASE_URL),
)

async_session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
