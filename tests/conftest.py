"""Shared test fixtures."""

import os
from collections.abc import AsyncGenerator

import pytest
from fakeredis import FakeAsyncRedis
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Tests run against in-memory SQLite and fakeredis, never the configured servers
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ["GEOIP_DB_PATH"] = ""

import tracker.models  # noqa: E402,F401
from tracker.core.dependencies import get_db, get_redis  # noqa: E402
from tracker.db.base import Base  # noqa: E402
from tracker.main import app  # noqa: E402


def _make_engine() -> AsyncEngine:
    return create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database per test, schema created from the models."""
    engine = _make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for seeding and asserting. Seed helpers commit before the app reads."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def redis() -> AsyncGenerator[FakeAsyncRedis, None]:
    r = FakeAsyncRedis()
    yield r
    await r.flushall()
    await r.aclose()


def _override_get_db(factory: async_sessionmaker[AsyncSession]):
    async def _get_db() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return _get_db


@pytest.fixture
async def client(session_factory, redis) -> AsyncGenerator[AsyncClient, None]:
    """HTTP test client for the FastAPI app.

    Overrides get_db / get_redis so route handlers use the per-test SQLite
    database and fakeredis instance.
    """
    app.dependency_overrides[get_db] = _override_get_db(session_factory)
    app.dependency_overrides[get_redis] = lambda: redis
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def broken_store_client(redis) -> AsyncGenerator[AsyncClient, None]:
    """Client whose database has no tables, so every store call fails."""
    engine = _make_engine()
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    app.dependency_overrides[get_db] = _override_get_db(factory)
    app.dependency_overrides[get_redis] = lambda: redis
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
    finally:
        app.dependency_overrides.clear()
        await engine.dispose()
