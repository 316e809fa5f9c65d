# carrental/db/session.py
"""
Async engine and request-scoped sessions for the car/booking tables.

SQLite (the default) and MySQL need different engine options, so the engine
is built through make_engine() rather than straight from the URL.
"""
from collections.abc import AsyncGenerator
from typing import Any, Dict

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from carrental.core.config import settings


def engine_options(database_url: str) -> Dict[str, Any]:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        # aiosqlite hands the connection to its own worker thread
        return {"connect_args": {"check_same_thread": False}}
    # server databases drop idle connections
    return {"pool_pre_ping": True, "pool_recycle": 3600}


def make_engine(database_url: str, **overrides: Any) -> AsyncEngine:
    options = engine_options(database_url)
    options.update(overrides)
    return create_async_engine(database_url, echo=False, **options)


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # handlers read attributes after commit when building responses
    return async_sessionmaker(bind=bind, expire_on_commit=False)


engine = make_engine(settings.DATABASE_URL)
AsyncSessionLocal = make_session_factory(engine)


# FastAPI dependency: one session per request, never shared between requests
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
