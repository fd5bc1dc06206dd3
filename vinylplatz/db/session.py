"""
Async database session management.
Challenge: Connection pooling, request-scoped sessions, proper cleanup.
Design: get_db gives each request one unit of work (commit on success, rollback on error);
session_scope gives the same guarantee to code outside a request (startup seed, scripts).
Cache keys queued during the unit of work are dropped after the commit, never before.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from vinylplatz.cache.redis_client import discard_invalidations, flush_invalidations
from vinylplatz.config import get_settings

settings = get_settings()


def build_engine(url: str) -> AsyncEngine:
    if url.startswith("sqlite"):
        engine = create_async_engine(url, echo=settings.debug)

        # Favorites cascade and genre SET NULL rely on FK enforcement
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine
    return create_async_engine(
        url, echo=settings.debug, pool_pre_ping=True, pool_size=10, max_overflow=20
    )


engine = build_engine(settings.database_url)

# Session factory: one session per unit of work
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            discard_invalidations(session)
            raise
        await flush_invalidations(session)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session per request."""
    async with session_scope() as session:
        yield session


# Type alias for FastAPI dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
