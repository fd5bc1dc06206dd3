"""
Pytest fixtures - test DB, client, auth (TDD/BDD support).
Challenge: Isolated tests; every test gets a fresh in-memory database.
"""

import os

# Settings are read at import time; configure before the app is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("CACHE_ENABLED", "false")
os.environ.setdefault("RUN_SEED", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")

from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from vinylplatz.cache.redis_client import discard_invalidations, flush_invalidations
from vinylplatz.core.security import create_access_token
from vinylplatz.db.base import Base
from vinylplatz.db.models import Genre, User, UserRole, Vinyl, VinylCondition
from vinylplatz.db.session import get_db
from vinylplatz.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite://"
PASSWORD = "password123"


def enable_sqlite_foreign_keys(engine) -> None:
    """SQLite ignores ON DELETE rules unless the pragma is on for each connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        # The shared session never commits; queued cache drops run as if it had
        try:
            yield session
        except Exception:
            discard_invalidations(session)
            raise
        await flush_invalidations(session)

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def make_user(
    session: AsyncSession, email: str, name: str = "Test User", role: UserRole = UserRole.USER
) -> User:
    user = User(name=name, email=email, role=role)
    user.password = PASSWORD
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


async def make_vinyl(session: AsyncSession, seller: User, **overrides) -> Vinyl:
    fields = {
        "title": "Kind of Blue",
        "artist": "Miles Davis",
        "release_year": 1959,
        "condition": VinylCondition.GOOD,
        "price": Decimal("40.00"),
    }
    fields.update(overrides)
    vinyl = Vinyl(seller_id=seller.id, **fields)
    session.add(vinyl)
    await session.flush()
    await session.refresh(vinyl)
    return vinyl


def bearer(user: User) -> dict:
    token = create_access_token(user.id, user.email, user.role.value)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def test_user(session: AsyncSession) -> User:
    return await make_user(session, "test@example.com")


@pytest_asyncio.fixture
async def other_user(session: AsyncSession) -> User:
    return await make_user(session, "buyer@example.com", name="Buyer")


@pytest_asyncio.fixture
async def admin_user(session: AsyncSession) -> User:
    return await make_user(session, "admin@example.com", name="Admin", role=UserRole.ADMIN)


@pytest_asyncio.fixture
async def auth_headers(test_user: User) -> dict:
    return bearer(test_user)


@pytest_asyncio.fixture
async def other_headers(other_user: User) -> dict:
    return bearer(other_user)


@pytest_asyncio.fixture
async def admin_headers(admin_user: User) -> dict:
    return bearer(admin_user)


@pytest_asyncio.fixture
async def genre(session: AsyncSession) -> Genre:
    genre = Genre(name="Jazz", description="Swing and bop")
    session.add(genre)
    await session.flush()
    await session.refresh(genre)
    return genre


@pytest_asyncio.fixture
async def vinyl(session: AsyncSession, test_user: User, genre: Genre) -> Vinyl:
    return await make_vinyl(session, test_user, genre_id=genre.id)


@pytest.fixture
def user_factory(session: AsyncSession):
    async def _make(email: str, **kwargs) -> User:
        return await make_user(session, email, **kwargs)

    return _make


@pytest.fixture
def vinyl_factory(session: AsyncSession):
    async def _make(seller: User, **overrides) -> Vinyl:
        return await make_vinyl(session, seller, **overrides)

    return _make


@pytest.fixture
def headers_for():
    return bearer
