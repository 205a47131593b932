"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database (aiosqlite, one shared
connection through StaticPool) with the full schema created from the models.
API tests talk to the real FastAPI app over httpx's ASGI transport with
get_db overridden to use that database.
"""

import os

# Must be set before reelfeed.config is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from reelfeed.api.dependencies.database import get_db
from reelfeed.api.main import app
from reelfeed.shared.db.session import enable_sqlite_foreign_keys
from reelfeed.shared.models import Base, User, Video
from reelfeed.shared.repositories import UserRepository, VideoRepository
from tests.helpers import minutes_after_base, password_hash


# ═══════════════════════════════════════════════════════════════════════════════
# DATABASE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest_asyncio.fixture
async def engine():
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine.sync_engine)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ═══════════════════════════════════════════════════════════════════════════════
# FACTORIES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def make_user(db):
    async def _make_user(display_name: str, name: Optional[str] = None) -> User:
        return await UserRepository(db).create(
            email=f"{display_name}@example.com",
            name=name or display_name.title(),
            display_name=display_name,
            password_hash=password_hash(),
        )

    return _make_user


@pytest.fixture
def make_video(db):
    async def _make_video(
        owner: User,
        minutes: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Video:
        return await VideoRepository(db).create(
            user_id=owner.id,
            title=title or f"Video {minutes}",
            description=description,
            video_url=f"https://media.example.com/{owner.display_name}/{minutes}.mp4",
            created_at=minutes_after_base(minutes),
        )

    return _make_video


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP CLIENT
# ═══════════════════════════════════════════════════════════════════════════════


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
