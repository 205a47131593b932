"""
Database Dependency

FastAPI dependency for database sessions.

Tests swap the database by overriding this dependency:

    app.dependency_overrides[get_db] = override_get_db

Usage:
======
    from reelfeed.api.dependencies.database import DbSession

    @router.get("/videos/feed")
    async def feed(db: DbSession):
        ...
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from reelfeed.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield an async database session for the duration of the request.

    Committed on success, rolled back on exception, closed afterwards.
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
