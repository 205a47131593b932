"""
Database Module

Database connectivity and session management for Reelfeed.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  Passed to Services → Repositories
        ▼
    UserRepository / VideoRepository / LikeRepository /
    BookmarkRepository / FollowRepository
        │  SQL Queries
        ▼
    PostgreSQL Database

Usage in FastAPI:
=================
    from fastapi import Depends
    from reelfeed.shared.db import get_db

    @app.get("/videos/feed")
    async def feed(db: AsyncSession = Depends(get_db)):
        ...
"""

from reelfeed.shared.db.session import (
    get_db,
    init_db,
    close_db,
    build_engine,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",  # FastAPI dependency for getting a database session
    "init_db",  # Verify database on app startup
    "close_db",  # Close database on app shutdown
    "build_engine",  # Engine factory (also used by tests)
    "AsyncSessionLocal",  # Session factory for manual session creation
    "engine",  # Database engine (for migrations, etc.)
]
