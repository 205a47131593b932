"""
Database Session Management

One async engine per process, one AsyncSession per request.

    get_db()
      ├─ open session
      ├─ yield to handler (services / repositories only flush)
      ├─ commit            ← whole request is one transaction, so a toggle's
      │                      DELETE + INSERT is never half-applied
      ├─ rollback on error
      └─ close             ← connection back to the pool

Drivers:
========
    postgresql+asyncpg://...   production, pooled (DATABASE_POOL_SIZE + DATABASE_MAX_OVERFLOW)
    sqlite+aiosqlite:///...    local runs and tests, foreign keys switched on per connection
"""

from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from reelfeed.config.settings import settings
from reelfeed.shared.core.logging import logger


# ═══════════════════════════════════════════════════════════════════════════════
# DATABASE ENGINE
# ═══════════════════════════════════════════════════════════════════════════════


def enable_sqlite_foreign_keys(sync_engine: Engine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores ON DELETE CASCADE unless the pragma is set per connection.
    """

    @event.listens_for(sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, _connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create the async engine for a database URL.

    Pool sizing only applies to server databases; SQLite gets the
    driver's default pool and foreign key enforcement.

    Args:
        database_url: SQLAlchemy async URL

    Returns:
        Configured AsyncEngine
    """
    if database_url.startswith("sqlite"):
        sqlite_engine = create_async_engine(database_url, echo=settings.DEBUG)
        enable_sqlite_foreign_keys(sqlite_engine.sync_engine)
        return sqlite_engine

    return create_async_engine(
        database_url,
        # Log SQL statements if DEBUG mode is enabled
        echo=settings.DEBUG,
        pool_size=settings.DATABASE_POOL_SIZE,
        # Total max = pool_size + max_overflow
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        # Handles stale connections after database restarts
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL)


# ═══════════════════════════════════════════════════════════════════════════════
# SESSION FACTORY
# ═══════════════════════════════════════════════════════════════════════════════
#
# - expire_on_commit=False: Objects remain usable after commit
# - autoflush=False: Repositories flush explicitly

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


# ═══════════════════════════════════════════════════════════════════════════════
# FASTAPI DEPENDENCY: get_db()
# ═══════════════════════════════════════════════════════════════════════════════


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Creates a new session for each request and handles cleanup.

    Yields:
        AsyncSession: Database session for the current request
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()

        except Exception:
            await session.rollback()
            raise

        finally:
            await session.close()


# ═══════════════════════════════════════════════════════════════════════════════
# LIFECYCLE FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════


async def init_db() -> None:
    """
    Verify the database connection on application startup.

    Raises:
        Exception: If database connection fails (prevents app from starting)
    """
    logger.info("Initializing database connection")
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))

        logger.info("Database connection established successfully")

    except Exception as e:
        logger.error("Failed to connect to database", error=str(e))
        raise


async def close_db() -> None:
    """Dispose of the engine, closing all pooled connections."""
    logger.info("Closing database connection")

    await engine.dispose()

    logger.info("Database connection closed successfully")
