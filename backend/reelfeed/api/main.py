"""
Reelfeed API Application Entry Point

Request path:
=============
    client ──► CORS ──► router ──► handler ──► service ──► repository ──► PostgreSQL
                          │            ▲
                          │            └── CurrentUser, DbSession, FeedParams (dependencies)
                          └── ReelfeedException / validation errors ──► JSON error envelope

Lifespan:
=========
    startup   → SELECT 1 against DATABASE_URL (refuse to start without a database)
    shutdown  → dispose the connection pool

Usage:
======
    uvicorn reelfeed.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or, with HOST/PORT from settings
    python -m reelfeed.api.main
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reelfeed.config.settings import settings
from reelfeed.shared.db import init_db, close_db
from reelfeed.shared.core.logging import logger
from reelfeed.api.middleware import setup_exception_handlers
from reelfeed.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup verifies the database connection, shutdown disposes the pool.
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Reelfeed API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()

    logger.info("Reelfeed API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Reelfeed API")

    await close_db()

    logger.info("Reelfeed API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Short-video social feed",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    # Credentials are allowed so the auth cookie travels cross-origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "reelfeed.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
    )
