"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /auth                   → Authentication (register, login)
    /users                  → Session lookup, follow toggles
    /videos                 → Publishing, feed, like/bookmark toggles

Usage:
======
    from reelfeed.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from reelfeed.api.handlers import (
    auth_handler,
    health_handler,
    user_handler,
    video_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
    )

    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
    )

    app.include_router(
        video_handler.router,
        prefix="/videos",
        tags=["Videos"],
    )
