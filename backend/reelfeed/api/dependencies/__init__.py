"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser
- Pagination: get_feed_params(), FeedParams
- Services: get_*_service() functions

Usage:
======
    from reelfeed.api.dependencies import CurrentUser

    @router.get("/me")
    async def me(current_user: CurrentUser):
        ...
"""

from reelfeed.api.dependencies.database import (
    get_db,
    DbSession,
)
from reelfeed.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    CurrentUser,
)
from reelfeed.api.dependencies.pagination import (
    get_feed_params,
    FeedParams,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "CurrentUser",
    # Pagination
    "get_feed_params",
    "FeedParams",
]
