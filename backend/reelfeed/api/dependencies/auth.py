"""
Authentication Dependencies

FastAPI dependencies for user authentication.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract JWT from header or cookie and validate it
           │
           ▼
    get_current_user()        ← Turn the payload into {"user_id": UUID, "email": str}

Credentials are read from, in order:
    1. Authorization: Bearer <token>
    2. the auth cookie set by /auth/login (AUTH_COOKIE_NAME)

Usage:
======
    from reelfeed.api.dependencies.auth import CurrentUser

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return current_user["user_id"]
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from reelfeed.config.settings import settings
from reelfeed.shared.core.exceptions import AuthenticationError
from reelfeed.shared.core.logging import clear_log_context, log_context
from reelfeed.shared.utils.security import SecurityUtils


# auto_error=False so a missing header falls through to the cookie
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate the JWT.

    Returns:
        Decoded token payload

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    clear_log_context()

    token = credentials.credentials if credentials else request.cookies.get(settings.AUTH_COOKIE_NAME)
    if not token:
        raise AuthenticationError("You must be logged in to access this resource")

    try:
        return SecurityUtils.decode_access_token(
            token,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
) -> dict:
    """
    Get current authenticated user from token.

    Returns:
        {"user_id": UUID, "email": str | None}

    Raises:
        AuthenticationError: If user_id is missing or not a UUID
    """
    raw_user_id = token.get("user_id")
    if not raw_user_id:
        raise AuthenticationError("Invalid token payload")

    try:
        user_id = UUID(str(raw_user_id))
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e

    log_context(user_id=str(user_id))

    return {
        "user_id": user_id,
        "email": token.get("email"),
    }


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[dict, Depends(get_current_user)]
