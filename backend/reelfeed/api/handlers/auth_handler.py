"""
Authentication Handler

Handles user registration and login endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Handlers only parse requests, call services and format responses.
Service exceptions (409 conflict, 401 bad credentials, 400 bad handle)
propagate to the global error handler.
"""

from fastapi import APIRouter, Depends, Response, status

from reelfeed.config.settings import settings
from reelfeed.shared.schemas.common import ErrorResponse
from reelfeed.shared.schemas.user import (
    UserCreate,
    UserLogin,
    AuthResponse,
    UserResponse,
)
from reelfeed.shared.services.auth_service import AuthService
from reelfeed.api.dependencies.services import get_auth_service


router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def register(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Raises:
        409: If email or display name is already taken
        400: If the display name has spaces or invalid characters
    """
    user, access_token, expires_in = await auth_service.register_user(
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        display_name=user_data.display_name,
    )

    return AuthResponse(
        user=UserResponse.model_validate(user),
        access_token=access_token,
        expires_in=expires_in,
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(
    credentials: UserLogin,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user, return a JWT and set it as an HTTP-only cookie.

    Raises:
        401: If credentials are invalid
    """
    user, access_token, expires_in = await auth_service.login_user(
        email=credentials.email,
        password=credentials.password,
    )

    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=access_token,
        max_age=expires_in,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )

    return AuthResponse(
        user=UserResponse.model_validate(user),
        access_token=access_token,
        expires_in=expires_in,
    )
