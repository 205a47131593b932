"""
Authentication Service

Business logic for registration, login and session lookup.

Usage:
======
    from reelfeed.shared.services.auth_service import AuthService

    service = AuthService(db)
    user, token, expires = await service.register_user(
        name="Jane Doe",
        email="jane@example.com",
        password="secret123",
        display_name="Jane_Doe",
    )
"""

import re
from datetime import timedelta
from typing import Tuple
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from reelfeed.config.settings import settings
from reelfeed.shared.repositories.user_repository import UserRepository
from reelfeed.shared.utils.security import SecurityUtils
from reelfeed.shared.core.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
    UserNotFoundError,
    ValidationError,
)
from reelfeed.shared.core.logging import logger
from reelfeed.shared.models.user import User


DISPLAY_NAME_PATTERN = re.compile(r"^[a-z0-9_]+$")


def normalize_display_name(display_name: str) -> str:
    """
    Lowercase a display name and check its charset.

    Raises:
        ValidationError: If it contains spaces or characters outside [a-z0-9_]
    """
    if " " in display_name:
        raise ValidationError(
            "Display name cannot contain spaces",
            details={"field": "displayName"},
        )

    normalized = display_name.lower()
    if not DISPLAY_NAME_PATTERN.match(normalized):
        raise ValidationError(
            "Display name may only contain letters, digits and underscores",
            details={"field": "displayName"},
        )
    return normalized


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with email/password
    - User authentication (login)
    - Looking up the authenticated user's record
    - JWT token generation

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def register_user(
        self,
        name: str,
        email: str,
        password: str,
        display_name: str,
    ) -> Tuple[User, str, int]:
        """
        Register a new user.

        Args:
            name: Full name
            email: User's email address
            password: Plain text password (will be hashed)
            display_name: Public handle, stored lowercase

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            DuplicateResourceError: If email or display name is taken
            ValidationError: If display name is malformed
        """
        if await self.repo.email_exists(email):
            raise DuplicateResourceError("User with this email already exists")

        handle = normalize_display_name(display_name)
        if await self.repo.display_name_exists(handle):
            raise DuplicateResourceError("Display name is already taken")

        try:
            user = await self.repo.create(
                name=name,
                email=email,
                display_name=handle,
                password_hash=SecurityUtils.hash_password(password),
            )
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same email/handle
            raise DuplicateResourceError("User with this email or display name already exists") from e

        logger.info("User registered", user_id=str(user.id), display_name=handle)

        access_token, expires_in = self._issue_token(user)
        return user, access_token, expires_in

    async def login_user(
        self,
        email: str,
        password: str,
    ) -> Tuple[User, str, int]:
        """
        Authenticate user and generate token.

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = await self.repo.get_by_email(email)
        if not user:
            raise AuthenticationError("Invalid email or password")

        if not SecurityUtils.verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")

        access_token, expires_in = self._issue_token(user)
        return user, access_token, expires_in

    async def get_session_user(self, user_id: UUID) -> User:
        """
        Get the authenticated user's record.

        Raises:
            UserNotFoundError: If the token outlived its user
        """
        user = await self.repo.get(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user

    def _issue_token(self, user: User) -> Tuple[str, int]:
        """Create a JWT for the user; returns (token, expires_in_seconds)."""
        access_token = SecurityUtils.create_access_token(
            data={"user_id": str(user.id), "email": user.email},
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )
        return access_token, settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
