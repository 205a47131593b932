"""
User Repository

Database operations specific to the User model.

Common Operations:
==================
- get_by_email()         → Find user by email address
- email_exists()         → Check if email is already registered
- display_name_exists()  → Check if a public handle is taken

Usage Example:
==============
    async def authenticate_user(db: AsyncSession, email: str, password: str):
        repo = UserRepository(db)
        user = await repo.get_by_email(email)
        if not user:
            raise AuthenticationError("Invalid email or password")
        ...
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from reelfeed.shared.repositories.base import BaseRepository
from reelfeed.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        SQL Generated:
            SELECT * FROM users WHERE email = 'user@example.com'
        """
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Check if email is already registered."""
        user = await self.get_by_email(email)
        return user is not None

    async def display_name_exists(self, display_name: str) -> bool:
        """Check if a (lowercased) display name is already taken."""
        result = await self.session.execute(
            select(User.id).where(User.display_name == display_name)
        )
        return result.first() is not None
