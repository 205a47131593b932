"""
User Schemas

Request/response models for user and authentication endpoints.
"""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from reelfeed.shared.schemas.common import BaseSchema


class UserBase(BaseSchema):
    """Base user schema."""

    email: EmailStr


class UserCreate(UserBase):
    """Schema for user registration."""

    name: str = Field(min_length=2, max_length=100, description="Full name")
    password: str = Field(
        min_length=6,
        max_length=100,
        description="Password (6-100 characters)",
    )
    display_name: str = Field(
        min_length=2,
        max_length=50,
        description="Public handle; lowercased, letters/digits/underscores only",
    )


class UserLogin(UserBase):
    """Schema for user login."""

    password: str = Field(min_length=6, max_length=100)


class UserResponse(BaseSchema):
    """Schema for user response (never includes the password hash)."""

    id: UUID
    email: str
    name: str
    display_name: str
    created_at: datetime


class AuthResponse(BaseSchema):
    """Schema for authentication response."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class SessionResponse(BaseSchema):
    """Schema for the current-session lookup."""

    message: str = "User fetched successfully"
    user: UserResponse


class FollowToggleResponse(BaseSchema):
    """Result of a follow toggle."""

    message: str
    is_following: bool
