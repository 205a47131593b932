"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, error and health responses
- user: Registration, login, session and follow schemas
- video: Video creation, engagement toggles and feed pages

Usage:
======
    from reelfeed.shared.schemas.user import UserCreate, AuthResponse
    from reelfeed.shared.schemas.video import FeedResponse
"""

from reelfeed.shared.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from reelfeed.shared.schemas.user import (
    UserBase,
    UserCreate,
    UserLogin,
    UserResponse,
    AuthResponse,
    SessionResponse,
    FollowToggleResponse,
)
from reelfeed.shared.schemas.video import (
    VideoCreate,
    VideoResponse,
    VideoCreateResponse,
    LikeToggleResponse,
    BookmarkToggleResponse,
    FeedOwnerResponse,
    FeedStatsResponse,
    FeedItemResponse,
    FeedResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "SessionResponse",
    "FollowToggleResponse",
    # Video
    "VideoCreate",
    "VideoResponse",
    "VideoCreateResponse",
    "LikeToggleResponse",
    "BookmarkToggleResponse",
    "FeedOwnerResponse",
    "FeedStatsResponse",
    "FeedItemResponse",
    "FeedResponse",
]
