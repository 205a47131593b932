"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]      ← get / exists / create / flip
         │
         ├── UserRepository        ← Lookups by email and display name
         ├── VideoRepository       ← Feed window + engagement join
         ├── LikeRepository        ← Like toggles
         ├── BookmarkRepository    ← Bookmark toggles
         └── FollowRepository      ← Follow toggles + follow lookups

Usage Example:
==============
    from reelfeed.shared.repositories import LikeRepository

    is_liked = await LikeRepository(db).toggle(user_id, video_id)
"""

from reelfeed.shared.repositories.base import BaseRepository
from reelfeed.shared.repositories.user_repository import UserRepository
from reelfeed.shared.repositories.video_repository import VideoRepository
from reelfeed.shared.repositories.engagement_repository import (
    LikeRepository,
    BookmarkRepository,
    FollowRepository,
)

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "VideoRepository",
    "LikeRepository",
    "BookmarkRepository",
    "FollowRepository",
]
