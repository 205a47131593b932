"""
Reelfeed SQLAlchemy Models

Model Hierarchy:
================
    User
       ├── videos (Video[])
       │      ├── likes (Like[])
       │      └── bookmarks (Bookmark[])
       ├── likes (Like[])
       └── bookmarks (Bookmark[])

    Follow (follower_id → users, followed_id → users)

Models Overview:
================
- Base: Base class and timestamp mixin
- User: Registered application user
- Video: Uploaded short video (media hosted externally)
- Like / Bookmark: User ↔ Video engagement rows, unique per pair
- Follow: Directed User ↔ User relation

Usage:
======
    from reelfeed.shared.models import User, Video, Like, Bookmark, Follow
"""

from reelfeed.shared.models.base import Base, TimestampMixin
from reelfeed.shared.models.user import User
from reelfeed.shared.models.video import Video
from reelfeed.shared.models.like import Like
from reelfeed.shared.models.bookmark import Bookmark
from reelfeed.shared.models.follow import Follow

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Models
    "User",
    "Video",
    "Like",
    "Bookmark",
    "Follow",
]
