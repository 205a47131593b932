"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Registration, login, session lookup
- VideoService: Publishing videos
- FeedService: Cursor-paginated, personalized feed pages
- EngagementService: Like / bookmark / follow toggles

Usage:
======
    from reelfeed.shared.services import FeedService

    page = await FeedService(db).get_feed(user_id, limit=10)
"""

from reelfeed.shared.services.auth_service import AuthService
from reelfeed.shared.services.video_service import VideoService
from reelfeed.shared.services.feed_service import FeedService, FeedPage, FeedItem
from reelfeed.shared.services.engagement_service import EngagementService

__all__ = [
    "AuthService",
    "VideoService",
    "FeedService",
    "FeedPage",
    "FeedItem",
    "EngagementService",
]
