"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request around the request's db session; they
hold no other state.

Usage:
======
    from reelfeed.api.dependencies.services import get_feed_service

    @router.get("/feed")
    async def feed(feed_service: FeedService = Depends(get_feed_service)):
        ...
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from reelfeed.api.dependencies.database import get_db
from reelfeed.shared.services.auth_service import AuthService
from reelfeed.shared.services.engagement_service import EngagementService
from reelfeed.shared.services.feed_service import FeedService
from reelfeed.shared.services.video_service import VideoService


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db)


async def get_video_service(
    db: AsyncSession = Depends(get_db),
) -> VideoService:
    """Dependency to get VideoService instance."""
    return VideoService(db)


async def get_feed_service(
    db: AsyncSession = Depends(get_db),
) -> FeedService:
    """Dependency to get FeedService instance."""
    return FeedService(db)


async def get_engagement_service(
    db: AsyncSession = Depends(get_db),
) -> EngagementService:
    """Dependency to get EngagementService instance."""
    return EngagementService(db)
