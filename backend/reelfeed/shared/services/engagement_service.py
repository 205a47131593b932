"""
Engagement Service

Like, bookmark and follow toggles.

Every operation is a flip: the caller never asks for a target state, it
only inverts whatever the current state is and learns the result.

    toggle_like(user, video)        → is_liked
    toggle_bookmark(user, video)    → is_bookmarked
    toggle_follow(user, profile)    → is_following

The requester and the target are checked before flipping: unknown users,
videos and profiles are 404s and following yourself is rejected.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from reelfeed.shared.core.exceptions import (
    UserNotFoundError,
    ValidationError,
    VideoNotFoundError,
)
from reelfeed.shared.core.logging import logger
from reelfeed.shared.repositories.engagement_repository import (
    BookmarkRepository,
    FollowRepository,
    LikeRepository,
)
from reelfeed.shared.repositories.user_repository import UserRepository
from reelfeed.shared.repositories.video_repository import VideoRepository


class EngagementService:
    """Service for engagement toggles."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.user_repo = UserRepository(session)
        self.video_repo = VideoRepository(session)
        self.like_repo = LikeRepository(session)
        self.bookmark_repo = BookmarkRepository(session)
        self.follow_repo = FollowRepository(session)

    async def toggle_like(self, user_id: UUID, video_id: UUID) -> bool:
        """
        Like the video if not liked, unlike it otherwise.

        Returns:
            True if the video is now liked by the user

        Raises:
            UserNotFoundError: If the requester no longer exists
            VideoNotFoundError: If the video does not exist
        """
        await self._ensure_user(user_id)
        await self._ensure_video(video_id)
        is_liked = await self.like_repo.toggle(user_id, video_id)

        logger.info("Like toggled", user_id=str(user_id), video_id=str(video_id), is_liked=is_liked)
        return is_liked

    async def toggle_bookmark(self, user_id: UUID, video_id: UUID) -> bool:
        """
        Bookmark the video if not bookmarked, remove the bookmark otherwise.

        Returns:
            True if the video is now bookmarked by the user

        Raises:
            UserNotFoundError: If the requester no longer exists
            VideoNotFoundError: If the video does not exist
        """
        await self._ensure_user(user_id)
        await self._ensure_video(video_id)
        is_bookmarked = await self.bookmark_repo.toggle(user_id, video_id)

        logger.info(
            "Bookmark toggled",
            user_id=str(user_id),
            video_id=str(video_id),
            is_bookmarked=is_bookmarked,
        )
        return is_bookmarked

    async def toggle_follow(self, user_id: UUID, profile_id: UUID) -> bool:
        """
        Follow the profile if not followed, unfollow it otherwise.

        Returns:
            True if the user now follows the profile

        Raises:
            ValidationError: If the user tries to follow themselves
            UserNotFoundError: If the requester or the profile does not exist
        """
        if user_id == profile_id:
            raise ValidationError("You cannot follow yourself", details={"field": "profileId"})
        await self._ensure_user(user_id)
        await self._ensure_user(profile_id)

        is_following = await self.follow_repo.toggle(user_id, profile_id)

        logger.info(
            "Follow toggled",
            user_id=str(user_id),
            profile_id=str(profile_id),
            is_following=is_following,
        )
        return is_following

    async def _ensure_video(self, video_id: UUID) -> None:
        if not await self.video_repo.exists(video_id):
            raise VideoNotFoundError(str(video_id))

    async def _ensure_user(self, user_id: UUID) -> None:
        # A still-valid token can outlive its user
        if not await self.user_repo.exists(user_id):
            raise UserNotFoundError(str(user_id))
