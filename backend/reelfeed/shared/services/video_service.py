"""
Video Service

Business logic for publishing videos. The media file is uploaded to an
external host by the client; this service records the resulting URL.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from reelfeed.shared.core.exceptions import UserNotFoundError
from reelfeed.shared.core.logging import logger
from reelfeed.shared.models.video import Video
from reelfeed.shared.repositories.user_repository import UserRepository
from reelfeed.shared.repositories.video_repository import VideoRepository


class VideoService:
    """Service for creating videos."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.user_repo = UserRepository(session)
        self.video_repo = VideoRepository(session)

    async def create_video(
        self,
        user_id: UUID,
        title: str,
        video_url: str,
        description: Optional[str] = None,
    ) -> Video:
        """
        Create a video owned by ``user_id``.

        Length limits are enforced by the request schema; an empty
        description is stored as NULL.

        Raises:
            UserNotFoundError: If the owner no longer exists
        """
        if not await self.user_repo.exists(user_id):
            raise UserNotFoundError(str(user_id))

        video = await self.video_repo.create(
            user_id=user_id,
            title=title,
            description=description or None,
            video_url=video_url,
        )

        logger.info("Video created", video_id=str(video.id), user_id=str(user_id))
        return video
