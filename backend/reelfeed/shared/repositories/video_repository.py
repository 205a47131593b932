"""
Video Repository

Database operations for videos, including the two queries behind the feed.

Feed Queries:
=============
1. feed_window()      → ids + created_at of the next page (limit + 1 rows)

       SELECT id, created_at FROM videos
       WHERE created_at < :before            -- only when a cursor is given
       ORDER BY created_at DESC, id ASC
       LIMIT :size

2. with_engagement()  → full rows for the kept ids

       SELECT videos.*, users.*, likes.*, bookmarks.*
       FROM videos
       JOIN users ON users.id = videos.user_id
       LEFT JOIN likes ON likes.video_id = videos.id
       LEFT JOIN bookmarks ON bookmarks.video_id = videos.id
       WHERE videos.id IN (:ids)

   Row order of the second query is meaningless; callers re-order by the
   id list from the first.
"""

from datetime import datetime
from typing import Any, Optional, Sequence
from uuid import UUID

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession

from reelfeed.shared.repositories.base import BaseRepository
from reelfeed.shared.models.bookmark import Bookmark
from reelfeed.shared.models.like import Like
from reelfeed.shared.models.user import User
from reelfeed.shared.models.video import Video


class VideoRepository(BaseRepository[Video]):
    """Repository for Video database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Video, session)

    async def feed_window(
        self,
        size: int,
        before: Optional[datetime] = None,
    ) -> Sequence[Row[Any]]:
        """
        Get up to ``size`` (id, created_at) rows, newest first.

        Args:
            size: Maximum rows to return (callers pass limit + 1)
            before: Exclusive upper bound on created_at

        Returns:
            Rows with ``id`` and ``created_at`` attributes
        """
        query = select(Video.id, Video.created_at)
        if before is not None:
            # The cursor carries no id tie-breaker: videos sharing the boundary
            # created_at with the last returned row are not reachable.
            query = query.where(Video.created_at < before)
        query = query.order_by(Video.created_at.desc(), Video.id.asc()).limit(size)

        result = await self.session.execute(query)
        return result.all()

    async def with_engagement(self, video_ids: list[UUID]) -> Sequence[Row[Any]]:
        """
        Get (Video, User, Like | None, Bookmark | None) rows for the given ids.

        Args:
            video_ids: Ids kept for the current page

        Returns:
            One row per video × like × bookmark combination
        """
        if not video_ids:
            return []

        query = (
            select(Video, User, Like, Bookmark)
            .join(User, Video.user_id == User.id)
            .outerjoin(Like, Like.video_id == Video.id)
            .outerjoin(Bookmark, Bookmark.video_id == Video.id)
            .where(Video.id.in_(video_ids))
        )

        result = await self.session.execute(query)
        return result.all()
