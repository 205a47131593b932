"""
Engagement Repositories

Relation rows whose existence is the state: likes, bookmarks and follows.

    LikeRepository      ← (user_id, video_id), unique
    BookmarkRepository  ← (user_id, video_id), unique
    FollowRepository    ← (follower_id, followed_id), primary key

Every toggle goes through BaseRepository.flip(), so turning a relation on
or off is one DELETE, optionally followed by one INSERT ... ON CONFLICT DO
NOTHING, inside the request's transaction.
"""

from typing import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from reelfeed.shared.repositories.base import BaseRepository
from reelfeed.shared.models.bookmark import Bookmark
from reelfeed.shared.models.follow import Follow
from reelfeed.shared.models.like import Like


class LikeRepository(BaseRepository[Like]):
    """Repository for Like rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Like, session)

    async def toggle(self, user_id: UUID, video_id: UUID) -> bool:
        """Flip the like; returns True if the video is now liked."""
        return await self.flip(user_id=user_id, video_id=video_id)


class BookmarkRepository(BaseRepository[Bookmark]):
    """Repository for Bookmark rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Bookmark, session)

    async def toggle(self, user_id: UUID, video_id: UUID) -> bool:
        """Flip the bookmark; returns True if the video is now bookmarked."""
        return await self.flip(user_id=user_id, video_id=video_id)


class FollowRepository(BaseRepository[Follow]):
    """Repository for Follow rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Follow, session)

    async def toggle(self, follower_id: UUID, followed_id: UUID) -> bool:
        """Flip the follow; returns True if follower now follows followed."""
        return await self.flip(follower_id=follower_id, followed_id=followed_id)

    async def followed_among(self, follower_id: UUID, candidate_ids: Iterable[UUID]) -> set[UUID]:
        """
        Which of ``candidate_ids`` does ``follower_id`` follow?

        One query per feed page, covering every owner on it.

        SQL Generated:
            SELECT followed_id FROM follows
            WHERE follower_id = :me AND followed_id IN (:owners)
        """
        candidates = list(set(candidate_ids))
        if not candidates:
            return set()

        result = await self.session.execute(
            select(Follow.followed_id).where(
                Follow.follower_id == follower_id,
                Follow.followed_id.in_(candidates),
            )
        )
        return set(result.scalars().all())
