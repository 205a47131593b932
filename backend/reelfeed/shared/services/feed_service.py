"""
Feed Service

Builds pages of the infinite-scroll video feed.

Flow:
=====
    1. parse cursor (garbage → start from newest)
    2. window  = limit + 1 newest (id, created_at) older than cursor
    3. kept    = first `limit` of window; has_more = len(window) > limit
    4. rows    = kept videos ⋈ owner ⟕ likes ⟕ bookmarks
    5. group rows per video, then walk `kept` to restore feed order
    6. annotate: counts, is_liked, is_bookmarked, is_following
    7. next_cursor = created_at of the last returned item (only if has_more)

Usage:
======
    service = FeedService(db)
    page = await service.get_feed(requester_id, limit=10, cursor=None)
    page.items, page.next_cursor, page.has_more
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from reelfeed.config.settings import settings
from reelfeed.shared.core.exceptions import ValidationError
from reelfeed.shared.core.logging import get_logger
from reelfeed.shared.repositories.engagement_repository import FollowRepository
from reelfeed.shared.repositories.video_repository import VideoRepository
from reelfeed.shared.utils.pagination import (
    GroupedVideo,
    as_utc,
    encode_cursor,
    group_rows,
    in_order,
    parse_cursor,
    split_window,
)


logger = get_logger("feed")


@dataclass
class FeedOwner:
    """Public fields of a video's owner."""

    id: UUID
    name: str
    display_name: str


@dataclass
class FeedStats:
    """Engagement counts of a video."""

    likes: int
    bookmarks: int


@dataclass
class FeedItem:
    """One video as seen by the requester."""

    id: UUID
    user: FeedOwner
    title: str
    description: str
    stats: FeedStats
    is_liked: bool
    is_bookmarked: bool
    is_following: bool
    video_url: str
    created_at: datetime


@dataclass
class FeedPage:
    """A page of the feed plus the cursor for the next one."""

    items: List[FeedItem]
    next_cursor: Optional[str]
    has_more: bool


class FeedService:
    """
    Service for feed retrieval.

    Attributes:
        session: Database session
        video_repo: VideoRepository instance
        follow_repo: FollowRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.video_repo = VideoRepository(session)
        self.follow_repo = FollowRepository(session)

    async def get_feed(
        self,
        requester_id: UUID,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> FeedPage:
        """
        Get one page of the feed, newest first.

        Args:
            requester_id: The authenticated user; drives the is_* flags
            limit: Page size in [1, FEED_MAX_LIMIT], default FEED_DEFAULT_LIMIT
            cursor: ISO-8601 timestamp from a previous page's next_cursor

        Returns:
            FeedPage with at most ``limit`` items

        Raises:
            ValidationError: If limit is out of range
        """
        if limit is None:
            limit = settings.FEED_DEFAULT_LIMIT
        if not 1 <= limit <= settings.FEED_MAX_LIMIT:
            raise ValidationError(
                f"limit must be between 1 and {settings.FEED_MAX_LIMIT}",
                details={"field": "limit", "value": limit},
            )

        before = parse_cursor(cursor)

        window = await self.video_repo.feed_window(size=limit + 1, before=before)
        kept, has_more = split_window(window, limit)
        video_ids = [row.id for row in kept]

        grouped = group_rows(await self.video_repo.with_engagement(video_ids))
        entries = in_order(video_ids, grouped)

        followed = await self.follow_repo.followed_among(
            requester_id, (entry.owner.id for entry in entries)
        )
        items = [self._to_item(entry, requester_id, followed) for entry in entries]

        next_cursor = None
        if has_more:
            last_created_at = items[-1].created_at if items else kept[-1].created_at
            next_cursor = encode_cursor(last_created_at)

        logger.debug(
            "Feed page built",
            requester_id=str(requester_id),
            cursor=before.isoformat() if before else None,
            size=len(items),
            has_more=has_more,
        )
        return FeedPage(items=items, next_cursor=next_cursor, has_more=has_more)

    @staticmethod
    def _to_item(entry: GroupedVideo, requester_id: UUID, followed: set[UUID]) -> FeedItem:
        """Aggregate counts and personalize one grouped video."""
        video, owner = entry.video, entry.owner
        return FeedItem(
            id=video.id,
            user=FeedOwner(id=owner.id, name=owner.name, display_name=owner.display_name),
            title=video.title,
            description=video.description or "",
            stats=FeedStats(likes=len(entry.likes), bookmarks=len(entry.bookmarks)),
            is_liked=any(like.user_id == requester_id for like in entry.likes.values()),
            is_bookmarked=any(
                bookmark.user_id == requester_id for bookmark in entry.bookmarks.values()
            ),
            is_following=owner.id in followed,
            video_url=video.video_url,
            created_at=as_utc(video.created_at),
        )
