"""
Video Schemas

Request/response models for publishing videos, toggling engagement and
reading the feed.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from reelfeed.shared.models.video import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from reelfeed.shared.schemas.common import BaseSchema


# ═══════════════════════════════════════════════════════════════════════════════
# CREATE
# ═══════════════════════════════════════════════════════════════════════════════


class VideoCreate(BaseSchema):
    """Request to publish a video already uploaded to the media host."""

    title: str = Field(min_length=2, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    video_url: str = Field(min_length=1, description="Playable URL on the media host")


class VideoResponse(BaseSchema):
    """A stored video record."""

    id: UUID
    user_id: UUID
    title: str
    description: Optional[str] = None
    video_url: str
    created_at: datetime


class VideoCreateResponse(BaseSchema):
    """Response after publishing a video."""

    message: str = "Video uploaded successfully"
    video: VideoResponse


# ═══════════════════════════════════════════════════════════════════════════════
# TOGGLES
# ═══════════════════════════════════════════════════════════════════════════════


class LikeToggleResponse(BaseSchema):
    """Result of a like toggle."""

    is_liked: bool


class BookmarkToggleResponse(BaseSchema):
    """Result of a bookmark toggle."""

    is_bookmarked: bool


# ═══════════════════════════════════════════════════════════════════════════════
# FEED
# ═══════════════════════════════════════════════════════════════════════════════


class FeedOwnerResponse(BaseSchema):
    """Owner block of a feed item."""

    id: UUID
    name: str
    display_name: str


class FeedStatsResponse(BaseSchema):
    """Engagement counts of a feed item."""

    likes: int
    bookmarks: int


class FeedItemResponse(BaseSchema):
    """One video in the feed, personalized for the requester."""

    id: UUID
    user: FeedOwnerResponse
    title: str
    description: str
    stats: FeedStatsResponse
    is_liked: bool
    is_bookmarked: bool
    is_following: bool
    video_url: str
    created_at: datetime


class FeedResponse(BaseSchema):
    """
    A feed page.

    Example:
        {
            "items": [...],
            "nextCursor": "2024-01-15T10:30:00.123456Z",
            "hasMore": true
        }
    """

    items: List[FeedItemResponse]
    next_cursor: Optional[str] = None
    has_more: bool
