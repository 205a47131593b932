"""
Video Entity Model

A short video uploaded by a user. The media itself is hosted externally;
only its playable URL is stored here.

SAMPLE VIDEO RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 770e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ title            │ "Sunset timelapse"                                        │
│ description      │ "Shot from the pier"                                      │
│ video_url        │ "https://media.example.com/v/abc.mp4"                     │
│ created_at       │ 2024-01-15T10:30:00.123456Z                               │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reelfeed.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from reelfeed.shared.models.user import User
    from reelfeed.shared.models.like import Like
    from reelfeed.shared.models.bookmark import Bookmark


TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 150


class Video(Base, TimestampMixin):
    """
    Video model.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Owner; the video is deleted with its owner
        title: Up to 50 characters
        description: Optional, up to 150 characters
        video_url: Playable media reference

    Relationships:
        user: The owner
        likes: Like rows referencing this video
        bookmarks: Bookmark rows referencing this video
    """

    __tablename__ = "videos"

    # Feed pages walk created_at DESC, id ASC
    __table_args__ = (Index("ix_videos_created_at_id", "created_at", "id"),)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
    )

    description: Mapped[Optional[str]] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH),
        nullable=True,
    )

    video_url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped["User"] = relationship(
        "User",
        back_populates="videos",
    )

    likes: Mapped[list["Like"]] = relationship(
        "Like",
        back_populates="video",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    bookmarks: Mapped[list["Bookmark"]] = relationship(
        "Bookmark",
        back_populates="video",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Video(id={self.id}, user_id={self.user_id})>"
