"""
Bookmark Entity Model

A user bookmarking a video. Same shape and invariant as Like, kept as an
independent relation.
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reelfeed.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from reelfeed.shared.models.user import User
    from reelfeed.shared.models.video import Video


class Bookmark(Base, TimestampMixin):
    """
    Bookmark model - at most one row per (user, video).

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: The user who bookmarked
        video_id: The bookmarked video
    """

    __tablename__ = "bookmarks"

    __table_args__ = (
        UniqueConstraint("user_id", "video_id", name="uq_bookmarks_user_video"),
    )

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

    video_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user: Mapped["User"] = relationship("User", back_populates="bookmarks")

    video: Mapped["Video"] = relationship("Video", back_populates="bookmarks")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Bookmark(user_id={self.user_id}, video_id={self.video_id})>"
