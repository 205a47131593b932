"""
Like Entity Model

A user liking a video. The row's existence IS the "liked" state: toggling
off hard-deletes it.

SAMPLE LIKE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 880e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 660e8400-e29b-41d4-a716-446655440000                      │
│ video_id         │ 770e8400-e29b-41d4-a716-446655440000                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reelfeed.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from reelfeed.shared.models.user import User
    from reelfeed.shared.models.video import Video


class Like(Base, TimestampMixin):
    """
    Like model - at most one row per (user, video).

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: The user who liked
        video_id: The liked video
    """

    __tablename__ = "likes"

    __table_args__ = (UniqueConstraint("user_id", "video_id", name="uq_likes_user_video"),)

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

    user: Mapped["User"] = relationship("User", back_populates="likes")

    video: Mapped["Video"] = relationship("Video", back_populates="likes")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Like(user_id={self.user_id}, video_id={self.video_id})>"
