"""
Follow Entity Model

Directed "follower follows followed" relation between two users.

Stored as a join table rather than an array column on users: following
or unfollowing is a single-row INSERT/DELETE, so two concurrent follows of
different profiles by the same user cannot overwrite each other.

SAMPLE FOLLOW RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ follower_id      │ 660e8400-e29b-41d4-a716-446655440000                      │
│ followed_id      │ 550e8400-e29b-41d4-a716-446655440000                      │
│ created_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
import uuid

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from reelfeed.shared.models.base import Base, utcnow


class Follow(Base):
    """
    Follow model - composite primary key (follower_id, followed_id).

    Attributes:
        follower_id: The user who follows
        followed_id: The profile being followed (never the follower)
        created_at: When the follow happened
    """

    __tablename__ = "follows"

    __table_args__ = (
        CheckConstraint("follower_id <> followed_id", name="ck_follows_not_self"),
    )

    follower_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    followed_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Follow(follower_id={self.follower_id}, followed_id={self.followed_id})>"
