"""
User Entity Model

Represents a registered application user.

Model Hierarchy:
================
    User
       ├── videos (Video[])       - Videos uploaded by the user
       ├── likes (Like[])         - Videos the user liked
       └── bookmarks (Bookmark[]) - Videos the user bookmarked

Who a user follows lives in the ``follows`` join table (see Follow).

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ email            │ "jane@example.com"                                        │
│ name             │ "Jane Doe"                                                │
│ display_name     │ "jane_doe"                                                │
│ password_hash    │ "$2b$12$..."                                              │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reelfeed.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from reelfeed.shared.models.video import Video
    from reelfeed.shared.models.like import Like
    from reelfeed.shared.models.bookmark import Bookmark


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    Attributes:
        id: Unique identifier (UUID v4)
        email: Login email (unique, indexed)
        name: Free-form full name
        display_name: Public handle, lowercase ``[a-z0-9_]`` (unique)
        password_hash: Bcrypt hashed password

    Relationships:
        videos: Videos owned by this user (deleted with the user)
        likes: Like rows created by this user
        bookmarks: Bookmark rows created by this user
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )

    display_name: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    # passive_deletes: the database cascades, so deleting a user never
    # lazy-loads these collections inside an async session.
    videos: Mapped[list["Video"]] = relationship(
        "Video",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    likes: Mapped[list["Like"]] = relationship(
        "Like",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    bookmarks: Mapped[list["Bookmark"]] = relationship(
        "Bookmark",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, display_name={self.display_name})>"
