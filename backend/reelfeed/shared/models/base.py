"""
Base Model Classes

Foundational classes for all SQLAlchemy models in Reelfeed.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← created_at/updated_at

Usage:
======
    from reelfeed.shared.models.base import Base, TimestampMixin

    class Video(Base, TimestampMixin):
        __tablename__ = "videos"
        id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models inherit from this class either directly or together with
    TimestampMixin. Constraints are named explicitly on each model so the
    Alembic revision and the models agree on them.
    """


class TimestampMixin:
    """
    Mixin that adds timestamp tracking to models.

    Database Behavior:
    ==================
    - created_at: Set by the application on INSERT with microsecond
      precision; the feed cursor compares against it, so second-resolution
      server clocks would collapse neighbouring uploads. CURRENT_TIMESTAMP
      remains the server default for rows inserted outside the ORM.
    - updated_at: Set on INSERT, updated by SQLAlchemy on UPDATE via onupdate
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utcnow,
        nullable=False,
    )
