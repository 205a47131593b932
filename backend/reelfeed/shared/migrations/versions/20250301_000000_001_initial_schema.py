# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2025-03-01 00:00:00

Tables created:
- users: Accounts with unique email and display name
- videos: Published video records (feed source)
- likes: One row per (user, video) like
- bookmarks: One row per (user, video) bookmark
- follows: Follower → followed edges, self-follow rejected
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def _user_fk(name: str, **kwargs) -> sa.Column:
    return sa.Column(
        name,
        sa.Uuid(),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        **kwargs,
    )


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("display_name", sa.String(50), nullable=False, unique=True, index=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )

    op.create_table(
        "videos",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _user_fk("user_id", index=True),
        sa.Column("title", sa.String(50), nullable=False),
        sa.Column("description", sa.String(150), nullable=True),
        sa.Column("video_url", sa.Text(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    # Feed pages walk created_at DESC, id ASC
    op.create_index("ix_videos_created_at_id", "videos", ["created_at", "id"])

    for table in ("likes", "bookmarks"):
        op.create_table(
            table,
            sa.Column("id", sa.Uuid(), primary_key=True),
            _user_fk("user_id", index=True),
            sa.Column(
                "video_id",
                sa.Uuid(),
                sa.ForeignKey("videos.id", ondelete="CASCADE"),
                nullable=False,
                index=True,
            ),
            _timestamp("created_at"),
            _timestamp("updated_at"),
            sa.UniqueConstraint("user_id", "video_id", name=f"uq_{table}_user_video"),
        )

    op.create_table(
        "follows",
        _user_fk("follower_id", primary_key=True),
        _user_fk("followed_id", primary_key=True, index=True),
        _timestamp("created_at"),
        sa.CheckConstraint("follower_id <> followed_id", name="ck_follows_not_self"),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("follows")
    op.drop_table("bookmarks")
    op.drop_table("likes")
    op.drop_table("videos")
    op.drop_table("users")
