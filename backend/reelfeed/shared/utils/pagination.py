"""
Cursor Pagination Helpers

Shared pieces of the feed's keyset pagination:

- parse_cursor()   → permissive ISO-8601 parsing (garbage means "no cursor")
- encode_cursor()  → render a created_at value as the next cursor
- split_window()   → trim a limit+1 window and detect a further page
- group_rows()     → fold joined (video, owner, like, bookmark) rows
                     into one aggregate per video
- in_order()       → re-assemble aggregates in the window's order

Why limit + 1:
==============
    SELECT id, created_at FROM videos
    WHERE created_at < :cursor
    ORDER BY created_at DESC, id ASC
    LIMIT :limit + 1

    rows == limit + 1  → has_more, the extra row is discarded
    rows <= limit      → last page

The next cursor is always the created_at of the last *kept* row, never of
the discarded one.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Sequence, TypeVar
from uuid import UUID


RowT = TypeVar("RowT")


def as_utc(value: datetime) -> datetime:
    """
    Return an aware UTC datetime.

    Naive values are taken to already be UTC (SQLite hands back naive
    datetimes for timezone-aware columns).
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_cursor(cursor: Optional[str]) -> Optional[datetime]:
    """
    Parse a feed cursor.

    Accepts any ISO-8601 timestamp, including a trailing ``Z``. Anything
    unparsable is treated exactly like a missing cursor.

    Args:
        cursor: Raw cursor from the client

    Returns:
        Aware UTC datetime, or None to start from the newest video

    Example:
        parse_cursor("2024-01-15T10:30:00.123456Z")  # datetime(2024, 1, 15, 10, 30, 0, 123456, UTC)
        parse_cursor("yesterday")                    # None
    """
    if not cursor:
        return None

    raw = cursor.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"

    try:
        return as_utc(datetime.fromisoformat(raw))
    except (ValueError, OverflowError):
        # Offsets at the ends of the calendar overflow when shifted to UTC
        return None


def encode_cursor(created_at: datetime) -> str:
    """
    Render a created_at value as a cursor.

    Microseconds are kept so the exclusive bound lands exactly on the
    last returned row.

    Example:
        encode_cursor(datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
        # "2024-01-15T10:30:00.000000Z"
    """
    return as_utc(created_at).isoformat(timespec="microseconds").replace("+00:00", "Z")


def split_window(rows: Sequence[RowT], limit: int) -> tuple[list[RowT], bool]:
    """
    Trim a ``limit + 1`` window to ``limit`` rows.

    Returns:
        Tuple of (kept_rows, has_more)
    """
    has_more = len(rows) > limit
    return list(rows[:limit]), has_more


@dataclass
class GroupedVideo:
    """One video with its owner and the distinct engagement rows joined to it."""

    video: Any
    owner: Any
    likes: dict[UUID, Any] = field(default_factory=dict)
    bookmarks: dict[UUID, Any] = field(default_factory=dict)


def group_rows(rows: Iterable[Sequence[Any]]) -> dict[UUID, GroupedVideo]:
    """
    Fold ``(video, owner, like, bookmark)`` rows into one aggregate per video.

    The double outer join yields one row per like × bookmark combination,
    so likes and bookmarks are keyed by their own id to count each once.
    Unmatched outer-join sides arrive as None and are skipped; a video
    with no engagement keeps empty collections.

    Args:
        rows: Result rows of the engagement query

    Returns:
        Mapping of video id to GroupedVideo (iteration order is NOT the feed order)
    """
    grouped: dict[UUID, GroupedVideo] = {}
    for video, owner, like, bookmark in rows:
        entry = grouped.get(video.id)
        if entry is None:
            entry = grouped[video.id] = GroupedVideo(video=video, owner=owner)
        if like is not None:
            entry.likes[like.id] = like
        if bookmark is not None:
            entry.bookmarks[bookmark.id] = bookmark
    return grouped


def in_order(ids: Iterable[UUID], grouped: dict[UUID, GroupedVideo]) -> list[GroupedVideo]:
    """
    Return aggregates following the order of ``ids``.

    Ids missing from ``grouped`` (deleted between the two queries) are skipped.
    """
    return [grouped[video_id] for video_id in ids if video_id in grouped]
