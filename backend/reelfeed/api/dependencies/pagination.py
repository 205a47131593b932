"""
Feed pagination dependency.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Query

from reelfeed.config.settings import settings


@dataclass
class FeedParams:
    """Parsed feed query parameters."""

    limit: int
    cursor: Optional[str]


async def get_feed_params(
    limit: int = Query(
        settings.FEED_DEFAULT_LIMIT,
        ge=1,
        le=settings.FEED_MAX_LIMIT,
        description="Number of videos to return",
    ),
    cursor: Optional[str] = Query(
        None,
        description="nextCursor from the previous page; unparsable values restart from the newest",
    ),
) -> FeedParams:
    """Feed pagination parameters dependency."""
    return FeedParams(limit=limit, cursor=cursor)
