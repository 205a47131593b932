"""
Video Handler

Publishing videos, reading the feed and toggling likes/bookmarks.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Endpoints:
==========
    POST /videos                      → publish a video record
    GET  /videos/feed?limit&cursor    → one feed page
    POST /videos/{video_id}/like      → flip like
    POST /videos/{video_id}/bookmark  → flip bookmark
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from reelfeed.shared.schemas.common import ErrorResponse
from reelfeed.shared.schemas.video import (
    BookmarkToggleResponse,
    FeedResponse,
    LikeToggleResponse,
    VideoCreate,
    VideoCreateResponse,
    VideoResponse,
)
from reelfeed.shared.services.engagement_service import EngagementService
from reelfeed.shared.services.feed_service import FeedService
from reelfeed.shared.services.video_service import VideoService
from reelfeed.api.dependencies import CurrentUser, FeedParams, get_feed_params
from reelfeed.api.dependencies.services import (
    get_engagement_service,
    get_feed_service,
    get_video_service,
)


router = APIRouter(responses={401: {"model": ErrorResponse}})


@router.post(
    "",
    response_model=VideoCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_video(
    request: VideoCreate,
    current_user: CurrentUser,
    video_service: VideoService = Depends(get_video_service),
):
    """Publish a video that was uploaded to the media host."""
    video = await video_service.create_video(
        user_id=current_user["user_id"],
        title=request.title,
        description=request.description,
        video_url=request.video_url,
    )
    return VideoCreateResponse(video=VideoResponse.model_validate(video))


@router.get("/feed", response_model=FeedResponse)
async def get_feed(
    current_user: CurrentUser,
    params: FeedParams = Depends(get_feed_params),
    feed_service: FeedService = Depends(get_feed_service),
):
    """
    Get a page of the feed, newest first.

    Pass the previous page's ``nextCursor`` as ``cursor`` to continue.
    """
    page = await feed_service.get_feed(
        requester_id=current_user["user_id"],
        limit=params.limit,
        cursor=params.cursor,
    )
    return FeedResponse.model_validate(page)


@router.post(
    "/{video_id}/like",
    response_model=LikeToggleResponse,
    responses={404: {"model": ErrorResponse}},
)
async def toggle_like(
    video_id: UUID,
    current_user: CurrentUser,
    engagement_service: EngagementService = Depends(get_engagement_service),
):
    """Like or unlike a video."""
    is_liked = await engagement_service.toggle_like(current_user["user_id"], video_id)
    return LikeToggleResponse(is_liked=is_liked)


@router.post(
    "/{video_id}/bookmark",
    response_model=BookmarkToggleResponse,
    responses={404: {"model": ErrorResponse}},
)
async def toggle_bookmark(
    video_id: UUID,
    current_user: CurrentUser,
    engagement_service: EngagementService = Depends(get_engagement_service),
):
    """Bookmark or un-bookmark a video."""
    is_bookmarked = await engagement_service.toggle_bookmark(current_user["user_id"], video_id)
    return BookmarkToggleResponse(is_bookmarked=is_bookmarked)
