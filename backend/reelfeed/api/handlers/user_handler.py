"""
User Handler

Current-session lookup and follow toggles.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from reelfeed.shared.schemas.common import ErrorResponse
from reelfeed.shared.schemas.user import (
    FollowToggleResponse,
    SessionResponse,
    UserResponse,
)
from reelfeed.shared.services.auth_service import AuthService
from reelfeed.shared.services.engagement_service import EngagementService
from reelfeed.api.dependencies import CurrentUser
from reelfeed.api.dependencies.services import get_auth_service, get_engagement_service


router = APIRouter(responses={401: {"model": ErrorResponse}})


@router.get("/me", response_model=SessionResponse)
async def get_session(
    current_user: CurrentUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Return the authenticated user's record."""
    user = await auth_service.get_session_user(current_user["user_id"])
    return SessionResponse(user=UserResponse.model_validate(user))


@router.post(
    "/{profile_id}/follow",
    response_model=FollowToggleResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def toggle_follow(
    profile_id: UUID,
    current_user: CurrentUser,
    engagement_service: EngagementService = Depends(get_engagement_service),
):
    """
    Follow or unfollow a profile.

    Raises:
        400: If following yourself
        404: If the profile does not exist
    """
    is_following = await engagement_service.toggle_follow(current_user["user_id"], profile_id)

    message = "User followed successfully" if is_following else "User unfollowed successfully"
    return FollowToggleResponse(message=message, is_following=is_following)
