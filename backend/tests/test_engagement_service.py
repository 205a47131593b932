"""Tests for like, bookmark and follow toggles."""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from reelfeed.shared.core.exceptions import (
    UserNotFoundError,
    ValidationError,
    VideoNotFoundError,
)
from reelfeed.shared.models import Bookmark, Follow, Like
from reelfeed.shared.services.engagement_service import EngagementService


@pytest.fixture
def engagement(db):
    return EngagementService(db)


async def count_rows(db, model) -> int:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one()


class TestToggleLike:
    async def test_like_then_unlike(self, db, engagement, make_user, make_video):
        user = await make_user("alice")
        video = await make_video(user, 0)

        assert await engagement.toggle_like(user.id, video.id) is True
        assert await count_rows(db, Like) == 1

        assert await engagement.toggle_like(user.id, video.id) is False
        assert await count_rows(db, Like) == 0

        assert await engagement.toggle_like(user.id, video.id) is True
        assert await count_rows(db, Like) == 1

    async def test_likes_are_per_user(self, db, engagement, make_user, make_video):
        alice = await make_user("alice")
        bob = await make_user("bob")
        video = await make_video(alice, 0)

        assert await engagement.toggle_like(alice.id, video.id) is True
        assert await engagement.toggle_like(bob.id, video.id) is True
        assert await count_rows(db, Like) == 2

        assert await engagement.toggle_like(bob.id, video.id) is False
        assert await count_rows(db, Like) == 1

    async def test_unknown_video(self, engagement, make_user):
        user = await make_user("alice")

        with pytest.raises(VideoNotFoundError) as exc_info:
            await engagement.toggle_like(user.id, uuid4())

        assert exc_info.value.status_code == 404

    async def test_unknown_requester(self, db, engagement, make_user, make_video):
        alice = await make_user("alice")
        video = await make_video(alice, 0)

        with pytest.raises(UserNotFoundError):
            await engagement.toggle_like(uuid4(), video.id)

        assert await count_rows(db, Like) == 0


class TestToggleBookmark:
    async def test_bookmark_then_remove(self, db, engagement, make_user, make_video):
        owner = await make_user("owner")
        reader = await make_user("reader")
        video = await make_video(owner, 0)

        assert await engagement.toggle_bookmark(reader.id, video.id) is True
        assert await count_rows(db, Bookmark) == 1
        assert await count_rows(db, Like) == 0

        assert await engagement.toggle_bookmark(reader.id, video.id) is False
        assert await count_rows(db, Bookmark) == 0

    async def test_unknown_video(self, engagement, make_user):
        user = await make_user("alice")

        with pytest.raises(VideoNotFoundError):
            await engagement.toggle_bookmark(user.id, uuid4())


class TestToggleFollow:
    async def test_follow_then_unfollow(self, db, engagement, make_user):
        alice = await make_user("alice")
        bob = await make_user("bob")

        assert await engagement.toggle_follow(alice.id, bob.id) is True
        assert await count_rows(db, Follow) == 1

        assert await engagement.toggle_follow(alice.id, bob.id) is False
        assert await count_rows(db, Follow) == 0

    async def test_follow_is_directional(self, db, engagement, make_user):
        alice = await make_user("alice")
        bob = await make_user("bob")

        assert await engagement.toggle_follow(alice.id, bob.id) is True
        assert await engagement.toggle_follow(bob.id, alice.id) is True
        assert await count_rows(db, Follow) == 2

    async def test_cannot_follow_self(self, db, engagement, make_user):
        alice = await make_user("alice")

        with pytest.raises(ValidationError) as exc_info:
            await engagement.toggle_follow(alice.id, alice.id)

        assert exc_info.value.status_code == 400
        assert await count_rows(db, Follow) == 0

    async def test_unknown_profile(self, engagement, make_user):
        alice = await make_user("alice")

        with pytest.raises(UserNotFoundError):
            await engagement.toggle_follow(alice.id, uuid4())

    async def test_unknown_follower(self, db, engagement, make_user):
        bob = await make_user("bob")

        with pytest.raises(UserNotFoundError):
            await engagement.toggle_follow(uuid4(), bob.id)

        assert await count_rows(db, Follow) == 0
