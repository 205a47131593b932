"""End-to-end tests over HTTP: auth, error envelope, feed shape and toggles."""

from uuid import uuid4

import pytest
import pytest_asyncio

from tests.helpers import PASSWORD, auth_headers, token_for


@pytest_asyncio.fixture
async def alice(db, make_user):
    user = await make_user("alice")
    await db.commit()
    return user


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_ready(client):
    response = await client.get("/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


class TestAuth:
    async def test_register(self, client):
        response = await client.post(
            "/auth/register",
            json={
                "name": "Alice Liddell",
                "email": "alice@example.com",
                "password": PASSWORD,
                "displayName": "Alice",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["user"]["displayName"] == "alice"
        assert body["tokenType"] == "bearer"
        assert body["accessToken"]
        assert "passwordHash" not in body["user"]

    async def test_register_duplicate_email(self, client, alice):
        response = await client.post(
            "/auth/register",
            json={
                "name": "Other Alice",
                "email": "alice@example.com",
                "password": PASSWORD,
                "displayName": "other_alice",
            },
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

    async def test_register_display_name_with_space(self, client):
        response = await client.post(
            "/auth/register",
            json={
                "name": "Alice Liddell",
                "email": "alice@example.com",
                "password": PASSWORD,
                "displayName": "alice liddell",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_login_sets_cookie(self, client, alice):
        response = await client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": PASSWORD},
        )

        assert response.status_code == 200
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("auth_token=")
        assert "HttpOnly" in set_cookie

    async def test_login_bad_password(self, client, alice):
        response = await client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "not-the-password"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_session_from_cookie(self, client, alice):
        response = await client.get("/users/me", headers={"Cookie": f"auth_token={token_for(alice)}"})

        assert response.status_code == 200
        assert response.json()["user"]["id"] == str(alice.id)

    async def test_missing_token(self, client):
        response = await client.get("/videos/feed")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_invalid_token(self, client):
        response = await client.get("/videos/feed", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401


class TestVideos:
    async def test_create_video(self, client, alice):
        response = await client.post(
            "/videos",
            headers=auth_headers(alice),
            json={"title": "Sunset", "videoUrl": "https://media.example.com/sunset.mp4"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Video uploaded successfully"
        assert body["video"]["userId"] == str(alice.id)
        assert body["video"]["description"] is None

    async def test_title_too_long(self, client, alice):
        response = await client.post(
            "/videos",
            headers=auth_headers(alice),
            json={"title": "x" * 51, "videoUrl": "https://media.example.com/long.mp4"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestFeed:
    async def test_item_shape(self, client, db, alice, make_video):
        await make_video(alice, 0, title="Sunset", description="Golden hour")
        await db.commit()

        response = await client.get("/videos/feed", headers=auth_headers(alice))

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"items", "nextCursor", "hasMore"}
        [item] = body["items"]
        assert set(item) == {
            "id",
            "user",
            "title",
            "description",
            "stats",
            "isLiked",
            "isBookmarked",
            "isFollowing",
            "videoUrl",
            "createdAt",
        }
        assert item["user"] == {"id": str(alice.id), "name": "Alice", "displayName": "alice"}
        assert item["stats"] == {"likes": 0, "bookmarks": 0}
        assert item["description"] == "Golden hour"
        assert item["createdAt"].startswith("2024-01-15T10:00:00")

    async def test_cursor_walk(self, client, db, alice, make_video):
        for minutes in range(6):
            await make_video(alice, minutes)
        await db.commit()

        first = (await client.get("/videos/feed?limit=5", headers=auth_headers(alice))).json()

        assert len(first["items"]) == 5
        assert first["hasMore"] is True
        assert first["nextCursor"] == "2024-01-15T10:01:00.000000Z"

        second = (
            await client.get(
                "/videos/feed",
                params={"limit": 5, "cursor": first["nextCursor"]},
                headers=auth_headers(alice),
            )
        ).json()

        assert [item["title"] for item in second["items"]] == ["Video 0"]
        assert second["hasMore"] is False
        assert second["nextCursor"] is None

    async def test_cursor_out_of_range_starts_from_newest(self, client, db, alice, make_video):
        await make_video(alice, 0)
        await db.commit()

        response = await client.get(
            "/videos/feed",
            params={"cursor": "9999-12-31T23:59:59-05:00"},
            headers=auth_headers(alice),
        )

        assert response.status_code == 200
        assert [item["title"] for item in response.json()["items"]] == ["Video 0"]

    @pytest.mark.parametrize("limit", ["0", "101", "ten"])
    async def test_bad_limit(self, client, alice, limit):
        response = await client.get(f"/videos/feed?limit={limit}", headers=auth_headers(alice))

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestToggles:
    async def test_like_shows_in_feed(self, client, db, alice, make_user, make_video):
        bob = await make_user("bob")
        video = await make_video(bob, 0)
        await db.commit()

        liked = await client.post(f"/videos/{video.id}/like", headers=auth_headers(alice))
        assert liked.status_code == 200
        assert liked.json() == {"isLiked": True}

        [item] = (await client.get("/videos/feed", headers=auth_headers(alice))).json()["items"]
        assert item["stats"]["likes"] == 1
        assert item["isLiked"] is True

        unliked = await client.post(f"/videos/{video.id}/like", headers=auth_headers(alice))
        assert unliked.json() == {"isLiked": False}

        [item] = (await client.get("/videos/feed", headers=auth_headers(alice))).json()["items"]
        assert item["stats"]["likes"] == 0
        assert item["isLiked"] is False

    async def test_bookmark(self, client, db, alice, make_video):
        video = await make_video(alice, 0)
        await db.commit()

        response = await client.post(f"/videos/{video.id}/bookmark", headers=auth_headers(alice))

        assert response.status_code == 200
        assert response.json() == {"isBookmarked": True}

    async def test_like_unknown_video(self, client, alice):
        response = await client.post(f"/videos/{uuid4()}/like", headers=auth_headers(alice))

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_like_from_deleted_account(self, client, db, alice, make_user, make_video):
        bob = await make_user("bob")
        video = await make_video(alice, 0)
        await db.commit()
        headers = auth_headers(bob)
        await db.delete(bob)
        await db.commit()

        response = await client.post(f"/videos/{video.id}/like", headers=headers)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_like_malformed_id(self, client, alice):
        response = await client.post("/videos/not-a-uuid/like", headers=auth_headers(alice))

        assert response.status_code == 400

    async def test_follow(self, client, db, alice, make_user, make_video):
        bob = await make_user("bob")
        await make_video(bob, 0)
        await db.commit()

        response = await client.post(f"/users/{bob.id}/follow", headers=auth_headers(alice))
        assert response.status_code == 200
        assert response.json() == {"message": "User followed successfully", "isFollowing": True}

        [item] = (await client.get("/videos/feed", headers=auth_headers(alice))).json()["items"]
        assert item["isFollowing"] is True

        response = await client.post(f"/users/{bob.id}/follow", headers=auth_headers(alice))
        assert response.json() == {"message": "User unfollowed successfully", "isFollowing": False}

    async def test_follow_self(self, client, alice):
        response = await client.post(f"/users/{alice.id}/follow", headers=auth_headers(alice))

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_follow_unknown_user(self, client, alice):
        response = await client.post(f"/users/{uuid4()}/follow", headers=auth_headers(alice))

        assert response.status_code == 404


async def test_unknown_route_uses_error_envelope(client):
    response = await client.get("/nope")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
