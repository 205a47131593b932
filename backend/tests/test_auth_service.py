"""Tests for registration, login and session lookup."""

from uuid import UUID, uuid4

import pytest

from reelfeed.config.settings import settings
from reelfeed.shared.core.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
    UserNotFoundError,
    ValidationError,
)
from reelfeed.shared.services.auth_service import AuthService, normalize_display_name
from reelfeed.shared.utils.security import SecurityUtils


@pytest.fixture
def auth(db):
    return AuthService(db)


async def register(auth, display_name="alice", email="alice@example.com"):
    return await auth.register_user(
        name="Alice Liddell",
        email=email,
        password="secret123",
        display_name=display_name,
    )


async def test_register_issues_token(auth):
    user, token, expires_in = await register(auth)

    payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    assert UUID(payload["user_id"]) == user.id
    assert payload["email"] == "alice@example.com"
    assert expires_in == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    assert user.password_hash != "secret123"


async def test_display_name_is_lowercased(auth):
    user, _, _ = await register(auth, display_name="Alice_99")

    assert user.display_name == "alice_99"


async def test_duplicate_email(auth):
    await register(auth)

    with pytest.raises(DuplicateResourceError) as exc_info:
        await register(auth, display_name="other")

    assert exc_info.value.status_code == 409


async def test_duplicate_display_name_ignores_case(auth):
    await register(auth)

    with pytest.raises(DuplicateResourceError):
        await register(auth, display_name="ALICE", email="second@example.com")


def test_display_name_with_space():
    with pytest.raises(ValidationError, match="spaces"):
        normalize_display_name("alice smith")


def test_display_name_charset():
    with pytest.raises(ValidationError):
        normalize_display_name("alice-smith")


async def test_login(auth):
    registered, _, _ = await register(auth)

    user, token, _ = await auth.login_user("alice@example.com", "secret123")

    assert user.id == registered.id
    assert token


async def test_login_wrong_password(auth):
    await register(auth)

    with pytest.raises(AuthenticationError):
        await auth.login_user("alice@example.com", "wrong-password")


async def test_login_unknown_email(auth):
    with pytest.raises(AuthenticationError):
        await auth.login_user("nobody@example.com", "secret123")


async def test_session_user(auth):
    registered, _, _ = await register(auth)

    assert (await auth.get_session_user(registered.id)).id == registered.id

    with pytest.raises(UserNotFoundError):
        await auth.get_session_user(uuid4())
