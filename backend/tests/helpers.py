"""Plain helpers shared by fixtures and tests."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from reelfeed.config.settings import settings
from reelfeed.shared.models import User
from reelfeed.shared.utils.security import SecurityUtils


BASE_TIME = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)
PASSWORD = "secret123"

_password_hash: Optional[str] = None


def password_hash() -> str:
    """bcrypt is slow on purpose; hash the shared test password once."""
    global _password_hash
    if _password_hash is None:
        _password_hash = SecurityUtils.hash_password(PASSWORD)
    return _password_hash


def minutes_after_base(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


def token_for(user: User) -> str:
    return SecurityUtils.create_access_token(
        data={"user_id": str(user.id), "email": user.email},
        secret_key=settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {token_for(user)}"}
