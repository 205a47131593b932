"""
Security Utilities

bcrypt password hashes (passlib) and HS256 session tokens (PyJWT).

Token payload:
==============
    {"user_id": "550e8400-...", "email": "jane@example.com", "iat": ..., "exp": ...}

The same token is returned in the login body and set as the auth cookie;
``exp`` is always present and always checked.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from passlib.context import CryptContext


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

DEFAULT_TOKEN_LIFETIME = timedelta(hours=1)
REQUIRED_CLAIMS = ["exp", "iat"]


class SecurityUtils:
    """Stateless helpers for passwords and tokens."""

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def create_access_token(
        data: dict[str, Any],
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Sign ``data`` plus ``iat``/``exp`` claims.

        Args:
            data: Claims to embed (user_id, email)
            secret_key: Signing key
            expires_delta: Lifetime, one hour when omitted
            algorithm: Signing algorithm

        Returns:
            Encoded token
        """
        now = datetime.now(timezone.utc)
        claims = {
            **data,
            "iat": now,
            "exp": now + (expires_delta or DEFAULT_TOKEN_LIFETIME),
        }
        return jwt.encode(claims, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict[str, Any]:
        """
        Verify signature and expiry, then return the claims.

        Raises:
            ValueError: If the token is expired, malformed or wrongly signed
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise ValueError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}") from e
