"""
Custom Exceptions

Application errors carry their own HTTP status and machine-readable code,
so services raise them directly and the API turns them into JSON.

Exception Hierarchy:
====================
    ReelfeedException (500 INTERNAL_ERROR)
       │
       ├── AuthenticationError (401 AUTHENTICATION_ERROR)
       ├── NotFoundError (404 NOT_FOUND)
       │      ├── UserNotFoundError
       │      └── VideoNotFoundError
       ├── ValidationError (400 VALIDATION_ERROR)
       └── ConflictError (409 CONFLICT)
              └── DuplicateResourceError

Response Body:
==============
    raise VideoNotFoundError(str(video_id))

    {"error": {"code": "NOT_FOUND", "message": "Video with id 'abc' not found", "details": {}}}
"""

from typing import Any, ClassVar, Optional


class ReelfeedException(Exception):
    """
    Base exception for all Reelfeed application errors.

    Subclasses set ``status_code``, ``error_code`` and ``default_message``.

    Attributes:
        message: Human-readable error message
        details: Additional error context (field names, offending values)
    """

    status_code: ClassVar[int] = 500
    error_code: ClassVar[str] = "INTERNAL_ERROR"
    default_message: ClassVar[str] = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Body of the JSON error response."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


class AuthenticationError(ReelfeedException):
    """
    Missing or unusable credentials (401).

    Raised for a request with neither bearer token nor auth cookie, a bad
    or expired token, and a failed login.
    """

    status_code = 401
    error_code = "AUTHENTICATION_ERROR"
    default_message = "Authentication failed"


class NotFoundError(ReelfeedException):
    """
    Referenced entity does not exist (404).

    Example:
        raise NotFoundError("Video", video_id)
        # "Video with id 'abc-123' not found"
    """

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, details)


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str) -> None:
        super().__init__("User", user_id)


class VideoNotFoundError(NotFoundError):
    def __init__(self, video_id: str) -> None:
        super().__init__("Video", video_id)


class ValidationError(ReelfeedException):
    """
    Business-rule violation the request schemas cannot express (400).

    e.g. a display name with spaces, following yourself, limit out of range.
    """

    status_code = 400
    error_code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class ConflictError(ReelfeedException):
    """State conflict (409)."""

    status_code = 409
    error_code = "CONFLICT"
    default_message = "Resource conflict"


class DuplicateResourceError(ConflictError):
    """A unique field (email, display name) is already taken."""

    default_message = "Resource already exists"
