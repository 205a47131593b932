"""
API Handlers

Route handlers for the Reelfeed API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer, and service
exceptions are turned into JSON errors by the global error handler.
"""

from reelfeed.api.handlers import (
    auth_handler,
    health_handler,
    user_handler,
    video_handler,
)

__all__ = [
    "auth_handler",
    "health_handler",
    "user_handler",
    "video_handler",
]
