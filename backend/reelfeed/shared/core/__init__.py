"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from reelfeed.shared.core.logging import logger, get_logger
    from reelfeed.shared.core.exceptions import ReelfeedException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from reelfeed.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from reelfeed.shared.core.exceptions import (
    ReelfeedException,
    AuthenticationError,
    NotFoundError,
    UserNotFoundError,
    VideoNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "ReelfeedException",
    "AuthenticationError",
    "NotFoundError",
    "UserNotFoundError",
    "VideoNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
]
