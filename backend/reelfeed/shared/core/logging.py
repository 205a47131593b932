"""
Logging Configuration

structlog on top of the standard logging module, configured on import.

Output:
=======
    development  → colored key=value lines
        2024-01-15T10:30:00Z [info     ] Like toggled  [reelfeed] user_id=550e8400-... is_liked=True
    otherwise    → one JSON object per line
        {"event": "Like toggled", "level": "info", "logger": "reelfeed", "user_id": "...", "timestamp": "..."}

Usage:
======
    from reelfeed.shared.core.logging import logger, get_logger, log_context

    logger.info("Video created", video_id=str(video.id))

    feed_logger = get_logger("feed")

    # Attached to every line logged later in the same request
    log_context(user_id=str(user_id))
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from reelfeed.config.settings import settings


def setup_logging() -> None:
    level = getattr(logging, settings.LOG_LEVEL.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    # SQL echo is controlled by DEBUG through the engine, not by LOG_LEVEL
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.DEBUG else logging.WARNING)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind key/values to every later log line in the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("reelfeed")
