"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT management
- pagination: Feed cursor parsing/rendering and row grouping

Usage:
======
    from reelfeed.shared.utils.security import SecurityUtils
    from reelfeed.shared.utils.pagination import parse_cursor, encode_cursor
"""

from reelfeed.shared.utils.security import SecurityUtils
from reelfeed.shared.utils.pagination import (
    as_utc,
    parse_cursor,
    encode_cursor,
    split_window,
    group_rows,
    in_order,
    GroupedVideo,
)

__all__ = [
    "SecurityUtils",
    "as_utc",
    "parse_cursor",
    "encode_cursor",
    "split_window",
    "group_rows",
    "in_order",
    "GroupedVideo",
]
