"""
Shared utility helpers for filesystem, strings, and dates.
"""

from .filesystem import is_relative_to, touch_file, write_text_file
from .text import normalize_slug, resolve_slug
from .time import DatePrefixSpec, format_post_date, parse_date, resolve_date_prefix, today

__all__ = [
    "is_relative_to",
    "touch_file",
    "write_text_file",
    "normalize_slug",
    "resolve_slug",
    "DatePrefixSpec",
    "format_post_date",
    "parse_date",
    "resolve_date_prefix",
    "today",
]
