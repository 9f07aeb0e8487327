"""
Text-related helpers.
"""

from __future__ import annotations

import re
from typing import Optional

_WHITESPACE = re.compile(r"\s+")
_INVALID_SLUG_CHARS = re.compile(r"[^a-zA-Z0-9\-]+")
_REPEATED_HYPHENS = re.compile(r"-{2,}")
_LEADING_HYPHENS = re.compile(r"^-+")
_TRAILING_HYPHENS = re.compile(r"-+$")


def normalize_slug(value: str) -> str:
    """
    Convert free text into a filesystem and URL safe slug.

    The result only holds lowercase ASCII letters, digits and single interior
    hyphens. It may be empty (e.g. for a title made only of punctuation).
    Normalizing an existing slug returns it unchanged.
    """
    slug = (value or "").lower()
    slug = _WHITESPACE.sub("-", slug)
    slug = _INVALID_SLUG_CHARS.sub("", slug)
    slug = _REPEATED_HYPHENS.sub("-", slug)
    slug = _LEADING_HYPHENS.sub("", slug)
    slug = _TRAILING_HYPHENS.sub("", slug)
    return slug


def resolve_slug(title: str, slug: Optional[str] = None) -> str:
    """
    Return the slug for a post, deriving it from ``title`` when ``slug`` is None.

    Explicit slugs are normalized as well.
    """
    return normalize_slug(title if slug is None else slug)
