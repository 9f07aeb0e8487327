"""
Compose post directory paths from a slug and an optional date prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..util.text import resolve_slug
from ..util.time import DatePrefixSpec, resolve_date_prefix


def _dirname(slug: str, date_prefix: Optional[str]) -> str:
    if date_prefix is None:
        return slug
    return f"{date_prefix}-{slug}"


@dataclass(frozen=True)
class PostIdentity:
    """
    The pieces that name a post directory.

    Attributes:
        title: Free-text post title.
        slug: Normalized slug derived from the title or given explicitly.
        date_prefix: ``YYYY-MM-DD`` token, or None for an undated directory.
    """
    title: str
    slug: str
    date_prefix: Optional[str] = None

    @classmethod
    def from_title(
        cls,
        title: str,
        slug: Optional[str] = None,
        date_prefix: DatePrefixSpec = None,
    ) -> "PostIdentity":
        """Normalize ``slug`` (or derive it from ``title``) and resolve ``date_prefix``."""
        return cls(title=title, slug=resolve_slug(title, slug), date_prefix=resolve_date_prefix(date_prefix))

    @property
    def dirname(self) -> str:
        return _dirname(self.slug, self.date_prefix)

    def post_dir(self, posts_root: Path | str) -> Path:
        return Path(posts_root) / self.dirname


def resolve_post_dir(posts_root: Path | str, slug: str, date_prefix: DatePrefixSpec = None) -> Path:
    """
    Return ``posts_root/slug`` or ``posts_root/<date_prefix>-slug``.

    ``date_prefix`` may be a ``YYYY-MM-DD`` token or anything
    :func:`resolve_date_prefix` accepts (``True``, ``"9/15/2020"``, a date).
    The filesystem is never consulted; callers decide how to handle existing paths.
    """
    return Path(posts_root) / _dirname(slug, resolve_date_prefix(date_prefix))
