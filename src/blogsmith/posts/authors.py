"""
Work out which author(s) a new post should list.
"""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml

from ..config import get_settings
from ..errors import ParseError

logger = logging.getLogger(__name__)

FALLBACK_AUTHOR = "Unknown"

AuthorSpec = Union[str, Sequence[Dict[str, Any]]]


class _IndentedDumper(yaml.SafeDumper):
    """Indent sequences nested under a mapping key (``author:\\n  - name: ...``)."""

    def increase_indent(self, flow: bool = False, indentless: bool = False):
        return super().increase_indent(flow, False)


def _git_user_name() -> Optional[str]:
    try:
        result = subprocess.run(
            ["git", "config", "--get", "user.name"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.debug("git unavailable for author lookup (%s)", exc)
        return None
    name = result.stdout.strip()
    return name or None


def fullname(fallback: str = FALLBACK_AUTHOR) -> str:
    """
    Best guess at the current user's full name.

    Checks the ``FULLNAME`` setting, then ``git config user.name``.
    """
    configured = get_settings().fullname
    if configured and configured.strip():
        return configured.strip()
    return _git_user_name() or fallback


def load_posts_index(index_path: Path) -> List[Dict[str, Any]]:
    """
    Read the rendered posts listing, newest first.

    A missing index is normal for a site that has not been rendered yet.

    Raises:
        ParseError: If the index exists but is unreadable or not a JSON array.
    """
    if not index_path.exists():
        return []
    try:
        data = json.loads(index_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ParseError(f"Unable to read posts index {index_path}: {exc}") from exc
    if not isinstance(data, list):
        raise ParseError(f"Posts index {index_path} must contain a JSON array")
    return [post for post in data if isinstance(post, dict)]


def resolve_authors(author: Optional[AuthorSpec], index_path: Optional[Path] = None) -> List[Dict[str, Any]]:
    """
    Return the author list for a new post.

    An explicit ``author`` (a name or a list of author mappings) wins. Otherwise
    the authors of the most recent post in the posts index are reused, falling
    back to :func:`fullname`.
    """
    if isinstance(author, str):
        return [{"name": author}]
    if author is not None:
        return [dict(entry) for entry in author]

    if index_path is not None:
        posts = load_posts_index(index_path)
        if posts and posts[0].get("author"):
            previous = posts[0]["author"]
            logger.debug("Reusing author(s) of the most recent post: %s", previous)
            if isinstance(previous, list):
                return [entry if isinstance(entry, dict) else {"name": str(entry)} for entry in previous]
            return [previous if isinstance(previous, dict) else {"name": str(previous)}]

    return [{"name": fullname()}]


def authors_to_yaml(authors: List[Dict[str, Any]]) -> str:
    """Serialize ``authors`` as an ``author:`` front matter block."""
    return yaml.dump(
        {"author": authors},
        Dumper=_IndentedDumper,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )
