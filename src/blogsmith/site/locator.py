"""
Locate the website enclosing a working directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import SITE_CONFIG_FILENAME, SiteConfig, load_site_config
from ..errors import NotInProjectError

logger = logging.getLogger(__name__)

POSTS_DIRNAME = "_posts"


def find_site_dir(start: Path | str = ".") -> Optional[Path]:
    """
    Search ``start`` and its parents for a directory holding `_site.yml`.

    Args:
        start: Directory to begin the upward search from.

    Returns:
        The absolute site directory, or None if the filesystem root is reached.
    """
    current = Path(start).expanduser().resolve()
    for candidate in (current, *current.parents):
        if (candidate / SITE_CONFIG_FILENAME).is_file():
            logger.debug("Found %s in %s", SITE_CONFIG_FILENAME, candidate)
            return candidate
    return None


def require_site_dir(start: Path | str = ".", *, action: str = "this command") -> Path:
    """
    Like :func:`find_site_dir` but raise when no website encloses ``start``.

    Raises:
        NotInProjectError: If no enclosing website is found.
    """
    site_dir = find_site_dir(start)
    if site_dir is None:
        raise NotInProjectError(
            f"You must call {action} from within a website (no {SITE_CONFIG_FILENAME} found above "
            f"{Path(start).expanduser().resolve()})"
        )
    return site_dir


@dataclass(frozen=True)
class Site:
    """
    A website discovered on disk together with its configuration.

    Attributes:
        root: Absolute path of the directory holding `_site.yml`.
        config: Parsed `_site.yml`.
    """
    root: Path
    config: SiteConfig

    @classmethod
    def discover(cls, start: Path | str = ".", *, action: str = "this command") -> "Site":
        root = require_site_dir(start, action=action)
        return cls(root=root, config=load_site_config(root))

    @property
    def posts_dir(self) -> Path:
        return self.root / POSTS_DIRNAME

    @property
    def output_dir(self) -> Path:
        return self.root / self.config.output_dir

    @property
    def posts_index(self) -> Path:
        """Listing of previously rendered posts (may not exist yet)."""
        return self.output_dir / "posts" / "posts.json"
