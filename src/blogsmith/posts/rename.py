"""
Rename post directories to match their title and date.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..errors import BlogsmithError, CollisionError, NotFoundError, UsageError
from ..site import Site
from ..util import DatePrefixSpec, is_relative_to
from .discovery import find_post_title
from .paths import PostIdentity

logger = logging.getLogger(__name__)


@dataclass
class RenameResult:
    """
    Outcome of :func:`rename_post_dir`.

    Attributes:
        site_root: Root directory of the website.
        source: Post directory before the rename.
        target: Post directory after the rename.
        renamed: False when the directory already had the computed name.
    """
    site_root: Path
    source: Path
    target: Path
    renamed: bool

    @property
    def display_target(self) -> str:
        if is_relative_to(self.target, self.site_root):
            return self.target.relative_to(self.site_root).as_posix()
        return str(self.target)


def rename_post_dir(
    post_dir: Path | str,
    *,
    slug: Optional[str] = None,
    date_prefix: DatePrefixSpec = True,
    title: Optional[str] = None,
    cwd: Path | str = ".",
) -> RenameResult:
    """
    Move a post directory to the name computed from its title and date prefix.

    Args:
        post_dir: Post directory, relative to the website root or absolute.
        slug: New slug; derived from the post title when None.
        date_prefix: Date prefix (``True`` for today, None for no prefix).
        title: Title to derive the slug from; read from the post when None.
        cwd: Directory to start searching for the website from.

    Raises:
        NotInProjectError: If ``cwd`` is not inside a website.
        NotFoundError: If the post directory or its title cannot be found.
        CollisionError: If a different directory already has the new name.
        UsageError: If the new name lies inside the post directory itself.
        BlogsmithError: If the filesystem refuses the move.
    """
    site = Site.discover(cwd, action="rename_post_dir")

    source = (site.root / post_dir).resolve()
    if not source.is_dir():
        raise NotFoundError(f'Unable to find post to rename at "{source}"')

    if title is None:
        title = find_post_title(source)

    identity = PostIdentity.from_title(title, slug, date_prefix)
    if not identity.slug:
        raise UsageError(f"Unable to derive a slug from title '{title}'; pass an explicit slug")
    target = identity.post_dir(site.posts_dir).resolve()

    result = RenameResult(site_root=site.root, source=source, target=target, renamed=False)
    if source == target:
        logger.info('Post directory already has name "%s"', result.display_target)
        return result

    if target.exists():
        raise CollisionError(f"Cannot rename '{source}': post directory '{target}' already exists.")
    if is_relative_to(target, source):
        raise UsageError(f"Cannot move '{source}' into its own subdirectory '{target}'.")

    try:
        source.rename(target)
    except OSError as exc:
        raise BlogsmithError(f"Unable to rename '{source}' to '{target}': {exc}") from exc
    result.renamed = True
    logger.info('Post directory renamed to "%s"', result.display_target)
    return result
