"""
Create new blog posts inside an existing website.
"""

from __future__ import annotations

import logging
from datetime import date as Date
from pathlib import Path
from typing import Optional

from ..errors import CollisionError, UsageError
from ..render import render_template_string
from ..site import Site
from ..util import DatePrefixSpec, format_post_date, today, write_text_file
from .authors import AuthorSpec, authors_to_yaml, resolve_authors
from .paths import PostIdentity

logger = logging.getLogger(__name__)

POST_EXTENSION = ".Rmd"


def render_post(
    title: str,
    *,
    authors_yaml: str,
    post_date: Date,
    draft: bool = False,
) -> str:
    """Return the text of a new post file (front matter plus starter body)."""
    return render_template_string(
        "post.Rmd",
        "post",
        {
            "title": title,
            "author_yaml": authors_yaml,
            "date": format_post_date(post_date),
            "draft": draft,
        },
    )


def create_post(
    title: str,
    *,
    author: Optional[AuthorSpec] = None,
    slug: Optional[str] = None,
    date: Optional[Date] = None,
    date_prefix: DatePrefixSpec = True,
    draft: bool = False,
    cwd: Path | str = ".",
) -> Path:
    """
    Create ``_posts/<prefix>-<slug>/<slug>.Rmd`` in the website enclosing ``cwd``.

    Args:
        title: Post title.
        author: Author name or list of author mappings. When None, the author of
            the most recent rendered post is reused.
        slug: Directory name; derived from ``title`` when None.
        date: Post date (defaults to today).
        date_prefix: Date prefix for the directory. ``True`` uses the post date,
            None creates an undated directory; strings and dates are parsed.
        draft: Mark the post as a draft.
        cwd: Directory to start searching for the website from.

    Returns:
        Path of the created post file.

    Raises:
        NotInProjectError: If ``cwd`` is not inside a website.
        UsageError: If no slug can be derived from the title.
        ParseError: If ``date_prefix`` is not a valid date or the posts index is malformed.
        CollisionError: If the post directory already exists.
    """
    site = Site.discover(cwd, action="create_post")

    post_date = date or today()
    if date_prefix is True:
        date_prefix = post_date
    identity = PostIdentity.from_title(title, slug, date_prefix)
    if not identity.slug:
        raise UsageError(f"Unable to derive a slug from title '{title}'; pass an explicit slug")
    post_dir = identity.post_dir(site.posts_dir)

    # Resolve everything that can fail before touching the filesystem.
    authors = resolve_authors(author, site.posts_index)
    content = render_post(title, authors_yaml=authors_to_yaml(authors), post_date=post_date, draft=draft)

    if post_dir.exists():
        raise CollisionError(f"Post directory '{post_dir}' already exists.")
    post_dir.mkdir(parents=True)

    post_file = post_dir / f"{identity.slug}{POST_EXTENSION}"
    logger.info("Creating %s", post_file)
    return write_text_file(post_file, content)
