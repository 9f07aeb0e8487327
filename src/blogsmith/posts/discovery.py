"""
Find existing post content files and read their front matter.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, List

import frontmatter
import yaml

from ..errors import NotFoundError, ParseError

logger = logging.getLogger(__name__)

# Markdown-like content files; names starting with "_" are partials.
POST_FILE_PATTERN = re.compile(r"^[^_].*\.[Rr]?md$")


def list_post_files(post_dir: Path | str) -> List[Path]:
    """
    Return content files directly inside ``post_dir``, in lexical order.
    """
    directory = Path(post_dir)
    if not directory.is_dir():
        raise NotFoundError(f"No post found in {directory}")
    return sorted(
        (path for path in directory.iterdir() if path.is_file() and POST_FILE_PATTERN.match(path.name)),
        key=lambda path: path.name,
    )


def read_front_matter(path: Path) -> Dict[str, Any]:
    """
    Return the YAML front matter of ``path`` (empty when the file has none).

    Raises:
        ParseError: If the front matter is not valid YAML or not a mapping.
    """
    try:
        post = frontmatter.load(str(path))
    except (yaml.YAMLError, ValueError) as exc:
        raise ParseError(f"Unable to parse front matter in {path}: {exc}") from exc
    metadata = post.metadata or {}
    if not isinstance(metadata, dict):
        raise ParseError(f"Front matter in {path} is not a mapping")
    return dict(metadata)


def find_post_title(post_dir: Path | str) -> str:
    """
    Return the title declared by the first content file in ``post_dir``.

    Candidates are scanned in lexical order and the first non-empty ``title``
    wins.

    Raises:
        NotFoundError: If no candidate file declares a title.
        ParseError: If a candidate file has malformed front matter.
    """
    for path in list_post_files(post_dir):
        title = read_front_matter(path).get("title")
        if title is not None and str(title).strip():
            logger.debug("Read title %r from %s", title, path)
            return str(title)
    raise NotFoundError(f"No post found in {post_dir}")
