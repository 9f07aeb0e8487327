"""
Post creation, discovery and renaming.
"""

from .create import create_post
from .discovery import find_post_title, list_post_files
from .paths import PostIdentity, resolve_post_dir
from .rename import RenameResult, rename_post_dir

__all__ = [
    "create_post",
    "find_post_title",
    "list_post_files",
    "PostIdentity",
    "resolve_post_dir",
    "RenameResult",
    "rename_post_dir",
]
