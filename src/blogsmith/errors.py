"""
Exception hierarchy shared by the post and site helpers.
"""

from __future__ import annotations


class BlogsmithError(RuntimeError):
    """Base class for user-facing errors raised by blogsmith."""


class UsageError(BlogsmithError):
    """Raised when a required argument is missing and cannot be resolved."""


class NotInProjectError(BlogsmithError):
    """Raised when the working directory is not inside a website."""


class NotFoundError(BlogsmithError):
    """Raised when a post directory or a title-bearing content file is missing."""


class CollisionError(BlogsmithError):
    """Raised when a post directory already exists at the target path."""


class ParseError(BlogsmithError):
    """Raised when a date, front matter block or posts index cannot be parsed."""
