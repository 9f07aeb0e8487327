"""
Website discovery helpers.
"""

from .locator import POSTS_DIRNAME, Site, find_site_dir, require_site_dir

__all__ = ["POSTS_DIRNAME", "Site", "find_site_dir", "require_site_dir"]
