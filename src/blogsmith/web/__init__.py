"""
Website and blog scaffolding.
"""

from .scaffold import ScaffoldReport, create_blog, create_website, scaffold_site

__all__ = ["ScaffoldReport", "create_blog", "create_website", "scaffold_site"]
