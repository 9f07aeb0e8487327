"""
Template instantiation and site rendering.
"""

from .site import CommandRenderer, RenderError, SiteRenderer
from .templates import render_template, render_template_string

__all__ = ["CommandRenderer", "RenderError", "SiteRenderer", "render_template", "render_template_string"]
