"""
Scaffolding helpers for distill-style websites, blogs and their posts.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("blogsmith")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
