"""
Delegate rendering of sites and documents to an external command.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Protocol

from ..config import get_settings
from ..errors import BlogsmithError

logger = logging.getLogger(__name__)


class RenderError(BlogsmithError):
    """Raised when the external render command fails."""


class SiteRenderer(Protocol):
    def render_site(self, site_dir: Path) -> None: ...

    def render_document(self, path: Path) -> None: ...


class CommandRenderer:
    """
    Run a configured shell-style command to render a site or a single document.

    The site is rendered by running ``command`` inside the site directory; a
    document by running ``command <path>`` inside the document's directory.
    With no command configured, rendering is skipped.
    """

    def __init__(self, command: Optional[str] = None) -> None:
        self.command = command

    @classmethod
    def from_settings(cls) -> "CommandRenderer":
        return cls(get_settings().render_command)

    def _run(self, args: List[str], cwd: Path) -> None:
        logger.debug("Running %s in %s", args, cwd)
        try:
            subprocess.run(args, cwd=cwd, check=True)
        except FileNotFoundError as exc:
            raise RenderError(f"Render command not found: {args[0]}") from exc
        except subprocess.CalledProcessError as exc:
            raise RenderError(f"Render command failed with exit code {exc.returncode}: {shlex.join(args)}") from exc

    def render_site(self, site_dir: Path) -> None:
        if not self.command:
            logger.info("No render command configured; skipping render of %s", site_dir)
            return
        logger.info("Rendering site in %s...", site_dir)
        self._run(shlex.split(self.command), cwd=site_dir)

    def render_document(self, path: Path) -> None:
        if not self.command:
            logger.info("No render command configured; skipping render of %s", path)
            return
        logger.info("Rendering %s...", path)
        self._run([*shlex.split(self.command), str(path)], cwd=path.parent)
