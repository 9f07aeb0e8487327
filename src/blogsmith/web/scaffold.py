"""
Create the skeleton of a new website or blog from the bundled templates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Literal, Optional

from ..config import DEFAULT_OUTPUT_DIR
from ..posts.authors import fullname
from ..prompts import InputResolver, default_input_resolver
from ..render import CommandRenderer, SiteRenderer, render_template
from ..site import POSTS_DIRNAME
from ..util import format_post_date, today, touch_file

logger = logging.getLogger(__name__)

SiteType = Literal["website", "blog"]

GH_PAGES_OUTPUT_DIR = "docs"
NOJEKYLL_FILENAME = ".nojekyll"
WELCOME_FILENAME = "welcome.Rmd"
WELCOME_DIRNAME = "welcome"


@dataclass
class ScaffoldReport:
    """
    Stores what changed when scaffolding ran.

    Attributes:
        root: The root directory of the new site.
        title: Title the site was created with.
        site_type: "website" or "blog".
        files_written: Files rendered from templates.
        files_skipped: Files left alone because they already existed.
        welcome_post: Welcome post written for blogs, if any.
    """
    root: Path
    title: str
    site_type: SiteType
    files_written: List[Path] = field(default_factory=list)
    files_skipped: List[Path] = field(default_factory=list)
    welcome_post: Optional[Path] = None

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Root", str(self.root))
        yield ("Type", self.site_type)
        yield ("Title", self.title)
        yield ("Files written", str(len(self.files_written)))
        yield ("Files skipped", str(len(self.files_skipped)))
        if self.welcome_post is not None:
            yield ("Welcome post", str(self.welcome_post))


def _write_template(
    file: str,
    site_type: str,
    target_dir: Path,
    data: Dict[str, Any],
    force: bool,
    report: ScaffoldReport,
) -> Path:
    """
    Render a template unless the target already exists (or ``force`` is set).
    """
    target = target_dir / file
    if target.exists() and not force:
        logger.info("Keeping existing %s", target)
        report.files_skipped.append(target)
        return target
    written = render_template(file, site_type, target_dir, data)
    report.files_written.append(written)
    return written


def scaffold_site(
    dir: Optional[Path | str],
    title: Optional[str],
    site_type: SiteType,
    *,
    gh_pages: bool = False,
    resolver: Optional[InputResolver] = None,
    force: bool = False,
) -> ScaffoldReport:
    """
    Write `_site.yml`, `index.Rmd` and `about.Rmd` for a new site.

    Missing ``dir``/``title`` values are obtained from ``resolver``
    (prompting on a terminal, failing otherwise).
    """
    resolver = resolver or default_input_resolver()
    if dir is None:
        dir = resolver.resolve("dir", f"Enter directory name for {site_type}")
    if title is None:
        title = resolver.resolve("title", f"Enter a title for the {site_type}")

    root = Path(dir).expanduser().resolve()
    logger.info("Creating %s directory %s", site_type, root)
    root.mkdir(parents=True, exist_ok=True)

    report = ScaffoldReport(root=root, title=title, site_type=site_type)
    _write_template(
        "_site.yml",
        site_type,
        root,
        {
            "name": root.name,
            "title": title,
            "output_dir": GH_PAGES_OUTPUT_DIR if gh_pages else DEFAULT_OUTPUT_DIR,
        },
        force,
        report,
    )
    _write_template("index.Rmd", site_type, root, {"title": title, "gh_pages": gh_pages}, force, report)
    _write_template("about.Rmd", site_type, root, {}, force, report)

    if gh_pages:
        nojekyll = root / NOJEKYLL_FILENAME
        logger.info("Creating %s for gh-pages", nojekyll)
        touch_file(nojekyll)

    return report


def create_website(
    dir: Optional[Path | str] = None,
    title: Optional[str] = None,
    *,
    gh_pages: bool = False,
    resolver: Optional[InputResolver] = None,
    renderer: Optional[SiteRenderer] = None,
    force: bool = False,
) -> ScaffoldReport:
    """
    Create a basic website skeleton in ``dir`` and render it.

    Args:
        dir: Directory for the website (prompted for when None).
        title: Title of the website (prompted for when None).
        gh_pages: Configure the site for publishing with GitHub Pages.
        resolver: Strategy for missing arguments.
        renderer: Renders the finished site; defaults to the configured command.
        force: Overwrite files that already exist.
    """
    report = scaffold_site(dir, title, "website", gh_pages=gh_pages, resolver=resolver, force=force)
    renderer = renderer or CommandRenderer.from_settings()
    logger.info("Rendering website...")
    renderer.render_site(report.root)
    return report


def create_blog(
    dir: Optional[Path | str] = None,
    title: Optional[str] = None,
    *,
    gh_pages: bool = False,
    resolver: Optional[InputResolver] = None,
    renderer: Optional[SiteRenderer] = None,
    force: bool = False,
) -> ScaffoldReport:
    """
    Create a blog skeleton with a welcome post, then render the post and the site.

    Arguments are the same as for :func:`create_website`.
    """
    report = scaffold_site(dir, title, "blog", gh_pages=gh_pages, resolver=resolver, force=force)

    welcome_dir = report.root / POSTS_DIRNAME / WELCOME_DIRNAME
    report.welcome_post = _write_template(
        WELCOME_FILENAME,
        "blog",
        welcome_dir,
        {"title": report.title, "author": fullname(), "date": format_post_date(today())},
        force,
        report,
    )

    renderer = renderer or CommandRenderer.from_settings()
    renderer.render_document(report.welcome_post)
    logger.info("Rendering blog...")
    renderer.render_site(report.root)
    return report
