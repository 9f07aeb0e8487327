"""
Command line interface for creating distill-style websites, blogs and posts.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .errors import BlogsmithError
from .posts import create_post as _create_post
from .posts import rename_post_dir
from .posts.rename import RenameResult
from .prompts import default_input_resolver
from .util import DatePrefixSpec, parse_date
from .web import ScaffoldReport, create_blog as _create_blog, create_website as _create_website

console = Console()
app = typer.Typer(help="Create distill-style websites and blogs, and manage blog posts.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv("BLOGSMITH_LOG_LEVEL")
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _fail(exc: BlogsmithError) -> typer.Exit:
    console.print(f"[bold red]Error:[/] {escape(str(exc))}")
    return typer.Exit(code=1)


def _date_prefix_option(date_prefix: Optional[str], no_date_prefix: bool) -> DatePrefixSpec:
    if no_date_prefix:
        return None
    if date_prefix is not None:
        return date_prefix
    return True


def _print_summary(title: str, rows) -> None:
    table = Table(title=title)
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in rows:
        table.add_row(key, value)
    console.print(table)


def _print_scaffold_report(report: ScaffoldReport) -> None:
    _print_summary("Scaffold Summary", report.summary_rows())


def _edit(path: Path) -> None:
    logger.info("Opening %s", path)
    typer.launch(str(path))


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show blogsmith version and exit.",
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]blogsmith[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]blogsmith[/] is ready. Run [cyan]blogsmith create-blog DIR TITLE[/] "
            "to start a new blog.",
        )


def _scaffold_command(kind: str, dir: Optional[Path], title: Optional[str], gh_pages: bool, edit: bool, force: bool) -> None:
    create = _create_blog if kind == "blog" else _create_website
    try:
        report = create(dir, title, gh_pages=gh_pages, resolver=default_input_resolver(), force=force)
    except BlogsmithError as exc:
        raise _fail(exc) from exc
    _print_scaffold_report(report)
    console.print(f"[bold green]Created {kind} at[/] {escape(str(report.root))}")
    if edit:
        _edit(report.welcome_post or report.root / "index.Rmd")


@app.command("create-website")
def create_website(
    dir: Optional[Path] = typer.Argument(None, help="Directory for the website."),
    title: Optional[str] = typer.Argument(None, help="Title of the website."),
    gh_pages: bool = typer.Option(False, "--gh-pages", help="Configure the site for publishing on GitHub Pages."),
    edit: bool = typer.Option(False, "--edit", help="Open the site index file in an editor."),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite files that already exist."),
) -> None:
    """
    Create a basic distill website skeleton.
    """
    _scaffold_command("website", dir, title, gh_pages, edit, force)


@app.command("create-blog")
def create_blog(
    dir: Optional[Path] = typer.Argument(None, help="Directory for the blog."),
    title: Optional[str] = typer.Argument(None, help="Title of the blog."),
    gh_pages: bool = typer.Option(False, "--gh-pages", help="Configure the site for publishing on GitHub Pages."),
    edit: bool = typer.Option(False, "--edit", help="Open the welcome post in an editor."),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite files that already exist."),
) -> None:
    """
    Create a distill blog skeleton with a welcome post.
    """
    _scaffold_command("blog", dir, title, gh_pages, edit, force)


@app.command("create-post")
def create_post(
    title: str = typer.Argument(..., help="Post title."),
    author: Optional[str] = typer.Option(
        None,
        "--author",
        help="Post author (defaults to the author of the most recent post).",
    ),
    slug: Optional[str] = typer.Option(None, "--slug", help="Post slug (defaults to one computed from the title)."),
    date: Optional[str] = typer.Option(None, "--date", help="Post date, or 'today' (defaults to today)."),
    date_prefix: Optional[str] = typer.Option(
        None,
        "--date-prefix",
        help="Date used to prefix the post directory, or 'today' (defaults to the post date).",
    ),
    no_date_prefix: bool = typer.Option(False, "--no-date-prefix", help="Do not prefix the post directory with a date."),
    draft: bool = typer.Option(False, "--draft", help="Mark the post as a draft."),
    edit: bool = typer.Option(False, "--edit", help="Open the post in an editor after creating it."),
) -> None:
    """
    Create a new blog post in the website enclosing the current directory.
    """
    try:
        post_date = parse_date(date, label="post date") if date is not None else None
        post_file = _create_post(
            title,
            author=author,
            slug=slug,
            date=post_date,
            date_prefix=_date_prefix_option(date_prefix, no_date_prefix),
            draft=draft,
        )
    except BlogsmithError as exc:
        raise _fail(exc) from exc
    console.print(f"[bold green]Created post[/] {escape(str(post_file))}")
    if edit:
        _edit(post_file)


@app.command("rename-post")
def rename_post(
    post_dir: Path = typer.Argument(..., help="Post directory, relative to the website root."),
    slug: Optional[str] = typer.Option(None, "--slug", help="New slug (defaults to one computed from the title)."),
    date_prefix: Optional[str] = typer.Option(
        None,
        "--date-prefix",
        help="Date used to prefix the post directory, or 'today' (defaults to today).",
    ),
    no_date_prefix: bool = typer.Option(False, "--no-date-prefix", help="Do not prefix the post directory with a date."),
    title: Optional[str] = typer.Option(None, "--title", help="Title to derive the slug from (defaults to the post title)."),
) -> None:
    """
    Rename a post directory to match its title and date prefix.
    """
    try:
        result: RenameResult = rename_post_dir(
            post_dir,
            slug=slug,
            date_prefix=_date_prefix_option(date_prefix, no_date_prefix),
            title=title,
        )
    except BlogsmithError as exc:
        raise _fail(exc) from exc
    if result.renamed:
        console.print(f'[bold green]Post directory renamed to[/] "{escape(result.display_target)}"')
    else:
        console.print(f'[yellow]Post directory already has name[/] "{escape(result.display_target)}"')


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
