from pathlib import Path
import textwrap

import pytest
from typer.testing import CliRunner

from blogsmith.config import get_settings


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """
    Keep environment-derived settings deterministic for every test.
    """
    monkeypatch.setenv("FULLNAME", "Test Author")
    monkeypatch.delenv("BLOGSMITH_RENDER_COMMAND", raising=False)
    monkeypatch.delenv("BLOGSMITH_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def blog_site(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Create a minimal blog (marker file + empty _posts) and chdir into it.
    """
    site = tmp_path / "blog"
    (site / "_posts").mkdir(parents=True)
    (site / "_site.yml").write_text(
        textwrap.dedent(
            """
            name: "blog"
            title: "Test Blog"
            output_dir: "_site"
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(site)
    return site


@pytest.fixture
def write_post():
    """
    Return a helper writing a content file with a title-only front matter.
    """

    def _write(post_dir: Path, filename: str, title: str) -> Path:
        post_dir.mkdir(parents=True, exist_ok=True)
        path = post_dir / filename
        path.write_text(f'---\ntitle: "{title}"\n---\n\nBody text.\n', encoding="utf-8")
        return path

    return _write
