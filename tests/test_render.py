import logging
import subprocess
from pathlib import Path

import pytest
from jinja2 import UndefinedError

from blogsmith.render import CommandRenderer, RenderError, render_template, render_template_string


def test_render_template_writes_file(tmp_path: Path) -> None:
    target_dir = tmp_path / "new" / "site"
    path = render_template(
        "_site.yml",
        "website",
        target_dir,
        {"name": "site", "title": 'My "Site"', "output_dir": "_site"},
    )
    assert path == (target_dir / "_site.yml").resolve()
    text = path.read_text(encoding="utf-8")
    assert 'title: "My \\"Site\\""' in text
    assert 'output_dir: "_site"' in text


def test_missing_template_variable_raises() -> None:
    with pytest.raises(UndefinedError):
        render_template_string("index.Rmd", "website", {})


def test_no_command_skips_rendering(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    def unexpected(*args, **kwargs):
        raise AssertionError("subprocess should not run")

    monkeypatch.setattr(subprocess, "run", unexpected)
    caplog.set_level(logging.INFO)

    renderer = CommandRenderer(None)
    renderer.render_site(tmp_path)
    renderer.render_document(tmp_path / "index.Rmd")
    assert "skipping render" in caplog.text


def test_command_runs_in_site_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_run(args, cwd=None, check=False):
        calls.append((args, cwd, check))

    monkeypatch.setattr(subprocess, "run", fake_run)
    renderer = CommandRenderer("quarto render --quiet")
    document = tmp_path / "_posts" / "welcome" / "welcome.Rmd"

    renderer.render_site(tmp_path)
    renderer.render_document(document)

    assert calls == [
        (["quarto", "render", "--quiet"], tmp_path, True),
        (["quarto", "render", "--quiet", str(document)], document.parent, True),
    ]


def test_failed_command_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing(args, cwd=None, check=False):
        raise subprocess.CalledProcessError(2, args)

    monkeypatch.setattr(subprocess, "run", failing)
    with pytest.raises(RenderError) as exc:
        CommandRenderer("render-site").render_site(tmp_path)
    assert "exit code 2" in str(exc.value)


def test_missing_command_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def missing(args, cwd=None, check=False):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(subprocess, "run", missing)
    with pytest.raises(RenderError):
        CommandRenderer("no-such-binary").render_site(tmp_path)


def test_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from blogsmith.config import get_settings

    monkeypatch.setenv("BLOGSMITH_RENDER_COMMAND", "make site")
    get_settings.cache_clear()
    assert CommandRenderer.from_settings().command == "make site"
