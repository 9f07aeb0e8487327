import os

from blogsmith.config import get_settings, settings


def test_project_dotenv_overrides_environment(tmp_path, monkeypatch) -> None:
    project_dir = tmp_path / "project"
    project_env = project_dir / ".env"

    project_dir.mkdir()
    project_env.write_text("BLOGSMITH_RENDER_COMMAND=quarto render\n", encoding="utf-8")

    monkeypatch.chdir(project_dir)
    monkeypatch.setenv("BLOGSMITH_RENDER_COMMAND", "env-value")

    settings._load_dotenv()

    assert os.getenv("BLOGSMITH_RENDER_COMMAND") == "quarto render"
    get_settings.cache_clear()
    assert get_settings().render_command == "quarto render"


def test_settings_read_fullname(monkeypatch) -> None:
    monkeypatch.setenv("FULLNAME", "Ada Lovelace")
    get_settings.cache_clear()
    assert get_settings().fullname == "Ada Lovelace"
