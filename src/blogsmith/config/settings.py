"""
Settings loaded from the environment (and an optional `.env` file).
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Process-level preferences read from environment variables.

    Attributes:
        render_command: Command used to render a site or document
            (e.g. ``quarto render``). Rendering is skipped when unset.
        fullname: Author name used for new posts when no earlier post names one.
    """
    render_command: Optional[str] = Field(default=None, alias="BLOGSMITH_RENDER_COMMAND")
    fullname: Optional[str] = Field(default=None, alias="FULLNAME")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.
    """
    values = {field.alias: os.getenv(field.alias) for field in Settings.model_fields.values()}
    return Settings(**values)
