"""
Pydantic models for loading the `_site.yml` marker configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ValidationError

from ..errors import BlogsmithError

SITE_CONFIG_FILENAME = "_site.yml"
DEFAULT_OUTPUT_DIR = "_site"


class ConfigError(BlogsmithError):
    """Raised when the site configuration cannot be loaded or validated."""


class SiteConfig(BaseModel):
    """
    Parsed contents of a website's `_site.yml`.

    Attributes:
        name: Short site name (defaults to the directory name when scaffolding).
        title: Display title of the site.
        output_dir: Directory (relative to the site root) rendered output goes to.

    Other keys (navbar, collections, ...) are kept as extra fields so they
    survive a round trip even though blogsmith never reads them.
    """
    name: Optional[str] = None
    title: Optional[str] = None
    output_dir: str = DEFAULT_OUTPUT_DIR

    model_config = {
        "extra": "allow",
    }


def load_site_config(site_dir: Path | str) -> SiteConfig:
    """
    Load and validate the marker configuration of the site rooted at ``site_dir``.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(site_dir).expanduser().resolve() / SITE_CONFIG_FILENAME
    if not config_path.is_file():
        raise ConfigError(f"Site configuration not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as handle:
            raw_data: Any = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read site configuration: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    # An empty _site.yml is still a valid marker.
    if raw_data is None:
        raw_data = {}
    if not isinstance(raw_data, dict):
        raise ConfigError(f"{config_path} must contain a YAML mapping.")

    data: Dict[str, Any] = dict(raw_data)
    if data.get("output_dir") is None:
        data.pop("output_dir", None)

    try:
        return SiteConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
