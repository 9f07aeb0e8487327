"""
Render the project templates bundled with blogsmith.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional

from jinja2 import Environment, PackageLoader, StrictUndefined

from ..util import write_text_file

logger = logging.getLogger(__name__)


def _yaml_string(value: Any) -> str:
    """Quote ``value`` as a double-quoted YAML scalar."""
    return json.dumps(str(value), ensure_ascii=False)


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("blogsmith", "templates"),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters["yaml_string"] = _yaml_string
    return env


def render_template_string(file: str, type: str, data: Optional[Mapping[str, Any]] = None) -> str:
    """Render the bundled template ``<type>/<file>`` and return its text."""
    template = template_environment().get_template(f"{type}/{file}")
    return template.render(**dict(data or {}))


def render_template(
    file: str,
    type: str,
    target_dir: Path | str,
    data: Optional[Mapping[str, Any]] = None,
) -> Path:
    """
    Render ``<type>/<file>`` with ``data`` and write it to ``target_dir/file``.

    Args:
        file: Template file name (also used as the output file name).
        type: Template family ("website", "blog" or "post").
        target_dir: Directory to write into; created if missing.
        data: Values exposed to the template.

    Returns:
        The path written.
    """
    target = Path(target_dir) / file
    logger.info("Creating %s", target)
    return write_text_file(target, render_template_string(file, type, data))
