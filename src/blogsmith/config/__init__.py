"""
Configuration helpers for blogsmith sites.
"""

from .models import DEFAULT_OUTPUT_DIR, SITE_CONFIG_FILENAME, ConfigError, SiteConfig, load_site_config
from .settings import Settings, get_settings

__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "SITE_CONFIG_FILENAME",
    "ConfigError",
    "SiteConfig",
    "load_site_config",
    "Settings",
    "get_settings",
]
