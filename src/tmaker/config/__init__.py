"""Configuration management for tmaker."""

from .settings import (
    CONFIG_FILE,
    DEFAULT_REMOTE_URL,
    TEMPLATE_DIR,
    Settings,
    get_settings,
    load_settings,
)

__all__ = [
    "CONFIG_FILE",
    "DEFAULT_REMOTE_URL",
    "TEMPLATE_DIR",
    "Settings",
    "get_settings",
    "load_settings",
]
