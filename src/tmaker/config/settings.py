"""Settings resolution.

The template store lives under the user's home directory:
- `$HOME/.local/template` unless overridden.
- An optional YAML file at `$HOME/.config/tmaker/config.yml` may set
  `template_root` and a `remote` section with `url` and `branch`.
- `TMAKER_TEMPLATE_ROOT` overrides the template root from either source.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..errors import ConfigError, MissingEnvironmentError

TEMPLATE_DIR = ".local/template"
CONFIG_FILE = ".config/tmaker/config.yml"
DEFAULT_REMOTE_URL = "https://github.com/chlorat3/template.git"
TEMPLATE_ROOT_ENV = "TMAKER_TEMPLATE_ROOT"


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one invocation."""

    home: Path
    template_root: Path
    remote_url: str = DEFAULT_REMOTE_URL
    remote_branch: Optional[str] = None
    config_file: Optional[Path] = None


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")
    return data


def _resolve_root(value: str, home: Path) -> Path:
    # `~` refers to the resolved HOME, not the process environment
    if value == "~" or value.startswith("~/"):
        value = value[2:]
    elif value.startswith("~"):
        raise ConfigError(
            f"Unsupported template root '{value}': only ~ and ~/ are expanded"
        )
    root = Path(value)
    if not root.is_absolute():
        root = home / root
    return root


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Resolve settings from the environment and the optional config file."""
    env = os.environ if environ is None else environ
    home_value = env.get("HOME")
    if not home_value:
        raise MissingEnvironmentError("HOME")
    home = Path(home_value)

    template_root = home / TEMPLATE_DIR
    remote_url = DEFAULT_REMOTE_URL
    remote_branch: Optional[str] = None

    config_path = home / CONFIG_FILE
    loaded_from: Optional[Path] = None
    if config_path.is_file():
        loaded_from = config_path
        data = _read_config(config_path)
        root_value = data.get("template_root")
        if root_value is not None:
            if not isinstance(root_value, str):
                raise ConfigError(f"'template_root' must be a string in {config_path}")
            template_root = _resolve_root(root_value, home)
        remote = data.get("remote") or {}
        if not isinstance(remote, dict):
            raise ConfigError(f"'remote' must be a mapping in {config_path}")
        url = remote.get("url", remote_url)
        branch = remote.get("branch")
        if not isinstance(url, str) or not url:
            raise ConfigError(
                f"'remote.url' must be a non-empty string in {config_path}"
            )
        if branch is not None and not isinstance(branch, str):
            raise ConfigError(f"'remote.branch' must be a string in {config_path}")
        remote_url = url
        remote_branch = branch

    override = env.get(TEMPLATE_ROOT_ENV)
    if override:
        template_root = _resolve_root(override, home)

    return Settings(
        home=home,
        template_root=template_root,
        remote_url=remote_url,
        remote_branch=remote_branch,
        config_file=loaded_from,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return settings for the current process (memoized)."""
    return load_settings()
