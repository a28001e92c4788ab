from __future__ import annotations

from pathlib import Path

import pytest

from tmaker.config import DEFAULT_REMOTE_URL, get_settings, load_settings
from tmaker.errors import ConfigError, MissingEnvironmentError


def write_config(home: Path, content: str) -> Path:
    path = home / ".config" / "tmaker" / "config.yml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def test_defaults_from_home(tmp_path: Path) -> None:
    settings = load_settings({"HOME": str(tmp_path)})

    assert settings.home == tmp_path
    assert settings.template_root == tmp_path / ".local" / "template"
    assert settings.remote_url == DEFAULT_REMOTE_URL
    assert settings.remote_branch is None
    assert settings.config_file is None


def test_missing_home_raises() -> None:
    with pytest.raises(MissingEnvironmentError, match="HOME"):
        load_settings({})


def test_config_file_overrides(tmp_path: Path) -> None:
    config = write_config(
        tmp_path,
        """
template_root: ~/my-templates
remote:
  url: https://example.com/templates.git
  branch: stable
""".lstrip(),
    )

    settings = load_settings({"HOME": str(tmp_path)})

    assert settings.template_root == tmp_path / "my-templates"
    assert settings.remote_url == "https://example.com/templates.git"
    assert settings.remote_branch == "stable"
    assert settings.config_file == config


def test_relative_root_is_under_home(tmp_path: Path) -> None:
    write_config(tmp_path, "template_root: templates\n")

    settings = load_settings({"HOME": str(tmp_path)})

    assert settings.template_root == tmp_path / "templates"
    assert settings.remote_url == DEFAULT_REMOTE_URL


def test_environment_overrides_config(tmp_path: Path) -> None:
    write_config(tmp_path, "template_root: /somewhere/else\n")
    override = tmp_path / "override"

    settings = load_settings(
        {"HOME": str(tmp_path), "TMAKER_TEMPLATE_ROOT": str(override)}
    )

    assert settings.template_root == override


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "template_root: [1, 2]\n",
        "remote: nope\n",
        "remote:\n  url: ''\n",
        "template_root: 'unterminated\n",
    ],
)
def test_malformed_config_raises(tmp_path: Path, content: str) -> None:
    write_config(tmp_path, content)

    with pytest.raises(ConfigError):
        load_settings({"HOME": str(tmp_path)})


def test_get_settings_is_memoized(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    first = get_settings()
    monkeypatch.setenv("HOME", str(tmp_path / "other"))

    assert get_settings() is first


@pytest.mark.parametrize("value", ["~bob/templates", "~root"])
def test_other_users_home_is_rejected(tmp_path: Path, value: str) -> None:
    write_config(tmp_path, f"template_root: '{value}'\n")

    with pytest.raises(ConfigError, match="only ~ and ~/ are expanded"):
        load_settings({"HOME": str(tmp_path)})


def test_home_shorthand_alone(tmp_path: Path) -> None:
    settings = load_settings({"HOME": str(tmp_path), "TMAKER_TEMPLATE_ROOT": "~"})

    assert settings.template_root == tmp_path
