from __future__ import annotations

from pathlib import Path

import pytest

from tmaker.errors import (
    InvalidArgumentError,
    MkdirError,
    NestedDestinationError,
    SourceOpenError,
)
from tmaker.templates import (
    ProjectRequest,
    create_project,
    get_template_dir,
    parse_project_argument,
)


def make_store(root: Path) -> None:
    (root / "python" / "src").mkdir(parents=True)
    (root / "python" / "pyproject.toml").write_text("[project]\nname = 'x'\n")
    (root / "python" / "src" / "main.py").write_text("print('hello')\n")


def test_get_template_dir(tmp_path: Path) -> None:
    assert get_template_dir(tmp_path, "c") == tmp_path / "c"
    assert get_template_dir(str(tmp_path), "c") == tmp_path / "c"


def test_create_project_copies_template(tmp_path: Path) -> None:
    store = tmp_path / "store"
    work = tmp_path / "work"
    work.mkdir()
    make_store(store)

    project = create_project("demo", "python", store, parent=work)

    assert project == work / "demo"
    assert (project / "pyproject.toml").read_text().startswith("[project]")
    assert (project / "src" / "main.py").read_text() == "print('hello')\n"


def test_create_project_defaults_to_cwd(monkeypatch, tmp_path: Path) -> None:
    store = tmp_path / "store"
    make_store(store)
    monkeypatch.chdir(tmp_path)

    create_project("demo", "python", store)

    assert (tmp_path / "demo" / "src" / "main.py").exists()


def test_unknown_template_creates_nothing(tmp_path: Path) -> None:
    store = tmp_path / "store"
    make_store(store)

    with pytest.raises(SourceOpenError):
        create_project("demo", "haskell", store, parent=tmp_path)

    assert not (tmp_path / "demo").exists()


def test_existing_project_directory_is_refused(tmp_path: Path) -> None:
    store = tmp_path / "store"
    make_store(store)
    (tmp_path / "demo").mkdir()

    with pytest.raises(MkdirError):
        create_project("demo", "python", store, parent=tmp_path)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("demo:python", ProjectRequest("demo", "python")),
        ("my-app:c", ProjectRequest("my-app", "c")),
    ],
)
def test_parse_project_argument(value: str, expected: ProjectRequest) -> None:
    assert parse_project_argument(value) == expected


@pytest.mark.parametrize(
    "value,message",
    [
        ("demo", "invalid format"),
        (":python", "missing project name"),
        ("demo:", "missing language"),
        ("demo:py:thon", "unexpected ':'"),
        ("demo:/etc", "invalid language"),
        ("demo:../python", "invalid language"),
        ("demo:..", "invalid language"),
    ],
)
def test_parse_project_argument_rejects(value: str, message: str) -> None:
    with pytest.raises(InvalidArgumentError, match=message):
        parse_project_argument(value)


@pytest.mark.parametrize("template", ["..", ".", "a/b", "../python", ""])
def test_get_template_dir_rejects_non_child_names(
    tmp_path: Path, template: str
) -> None:
    with pytest.raises(SourceOpenError):
        get_template_dir(tmp_path, template)


def test_absolute_template_outside_root_is_refused(tmp_path: Path) -> None:
    store = tmp_path / "store"
    make_store(store)
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "secret.txt").write_text("do not copy")
    work = tmp_path / "work"
    work.mkdir()

    with pytest.raises(SourceOpenError):
        create_project("demo", str(outside), store, parent=work)

    assert not (work / "demo").exists()


def test_project_inside_template_is_refused(tmp_path: Path) -> None:
    store = tmp_path / "store"
    make_store(store)
    inside = store / "python" / "src"

    with pytest.raises(NestedDestinationError):
        create_project("demo", "python", store, parent=inside)

    assert not (inside / "demo").exists()
