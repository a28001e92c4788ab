"""High-level project creation from templates."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..errors import (
    InvalidArgumentError,
    MkdirError,
    NestedDestinationError,
    SourceOpenError,
)
from .copier import DIRECTORY_MODE, copy_tree, is_within

logger = logging.getLogger(__name__)


def is_template_name(template: str) -> bool:
    """Return True if `template` names a direct child of a template root."""
    if not template or template in (".", ".."):
        return False
    separators = {sep for sep in (os.sep, os.altsep, "/") if sep}
    return not any(sep in template for sep in separators)


def get_template_dir(template_root: Union[str, Path], template: str) -> Path:
    """Get the directory path for a template.

    Raises:
        SourceOpenError: if `template` is absolute or is not a single path
            component of the template root.
    """
    if not is_template_name(template):
        raise SourceOpenError(template)
    return Path(template_root) / template


def create_project(
    project_name: str,
    template: str,
    template_root: Union[str, Path],
    parent: Optional[Path] = None,
) -> Path:
    """Create `parent/project_name` and fill it with a copy of `template`.

    The template is checked before anything is created, so an unknown
    template never leaves an empty project directory behind.
    """
    template_dir = get_template_dir(template_root, template)
    if not template_dir.is_dir():
        raise SourceOpenError(template_dir)

    project_dir = (parent or Path.cwd()) / project_name
    if is_within(project_dir, template_dir):
        raise NestedDestinationError(project_dir)
    try:
        os.mkdir(project_dir, DIRECTORY_MODE)
    except OSError as e:
        raise MkdirError(project_dir, e) from e

    logger.debug("Copying template %s into %s", template_dir, project_dir)
    copy_tree(template_dir, project_dir)
    return project_dir


@dataclass(frozen=True)
class ProjectRequest:
    """A project to create and the template to create it from."""

    project_name: str
    template: str


def parse_project_argument(value: str) -> ProjectRequest:
    """Parse a `NAME:LANG` argument into a ProjectRequest."""
    name, sep, template = value.partition(":")
    if not sep:
        raise InvalidArgumentError(f"invalid format '{value}', expected NAME:LANG")
    if not name:
        raise InvalidArgumentError("missing project name")
    if not template:
        raise InvalidArgumentError("missing language")
    if ":" in template:
        raise InvalidArgumentError(f"unexpected ':' in language '{template}'")
    if not is_template_name(template):
        raise InvalidArgumentError(
            f"invalid language '{template}', expected a template directory name"
        )
    return ProjectRequest(project_name=name, template=template)
