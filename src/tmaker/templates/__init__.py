"""Template listing and project materialization for tmaker."""

from .copier import COPY_BUFFER_SIZE, copy_tree
from .lister import MAX_TEMPLATES, list_templates
from .manager import (
    ProjectRequest,
    create_project,
    get_template_dir,
    parse_project_argument,
)

__all__ = [
    "COPY_BUFFER_SIZE",
    "MAX_TEMPLATES",
    "ProjectRequest",
    "copy_tree",
    "create_project",
    "get_template_dir",
    "list_templates",
    "parse_project_argument",
]
