"""Enumerate the templates available under a template root."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import List, Optional, Union

from ..errors import DirectoryOpenError

logger = logging.getLogger(__name__)

MAX_TEMPLATES = 50


def list_templates(
    root: Union[str, Path], limit: Optional[int] = MAX_TEMPLATES
) -> List[str]:
    """Return the names of the immediate subdirectories of `root`.

    Names come back in filesystem enumeration order, not sorted. Hidden
    entries (such as the `.git` directory of a cloned store) are ignored, and
    entries that cannot be stat'ed are skipped rather than failing the whole
    listing. At most `limit` names are returned; pass `None` for no cap.

    Raises:
        DirectoryOpenError: if `root` cannot be opened for enumeration.
    """
    names: List[str] = []
    try:
        entries = os.scandir(root)
    except OSError as e:
        raise DirectoryOpenError(root, e) from e

    with entries:
        if limit is not None and limit <= 0:
            return names
        for entry in entries:
            if entry.name.startswith("."):
                continue
            try:
                st = os.stat(entry.path)
            except OSError as e:
                logger.debug("Skipping unreadable entry %s: %s", entry.path, e)
                continue
            if not stat.S_ISDIR(st.st_mode):
                continue
            names.append(entry.name)
            if limit is not None and len(names) >= limit:
                logger.debug("Template listing truncated at %d entries", limit)
                break
    return names
