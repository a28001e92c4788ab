"""Template store initialization."""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..config import Settings
from ..errors import DirectoryOpenError, MkdirError
from ..utils import console
from .fetcher import GitTemplateFetcher, TemplateFetcher

logger = logging.getLogger(__name__)


def is_initialized(settings: Settings) -> bool:
    """Return True when the template root exists and already has content."""
    root = settings.template_root
    if not root.is_dir():
        return False
    try:
        with os.scandir(root) as entries:
            return any(True for _ in entries)
    except OSError as e:
        raise DirectoryOpenError(root, e) from e


def init_template_store(
    settings: Settings, fetcher: Optional[TemplateFetcher] = None
) -> bool:
    """Populate the template root from the configured remote repository.

    Returns False without fetching when the store is already initialized.
    The fetch is attempted once; its failure propagates.
    """
    root = settings.template_root
    if is_initialized(settings):
        console.print(
            f"Templates already initialized in {root}", style="yellow", markup=False
        )
        return False

    try:
        root.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise MkdirError(root.parent, e) from e

    fetcher = fetcher or GitTemplateFetcher()
    logger.info("Fetching templates from %s", settings.remote_url)
    fetcher.fetch(settings.remote_url, root, settings.remote_branch)
    console.print(f"Templates initialized in {root}", style="green", markup=False)
    return True
