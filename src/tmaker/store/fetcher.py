"""Fetching a remote template set into a local directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Protocol

from ..utils import run

logger = logging.getLogger(__name__)


class TemplateFetcher(Protocol):
    """Fetch a remote template set into `destination`."""

    def fetch(self, url: str, destination: Path, branch: Optional[str] = None) -> None:
        ...


class GitTemplateFetcher:
    """Clone the template repository with the `git` executable."""

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def command(
        self, url: str, destination: Path, branch: Optional[str] = None
    ) -> List[str]:
        cmd = [self.executable, "clone"]
        if branch:
            cmd += ["--branch", branch]
        return cmd + [url, str(destination)]

    def fetch(self, url: str, destination: Path, branch: Optional[str] = None) -> None:
        logger.debug("Cloning %s into %s", url, destination)
        run(self.command(url, destination, branch))
