"""Subprocess utilities for running commands."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from ..errors import SubprocessFailureError

logger = logging.getLogger(__name__)


def run(command: List[str], cwd: Optional[Path] = None) -> None:
    """Run a command once and stream its output to stdout."""
    logger.debug("Running: %s", " ".join(command))
    try:
        process = subprocess.Popen(
            command,
            cwd=str(cwd) if cwd else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except OSError as e:
        raise SubprocessFailureError(command, None) from e
    assert process.stdout is not None
    for line in process.stdout:
        sys.stdout.write(line)
    code = process.wait()
    if code:
        raise SubprocessFailureError(command, code)
