"""Utility modules for tmaker."""

from .console import configure_logging, console, err_console
from .subprocess_utils import run

__all__ = ["configure_logging", "console", "err_console", "run"]
