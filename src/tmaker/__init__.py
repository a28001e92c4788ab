"""tmaker - create new projects from a local template store."""

__version__ = "0.1.0"
