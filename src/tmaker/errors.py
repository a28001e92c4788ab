"""Error types raised by tmaker."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class TemplateMakerError(Exception):
    """Base class for every error reported to the user by the CLI."""

    exit_code = 1


class FilesystemError(TemplateMakerError):
    """A filesystem operation on `path` failed."""

    action = "access"

    def __init__(self, path: PathLike, cause: Optional[OSError] = None) -> None:
        self.path = Path(path)
        self.cause = cause
        message = f"Unable to {self.action} {self.path}"
        if cause is not None and cause.strerror:
            message += f": {cause.strerror}"
        super().__init__(message)


class DirectoryOpenError(FilesystemError):
    """Raise when the template root cannot be opened for listing"""

    action = "open templates directory"


class SourceOpenError(FilesystemError):
    """Raise when a source directory cannot be opened for copying"""

    action = "open source directory"


class PathTooLongError(FilesystemError):
    """Raise when the OS rejects a source or destination path as too long"""

    action = "use overly long path"


class StatError(FilesystemError):
    """Raise when a source entry cannot be stat'ed"""

    action = "read file information for"


class MkdirError(FilesystemError):
    """Raise when a destination directory cannot be created"""

    action = "create directory"


class FileOpenError(FilesystemError):
    """Raise when a source file cannot be read or a destination file written"""

    action = "open file"


class SymlinkLoopError(FilesystemError):
    """Raise when a directory is reached again through its own subtree"""

    action = "copy symbolic link cycle at"


class MissingEnvironmentError(TemplateMakerError):
    """Raise when a required environment variable is not set"""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"{variable} environment variable not found")


class SubprocessFailureError(TemplateMakerError):
    """Raise when an external command exits with a non-zero status"""

    def __init__(self, command: list[str], returncode: Optional[int]) -> None:
        self.command = command
        self.returncode = returncode
        if returncode is None:
            detail = "could not be started"
        else:
            detail = f"failed with exit code {returncode}"
        super().__init__(f"Command '{' '.join(command)}' {detail}")


class InvalidArgumentError(TemplateMakerError):
    """Raise when command line input is malformed"""


class ConfigError(TemplateMakerError):
    """Raise when the configuration file is malformed"""


class NoTemplatesError(TemplateMakerError):
    """Raise when the template root holds no usable template"""

    def __init__(self, root: PathLike) -> None:
        self.root = Path(root)
        super().__init__(f"No available templates in {self.root}")


class NestedDestinationError(FilesystemError):
    """Raise when the copy destination lies inside the source tree"""

    action = "copy a directory into its own subtree at"
