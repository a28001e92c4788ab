"""Recursive directory copy used to materialize a template."""

from __future__ import annotations

import errno
import logging
import os
import shutil
import stat
from pathlib import Path
from typing import FrozenSet, List, Tuple, Type, Union

from ..errors import (
    FileOpenError,
    FilesystemError,
    MkdirError,
    NestedDestinationError,
    PathTooLongError,
    SourceOpenError,
    StatError,
    SymlinkLoopError,
)

logger = logging.getLogger(__name__)

COPY_BUFFER_SIZE = 8192
DIRECTORY_MODE = 0o755

PathLike = Union[str, Path]
_DirKey = Tuple[int, int]


def _fail(
    error_cls: Type[FilesystemError], path: PathLike, exc: OSError
) -> FilesystemError:
    if exc.errno == errno.ENAMETOOLONG:
        return PathTooLongError(path, exc)
    return error_cls(path, exc)


def is_within(path: PathLike, root: PathLike) -> bool:
    """Return True if `path` resolves to `root` or somewhere below it."""
    resolved = Path(path).resolve()
    base = Path(root).resolve()
    return resolved == base or base in resolved.parents


def copy_tree(src: PathLike, dst: PathLike) -> None:
    """Copy every file and directory inside `src` into the existing `dst`.

    Nested directories are created as needed, and directories that already
    exist are reused. Files are streamed through a fixed-size buffer and
    overwrite any destination file of the same name. Symbolic links are
    followed; a link leading back into one of its own ancestors raises
    SymlinkLoopError.

    Pending directories are kept on an explicit stack, so the depth of the
    tree is not limited by the interpreter's recursion limit.

    The first failure aborts the whole copy. Entries copied before it are
    left in place.
    """
    src_path = Path(src)
    dst_path = Path(dst)
    try:
        st = os.stat(src_path)
    except OSError as e:
        raise _fail(SourceOpenError, src_path, e) from e
    if is_within(dst_path, src_path):
        raise NestedDestinationError(dst_path)

    pending: List[Tuple[Path, Path, FrozenSet[_DirKey]]] = [
        (src_path, dst_path, frozenset({(st.st_dev, st.st_ino)}))
    ]
    while pending:
        pending.extend(_copy_dir(*pending.pop()))


def _copy_dir(
    src: Path, dst: Path, ancestors: FrozenSet[_DirKey]
) -> List[Tuple[Path, Path, FrozenSet[_DirKey]]]:
    """Copy the files of `src` and return its subdirectories still to visit."""
    subdirs: List[Tuple[Path, Path, FrozenSet[_DirKey]]] = []
    try:
        entries = os.scandir(src)
    except OSError as e:
        raise _fail(SourceOpenError, src, e) from e

    with entries:
        for entry in entries:
            src_child = src / entry.name
            dst_child = dst / entry.name

            try:
                st = os.stat(src_child)
            except OSError as e:
                raise _fail(StatError, src_child, e) from e

            if stat.S_ISDIR(st.st_mode):
                key = (st.st_dev, st.st_ino)
                if key in ancestors:
                    raise SymlinkLoopError(src_child)
                _make_dir(dst_child)
                subdirs.append((src_child, dst_child, ancestors | {key}))
            else:
                _copy_file(src_child, dst_child)
    return subdirs


def _make_dir(path: Path) -> None:
    try:
        os.mkdir(path, DIRECTORY_MODE)
    except FileExistsError as e:
        if not path.is_dir():
            raise MkdirError(path, e) from e
    except OSError as e:
        raise _fail(MkdirError, path, e) from e
    else:
        logger.debug("Created directory %s", path)


def _copy_file(src: Path, dst: Path) -> None:
    try:
        fsrc = open(src, "rb")
    except OSError as e:
        raise _fail(FileOpenError, src, e) from e
    with fsrc:
        try:
            fdst = open(dst, "wb")
        except OSError as e:
            raise _fail(FileOpenError, dst, e) from e
        with fdst:
            shutil.copyfileobj(fsrc, fdst, COPY_BUFFER_SIZE)
    logger.debug("Copied %s -> %s", src, dst)
