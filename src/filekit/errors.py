"""Typed errors raised by filesystem operations.

Every failure that depends on the state of the filesystem is reported as a
subclass of :class:`FileKitError`. The set of kinds is closed, so callers
can dispatch on ``error.kind`` (or on the subclass) instead of matching
message text. Each error carries the offending path.
"""

from __future__ import annotations

import errno
import os
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import ClassVar

__all__ = [
    "DirectoryNotEmptyError",
    "ErrorKind",
    "FileKitError",
    "NotADirectoryPathError",
    "NotAFilePathError",
    "ParentNotFoundError",
    "PathExistsError",
    "PathNotFoundError",
    "translate_os_error",
]


class ErrorKind(str, Enum):
    """Closed set of filesystem failure kinds."""

    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    NOT_A_FILE = "not_a_file"
    ALREADY_EXISTS = "already_exists"
    NOT_EMPTY = "not_empty"
    NO_PARENT = "no_parent"


class FileKitError(Exception):
    """Base class for filesystem errors.

    Attributes:
        kind: The failure kind.
        path: The path the operation failed on.
    """

    kind: ClassVar[ErrorKind]
    template: ClassVar[str] = "{path}"

    def __init__(self, path: str | os.PathLike[str], message: str | None = None) -> None:
        self.path = os.fspath(path)
        super().__init__(message or self.template.format(path=self.path))


class PathNotFoundError(FileKitError):
    """The path does not exist."""

    kind = ErrorKind.NOT_FOUND
    template = "path does not exist: {path}"


class NotADirectoryPathError(FileKitError):
    """A directory was required but the path is something else."""

    kind = ErrorKind.NOT_A_DIRECTORY
    template = "path is not a directory: {path}"


class NotAFilePathError(FileKitError):
    """A file was required but the path is a directory."""

    kind = ErrorKind.NOT_A_FILE
    template = "path is not a file: {path}"


class PathExistsError(FileKitError):
    """The path already exists."""

    kind = ErrorKind.ALREADY_EXISTS
    template = "path already exists: {path}"


class DirectoryNotEmptyError(FileKitError):
    """The directory still has entries."""

    kind = ErrorKind.NOT_EMPTY
    template = "The directory is not empty: {path}"


class ParentNotFoundError(FileKitError):
    """The parent directory of the path does not exist."""

    kind = ErrorKind.NO_PARENT
    template = "The parent directory does not exist: {path}"


_ERRNO_ERRORS: dict[int, type[FileKitError]] = {
    errno.ENOENT: PathNotFoundError,
    errno.ENOTDIR: NotADirectoryPathError,
    errno.EISDIR: NotAFilePathError,
    errno.EEXIST: PathExistsError,
    errno.ENOTEMPTY: DirectoryNotEmptyError,
}


@contextmanager
def translate_os_error(path: str | os.PathLike[str]) -> Iterator[None]:
    """Re-raise ``OSError`` from the wrapped block as a typed error.

    Errors whose errno has no counterpart in :class:`ErrorKind` propagate
    unchanged.

    Args:
        path: Path reported on the translated error.

    Raises:
        FileKitError: The typed counterpart of the OS error.
    """
    try:
        yield
    except OSError as e:
        error_cls = _ERRNO_ERRORS.get(e.errno) if e.errno is not None else None
        if error_cls is None:
            raise
        raise error_cls(path) from e
