"""Thin, typed facade over local filesystem operations."""

__version__ = "0.1.0"

# Export the session, its protocol and the error taxonomy
from filekit.errors import (
    DirectoryNotEmptyError,
    ErrorKind,
    FileKitError,
    NotADirectoryPathError,
    NotAFilePathError,
    ParentNotFoundError,
    PathExistsError,
    PathNotFoundError,
)
from filekit.filesystem import LocalFileSystem
from filekit.protocols import FileSystem, Stream

__all__ = [
    "__version__",
    "DirectoryNotEmptyError",
    "ErrorKind",
    "FileKitError",
    "FileSystem",
    "LocalFileSystem",
    "NotADirectoryPathError",
    "NotAFilePathError",
    "ParentNotFoundError",
    "PathExistsError",
    "PathNotFoundError",
    "Stream",
]
