"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the filesystem
session and its stream handles. Designing to interfaces enables:
- Loose coupling between callers and the OS-backed implementation
- Easy substitution of test doubles
- Clear contracts for implementations

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from filekit.types import FileInfo


@runtime_checkable
class Stream(Protocol):
    """Protocol for an open stream handle.

    Implementations read or write sequentially until closed.
    """

    @property
    def closed(self) -> bool:
        """True once the handle has been closed."""
        ...

    def close(self) -> None:
        """Release the underlying file."""
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts filesystem access to enable testing without real I/O.
    Implementations resolve relative paths against their own working
    directory and raise :class:`filekit.errors.FileKitError` subclasses on
    failure.
    """

    def working_directory(self) -> str:
        """Return the session working directory."""
        ...

    def change_working_directory(self, path: str | os.PathLike[str]) -> None:
        """Change the session working directory.

        Args:
            path: New working directory.

        Raises:
            PathNotFoundError: If the path does not exist.
            NotADirectoryPathError: If the path is not a directory.
        """
        ...

    def absolute(self, path: str | os.PathLike[str]) -> str:
        """Resolve a path against the working directory.

        Args:
            path: Absolute or relative path.

        Returns:
            Normalized absolute path.
        """
        ...

    def exists(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True for existing files and directories.
        """
        ...

    def is_dir(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path is a directory."""
        ...

    def is_file(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path is a regular file."""
        ...

    def list(self, path: str | os.PathLike[str] = ".") -> list[str]:
        """List entry names directly inside a directory.

        Args:
            path: Directory to list.

        Returns:
            Sorted entry names.

        Raises:
            PathNotFoundError: If the path does not exist.
            NotADirectoryPathError: If the path is a file.
        """
        ...

    def make_directory(self, path: str | os.PathLike[str]) -> None:
        """Create exactly one directory level.

        Args:
            path: Directory to create.

        Raises:
            PathExistsError: If the path already exists.
            ParentNotFoundError: If the parent does not exist.
        """
        ...

    def make_tree(self, path: str | os.PathLike[str]) -> None:
        """Create a directory and all missing ancestors.

        Args:
            path: Directory to create.

        Raises:
            PathExistsError: If an existing component is not a directory.
        """
        ...

    def rmdir(self, path: str | os.PathLike[str]) -> None:
        """Remove a single empty directory.

        Args:
            path: Directory to remove.

        Raises:
            DirectoryNotEmptyError: If the directory has entries.
        """
        ...

    def remove_tree(self, path: str | os.PathLike[str]) -> None:
        """Remove a directory tree.

        Args:
            path: Directory to remove.
        """
        ...

    def read(self, path: str | os.PathLike[str], mode: str | None = "r") -> str | bytes:
        """Read the full contents of a file.

        Args:
            path: File to read.
            mode: ``"r"`` for text or ``"b"`` for bytes.

        Returns:
            File content.

        Raises:
            PathNotFoundError: If file does not exist.
            NotAFilePathError: If the path is a directory.
        """
        ...

    def write(
        self, path: str | os.PathLike[str], content: str | bytes, mode: str | None = "w"
    ) -> None:
        """Write content to a file.

        Args:
            path: Path to the file.
            content: Content to write.
            mode: Letters ``w``, ``a`` and ``b``.
        """
        ...

    def copy(self, src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
        """Copy a single file.

        Args:
            src: Source file.
            dst: Destination path.
        """
        ...

    def copy_tree(self, src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
        """Copy a directory tree.

        Args:
            src: Source directory.
            dst: Destination directory.
        """
        ...

    def rename(self, path: str | os.PathLike[str], new_name: str) -> None:
        """Rename an entry within its directory.

        Args:
            path: Entry to rename.
            new_name: New last segment.
        """
        ...

    def move(self, src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
        """Move an entry to a new path.

        Args:
            src: Entry to move.
            dst: Destination path.
        """
        ...

    def remove(self, path: str | os.PathLike[str]) -> None:
        """Remove a file.

        Args:
            path: Path to remove.
        """
        ...

    def touch(self, path: str | os.PathLike[str]) -> None:
        """Create an empty file or update its modification time.

        Args:
            path: File to touch.
        """
        ...

    def last_modified(self, path: str | os.PathLike[str]) -> datetime:
        """Return the modification time.

        Args:
            path: Entry to inspect.

        Returns:
            Timezone-aware UTC datetime.
        """
        ...

    def stat(self, path: str | os.PathLike[str]) -> FileInfo:
        """Return metadata for an entry.

        Args:
            path: Entry to inspect.
        """
        ...

    def open(self, path: str | os.PathLike[str], mode: str | None = "r") -> Any:
        """Open a stream handle.

        Args:
            path: File to open.
            mode: Letters ``r``, ``w``, ``a`` and ``b``.

        Returns:
            A stream satisfying :class:`Stream`.

        Raises:
            PathNotFoundError: If opened for reading and the file is missing.
            NotAFilePathError: If the path is a directory.
        """
        ...
