"""Local filesystem session.

:class:`LocalFileSystem` wraps standard library ``os``, ``shutil`` and
builtin ``open`` calls. Each instance holds its own working directory:
relative paths passed to any method are resolved against it, and the
process working directory is never changed.

Satisfies the :class:`filekit.protocols.FileSystem` protocol structurally.
"""

from __future__ import annotations

import logging
import os
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from filekit import paths
from filekit.errors import (
    DirectoryNotEmptyError,
    NotADirectoryPathError,
    NotAFilePathError,
    ParentNotFoundError,
    PathExistsError,
    PathNotFoundError,
    translate_os_error,
)
from filekit.modes import OpenMode
from filekit.streams import ByteReader, ByteWriter, TextReader, TextWriter
from filekit.types import FileInfo

if TYPE_CHECKING:
    from filekit.config import Settings

logger = logging.getLogger(__name__)

PathArg = str | os.PathLike[str]
StreamHandle = TextReader | TextWriter | ByteReader | ByteWriter


class LocalFileSystem:
    """Filesystem operations bound to a session working directory."""

    def __init__(
        self,
        cwd: PathArg | None = None,
        *,
        encoding: str = "utf-8",
        strict_modes: bool = False,
    ) -> None:
        """Initialize a filesystem session.

        Args:
            cwd: Initial working directory. Defaults to the process working
                directory at construction time.
            encoding: Text encoding used for text reads and writes.
            strict_modes: Reject unknown mode letters instead of ignoring them.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.encoding = encoding
        self.strict_modes = strict_modes
        self._cwd = os.getcwd()
        if cwd is not None:
            self.change_working_directory(cwd)

    @classmethod
    def create(cls, settings: Settings) -> LocalFileSystem:
        """Create a session configured from settings.

        Args:
            settings: Encoding, mode strictness and initial working directory.

        Returns:
            Configured LocalFileSystem instance.
        """
        return cls(
            cwd=settings.working_directory,
            encoding=settings.encoding,
            strict_modes=settings.strict_modes,
        )

    @classmethod
    def create_default(cls) -> LocalFileSystem:
        """Create a session rooted at the process working directory."""
        return cls()

    # ------------------------------------------------------------------
    # Working directory
    # ------------------------------------------------------------------

    def working_directory(self) -> str:
        """Return the session working directory."""
        return self._cwd

    def change_working_directory(self, path: PathArg) -> None:
        """Change the session working directory.

        Args:
            path: New working directory, relative paths resolved against
                the current one.

        Raises:
            PathNotFoundError: If the path does not exist.
            NotADirectoryPathError: If the path is not a directory.
        """
        target = self.absolute(path)
        self._require_dir(target)
        logger.debug("Working directory changed from %s to %s", self._cwd, target)
        self._cwd = target

    def absolute(self, path: PathArg) -> str:
        """Resolve a path against the session working directory."""
        return paths.absolute(path, self._cwd)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def exists(self, path: PathArg) -> bool:
        """Check if a file or directory exists.

        An empty path names nothing and is reported as missing.
        """
        if not os.fspath(path):
            return False
        return os.path.exists(self.absolute(path))

    def is_file(self, path: PathArg) -> bool:
        """Check if a path is a regular file."""
        return os.path.isfile(self.absolute(path))

    def is_dir(self, path: PathArg) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(self.absolute(path))

    def list(self, path: PathArg = ".") -> list[str]:
        """List the entry names directly inside a directory.

        Args:
            path: Directory to list.

        Returns:
            Sorted entry names.

        Raises:
            PathNotFoundError: If the path does not exist.
            NotADirectoryPathError: If the path is a file.
        """
        target = self.absolute(path)
        self._require_dir(target)
        with translate_os_error(target):
            return sorted(os.listdir(target))

    def last_modified(self, path: PathArg) -> datetime:
        """Return the modification time as a timezone-aware UTC datetime.

        Raises:
            PathNotFoundError: If the path does not exist.
        """
        target = self.absolute(path)
        with translate_os_error(target):
            mtime = os.stat(target).st_mtime
        return datetime.fromtimestamp(mtime, tz=timezone.utc)

    def stat(self, path: PathArg) -> FileInfo:
        """Return metadata for a single entry.

        Raises:
            PathNotFoundError: If the path does not exist.
        """
        target = self.absolute(path)
        with translate_os_error(target):
            st = os.stat(target)
        return FileInfo(
            name=paths.basename(target),
            path=target,
            is_dir=os.path.isdir(target),
            size=st.st_size,
            modified=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        )

    # ------------------------------------------------------------------
    # Directories
    # ------------------------------------------------------------------

    def make_directory(self, path: PathArg) -> None:
        """Create exactly one directory level.

        Raises:
            PathExistsError: If the path already exists.
            ParentNotFoundError: If the parent directory does not exist.
            NotADirectoryPathError: If the parent is a file.
        """
        target = self.absolute(path)
        if os.path.lexists(target):
            raise PathExistsError(target)
        parent = os.path.dirname(target)
        if not os.path.exists(parent):
            raise ParentNotFoundError(parent)
        if not os.path.isdir(parent):
            raise NotADirectoryPathError(parent)
        with translate_os_error(target):
            os.mkdir(target)
        logger.debug("Created directory %s", target)

    def make_tree(self, path: PathArg) -> None:
        """Create a directory and every missing ancestor.

        Succeeds without changes when the directory already exists.

        Raises:
            PathExistsError: If an existing component is not a directory.
        """
        target = self.absolute(path)
        missing: list[str] = []
        current = target
        while not os.path.exists(current):
            missing.append(current)
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent
        if os.path.exists(current) and not os.path.isdir(current):
            raise PathExistsError(
                current, f"The path already exists and is not a directory: {current}"
            )
        for directory in reversed(missing):
            with translate_os_error(directory):
                os.mkdir(directory)
            logger.debug("Created directory %s", directory)

    mkpath = make_tree

    def rmdir(self, path: PathArg) -> None:
        """Remove a single empty directory.

        Raises:
            PathNotFoundError: If the path does not exist.
            NotADirectoryPathError: If the path is a file.
            DirectoryNotEmptyError: If the directory has entries.
        """
        target = self.absolute(path)
        self._require_dir(target)
        with translate_os_error(target):
            if os.listdir(target):
                raise DirectoryNotEmptyError(target)
            os.rmdir(target)
        logger.debug("Removed directory %s", target)

    def remove_tree(self, path: PathArg) -> None:
        """Remove a directory and all of its descendants.

        Symbolic links inside the tree are removed, never followed.

        Raises:
            PathNotFoundError: If the path does not exist.
            NotADirectoryPathError: If the path is a file or a symbolic link.
        """
        target = self.absolute(path)
        self._require_dir(target)
        if os.path.islink(target):
            raise NotADirectoryPathError(target)
        # (path, children_done) pairs; a directory is removed after its entries.
        stack: list[tuple[str, bool]] = [(target, False)]
        while stack:
            current, children_done = stack.pop()
            with translate_os_error(current):
                if children_done:
                    os.rmdir(current)
                    continue
                stack.append((current, True))
                with os.scandir(current) as entries:
                    for entry in entries:
                        if entry.is_dir(follow_symlinks=False):
                            stack.append((entry.path, False))
                        else:
                            os.unlink(entry.path)
        logger.debug("Removed tree %s", target)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def read(self, path: PathArg, mode: str | None = "r") -> str | bytes:
        """Read the full contents of a file.

        Args:
            path: File to read.
            mode: ``"r"`` for text (default) or ``"b"`` for bytes.

        Returns:
            File content as ``str`` or ``bytes``.

        Raises:
            PathNotFoundError: If the file does not exist.
            NotAFilePathError: If the path is a directory.
        """
        parsed = OpenMode.for_read(mode, strict=self.strict_modes)
        if parsed.binary:
            return self.read_bytes(path)
        return self.read_text(path)

    def read_text(self, path: PathArg) -> str:
        """Read a file as text."""
        target = self.absolute(path)
        self._require_file(target)
        with translate_os_error(target), open(target, encoding=self.encoding, newline="") as f:
            return f.read()

    def read_bytes(self, path: PathArg) -> bytes:
        """Read a file as bytes."""
        target = self.absolute(path)
        self._require_file(target)
        with translate_os_error(target), open(target, "rb") as f:
            return f.read()

    def write(self, path: PathArg, content: str | bytes, mode: str | None = "w") -> None:
        """Write content to a file, creating it if absent.

        Args:
            path: File to write.
            content: ``str`` for text mode; ``bytes`` (or ``str``, encoded with
                the session encoding) for binary mode.
            mode: Letters ``w`` (truncate, default), ``a`` (append) and
                ``b`` (binary).

        Raises:
            NotAFilePathError: If the path is a directory.
            PathNotFoundError: If the parent directory does not exist.
            ValueError: If ``content`` does not match the mode. The file is left
                untouched.
        """
        parsed = OpenMode.for_write(mode, strict=self.strict_modes)
        if parsed.binary:
            if isinstance(content, str):
                content = content.encode(self.encoding)
            elif not isinstance(content, (bytes, bytearray, memoryview)):
                raise ValueError(f"Binary write needs bytes, got {type(content).__name__}")
        elif not isinstance(content, str):
            raise ValueError(f"Text write needs str, got {type(content).__name__}")
        target = self.absolute(path)
        if os.path.isdir(target):
            raise NotAFilePathError(target)
        with translate_os_error(target):
            if parsed.binary:
                with open(target, parsed.python_mode) as f:
                    f.write(content)
            else:
                with open(target, parsed.python_mode, encoding=self.encoding, newline="") as f:
                    f.write(content)
        logger.debug("Wrote %s (mode=%s)", target, parsed.python_mode)

    def copy(self, src: PathArg, dst: PathArg) -> None:
        """Copy a single file.

        Raises:
            PathNotFoundError: If ``src`` does not exist or ``dst``'s parent is missing.
            NotAFilePathError: If ``src`` is a directory.
            PathExistsError: If ``dst`` already exists.
        """
        source = self.absolute(src)
        target = self.absolute(dst)
        self._require_file(source)
        if os.path.lexists(target):
            raise PathExistsError(target)
        with translate_os_error(target):
            shutil.copy2(source, target)
        logger.debug("Copied %s to %s", source, target)

    def copy_tree(self, src: PathArg, dst: PathArg) -> None:
        """Copy a directory and all of its descendants.

        Symbolic links are recreated as links.

        Raises:
            PathNotFoundError: If ``src`` does not exist.
            NotADirectoryPathError: If ``src`` is a file.
            PathExistsError: If ``dst`` already exists.
            ValueError: If ``dst`` is inside ``src``.
        """
        source = self.absolute(src)
        target = self.absolute(dst)
        self._require_dir(source)
        if os.path.lexists(target):
            raise PathExistsError(target)
        if os.path.commonpath([source, target]) == source:
            raise ValueError(f"Cannot copy {source} into its own subtree {target}")

        stack: list[tuple[str, str]] = [(source, target)]
        while stack:
            src_dir, dst_dir = stack.pop()
            with translate_os_error(dst_dir):
                os.mkdir(dst_dir)
                with os.scandir(src_dir) as entries:
                    for entry in entries:
                        dst_path = os.path.join(dst_dir, entry.name)
                        if entry.is_symlink():
                            os.symlink(os.readlink(entry.path), dst_path)
                        elif entry.is_dir():
                            stack.append((entry.path, dst_path))
                        else:
                            shutil.copy2(entry.path, dst_path)
                shutil.copystat(src_dir, dst_dir)
        logger.debug("Copied tree %s to %s", source, target)

    def rename(self, path: PathArg, new_name: str) -> None:
        """Rename an entry within its directory.

        Args:
            path: Entry to rename.
            new_name: New last segment; must not contain a separator.

        Raises:
            ValueError: If ``new_name`` is not a bare name.
            PathNotFoundError: If the path does not exist.
            PathExistsError: If the new name is taken.
        """
        if (
            not new_name
            or new_name in (".", "..")
            or os.sep in new_name
            or (os.altsep is not None and os.altsep in new_name)
        ):
            raise ValueError(f"rename() expects a bare name, got {new_name!r}")
        source = self.absolute(path)
        self.move(source, os.path.join(os.path.dirname(source), new_name))

    def move(self, src: PathArg, dst: PathArg) -> None:
        """Move a file or directory to a new path.

        Works across directories and devices.

        Raises:
            PathNotFoundError: If ``src`` does not exist or ``dst``'s parent is missing.
            PathExistsError: If ``dst`` already exists.
        """
        source = self.absolute(src)
        target = self.absolute(dst)
        if not os.path.lexists(source):
            raise PathNotFoundError(source)
        if os.path.lexists(target):
            raise PathExistsError(target)
        with translate_os_error(target):
            shutil.move(source, target)
        logger.debug("Moved %s to %s", source, target)

    def remove(self, path: PathArg) -> None:
        """Delete a single file.

        Raises:
            PathNotFoundError: If the file does not exist.
            NotAFilePathError: If the path is a directory.
        """
        target = self.absolute(path)
        if not os.path.lexists(target):
            raise PathNotFoundError(target)
        if os.path.isdir(target) and not os.path.islink(target):
            raise NotAFilePathError(target)
        with translate_os_error(target):
            os.unlink(target)
        logger.debug("Removed file %s", target)

    def touch(self, path: PathArg) -> None:
        """Create an empty file, or update the modification time if present.

        Raises:
            PathNotFoundError: If the parent directory does not exist.
        """
        target = self.absolute(path)
        with translate_os_error(target):
            Path(target).touch()
        logger.debug("Touched %s", target)

    # ------------------------------------------------------------------
    # Streams
    # ------------------------------------------------------------------

    def open(self, path: PathArg, mode: str | None = "r") -> StreamHandle:
        """Open a stream handle.

        The caller must close the handle, or use it as a context manager.

        Args:
            path: File to open.
            mode: Letters ``r``, ``w``, ``a`` and ``b``; see :mod:`filekit.modes`.

        Returns:
            TextReader, TextWriter, ByteReader or ByteWriter.

        Raises:
            NotAFilePathError: If the path is a directory.
            PathNotFoundError: If opened for reading and the file does not exist.
            ValueError: If strict modes are enabled and the mode has unknown letters.
        """
        parsed = OpenMode.parse(mode, strict=self.strict_modes)
        target = self.absolute(path)
        if os.path.isdir(target):
            raise NotAFilePathError(target)
        if not parsed.writing and not os.path.exists(target):
            raise PathNotFoundError(target)

        with translate_os_error(target):
            if parsed.binary:
                handle = open(target, parsed.python_mode)
            else:
                handle = open(target, parsed.python_mode, encoding=self.encoding, newline="")
        logger.debug("Opened %s (mode=%s)", target, parsed.python_mode)

        if parsed.binary:
            if parsed.writing:
                return ByteWriter(handle, target, encoding=self.encoding)
            return ByteReader(handle, target)
        if parsed.writing:
            return TextWriter(handle, target)
        return TextReader(handle, target)

    # ------------------------------------------------------------------
    # Preconditions
    # ------------------------------------------------------------------

    def _require_dir(self, target: str) -> None:
        if not os.path.exists(target):
            raise PathNotFoundError(target)
        if not os.path.isdir(target):
            raise NotADirectoryPathError(target)

    def _require_file(self, target: str) -> None:
        if not os.path.exists(target):
            raise PathNotFoundError(target)
        if os.path.isdir(target):
            raise NotAFilePathError(target)
