"""Pure path manipulation helpers.

These functions never touch the filesystem. Paths are returned as strings
using the platform separator.
"""

from __future__ import annotations

import os
from pathlib import PurePath

__all__ = [
    "SEPARATOR",
    "absolute",
    "basename",
    "dirname",
    "extension",
    "join",
    "split",
]

SEPARATOR = os.sep


def join(base: str | os.PathLike[str], *parts: str) -> str:
    """Join path segments onto an absolute base path.

    Args:
        base: Absolute path the segments are appended to.
        *parts: Relative segments.

    Returns:
        The joined path.

    Raises:
        ValueError: If ``base`` is not absolute or a segment is absolute.
    """
    base = os.fspath(base)
    if not os.path.isabs(base):
        raise ValueError(f"join() requires an absolute base path, got {base!r}")
    for part in parts:
        if os.path.isabs(part):
            raise ValueError(f"Cannot join absolute segment {part!r} onto {base!r}")
    return str(PurePath(base, *parts))


def dirname(path: str | os.PathLike[str]) -> str:
    """Return the path without its last segment.

    Returns an empty string when the path has no parent: the filesystem root
    or a bare name.
    """
    pure = PurePath(path)
    parent = pure.parent
    if parent == pure or not parent.parts:
        return ""
    return str(parent)


def basename(path: str | os.PathLike[str]) -> str:
    """Return the last segment of the path, or ``""`` for the root."""
    return PurePath(path).name


def extension(path: str | os.PathLike[str]) -> str:
    """Return the text after the last dot of the last segment.

    A leading dot (``.bashrc``) does not start an extension.
    """
    name = basename(path)
    idx = name.rfind(".")
    if idx <= 0:
        return ""
    return name[idx + 1 :]


def split(path: str | os.PathLike[str]) -> list[str]:
    """Split a path into its ordered segments.

    For an absolute path the first element is the root anchor, e.g.
    ``split("/etc/hosts") == ["/", "etc", "hosts"]``.
    """
    return list(PurePath(path).parts)


def absolute(path: str | os.PathLike[str], cwd: str | os.PathLike[str]) -> str:
    """Resolve ``path`` against ``cwd`` and collapse ``.`` and ``..``.

    Resolution is lexical; symbolic links are not followed.

    Args:
        path: Absolute or relative path.
        cwd: Directory relative paths are resolved against.

    Returns:
        Normalized absolute path.
    """
    return os.path.normpath(os.path.join(os.fspath(cwd), os.fspath(path)))
