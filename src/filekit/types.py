"""Shared data types for filekit."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

__all__ = ["FileInfo"]


@dataclass(frozen=True)
class FileInfo:
    """Metadata for a single filesystem entry.

    Attributes:
        name: Last path segment.
        path: Absolute path of the entry.
        is_dir: True for directories.
        size: Size in bytes (as reported by the OS for directories).
        modified: Last modification time, timezone-aware UTC.
    """

    name: str
    path: str
    is_dir: bool
    size: int
    modified: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.path:
            raise ValueError("path cannot be empty")
        if self.size < 0:
            raise ValueError("size cannot be negative")

    @property
    def kind(self) -> str:
        """``"dir"`` or ``"file"``."""
        return "dir" if self.is_dir else "file"
