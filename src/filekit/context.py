"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

The filesystem dependency is typed using the FileSystem Protocol rather than
the concrete LocalFileSystem, so test doubles can be injected without
inheritance.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from filekit.config import Settings
from filekit.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from filekit.filesystem import LocalFileSystem
    return LocalFileSystem.create_default()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for the settings and the filesystem
    session used by CLI commands.
    """

    settings: Settings = field(default_factory=Settings)
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(
    settings: Settings | None = None,
    cwd: str | os.PathLike[str] | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Creates the filesystem session with proper wiring. Use this in production
    code. For tests, construct AppContext directly with test doubles.

    Args:
        settings: Settings to use. Defaults to settings read from the environment.
        cwd: Override the session working directory.

    Returns:
        Configured AppContext with all dependencies.
    """
    from filekit.filesystem import LocalFileSystem

    settings = settings or Settings.from_env()
    if cwd is not None:
        settings = settings.model_copy(update={"working_directory": os.fspath(cwd)})
    filesystem = LocalFileSystem.create(settings)

    return AppContext(settings=settings, filesystem=filesystem)
