"""Settings and logging configuration."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.console import Console
from rich.logging import RichHandler

# Environment variables read by Settings.from_env()
ENV_PREFIX = "FILEKIT_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class Settings(BaseModel):
    """Session configuration.

    Attributes:
        encoding: Text encoding for text reads and writes.
        strict_modes: Reject unknown mode letters instead of ignoring them.
        working_directory: Initial session working directory (process cwd if unset).
        log_level: Level for the ``filekit`` logger.
    """

    model_config = ConfigDict(populate_by_name=True)

    encoding: str = "utf-8"
    strict_modes: bool = Field(default=False, alias="strictModes")
    working_directory: str | None = Field(default=None, alias="workingDirectory")
    log_level: str = Field(default="WARNING", alias="logLevel")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_file(cls, path: Path) -> Settings:
        """Load settings from a JSON file.

        Args:
            path: Path to the settings file.

        Returns:
            Parsed Settings.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If JSON is invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        data = json.loads(path.read_text(encoding="utf-8"))
        return cls.model_validate(data)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from ``FILEKIT_*`` environment variables.

        Recognized: ``FILEKIT_ENCODING``, ``FILEKIT_STRICT_MODES``,
        ``FILEKIT_CWD`` and ``FILEKIT_LOG_LEVEL``. Unset variables keep
        their defaults.
        """
        env = os.environ if environ is None else environ
        data: dict[str, object] = {}
        if encoding := env.get(f"{ENV_PREFIX}ENCODING"):
            data["encoding"] = encoding
        if strict := env.get(f"{ENV_PREFIX}STRICT_MODES"):
            data["strict_modes"] = strict.strip().lower() in _TRUE_VALUES
        if cwd := env.get(f"{ENV_PREFIX}CWD"):
            data["working_directory"] = cwd
        if level := env.get(f"{ENV_PREFIX}LOG_LEVEL"):
            data["log_level"] = level
        return cls.model_validate(data)


def configure_logging(level: str | int = logging.WARNING, console: Console | None = None) -> None:
    """Route ``filekit`` log records to stderr through rich.

    Calling it again replaces the previously installed handler.

    Args:
        level: Level name or number for the ``filekit`` logger.
        console: Console to render to. Defaults to a stderr console.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("filekit")
    for existing in list(package_logger.handlers):
        if isinstance(existing, RichHandler):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
