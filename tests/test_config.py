"""Tests for settings and logging configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.logging import RichHandler

from filekit.config import Settings, configure_logging


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = Settings()

        assert settings.encoding == "utf-8"
        assert settings.strict_modes is False
        assert settings.working_directory is None
        assert settings.log_level == "WARNING"

    def test_aliases(self) -> None:
        """Test camelCase aliases are accepted."""
        settings = Settings.model_validate(
            {"strictModes": True, "workingDirectory": "/srv", "logLevel": "debug"}
        )

        assert settings.strict_modes is True
        assert settings.working_directory == "/srv"
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        """Test an unknown log level is rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_from_file(self, tmp_path: Path) -> None:
        """Test loading settings from JSON."""
        path = tmp_path / "filekit.json"
        path.write_text(json.dumps({"encoding": "latin-1", "strictModes": True}))

        settings = Settings.from_file(path)

        assert settings.encoding == "latin-1"
        assert settings.strict_modes is True

    def test_from_file_missing(self, tmp_path: Path) -> None:
        """Test a missing settings file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            Settings.from_file(tmp_path / "missing.json")

    def test_from_file_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON raises ValueError."""
        path = tmp_path / "filekit.json"
        path.write_text("{not json")

        with pytest.raises(ValueError):
            Settings.from_file(path)

    def test_from_env(self) -> None:
        """Test FILEKIT_* variables are read."""
        settings = Settings.from_env(
            {
                "FILEKIT_ENCODING": "utf-16",
                "FILEKIT_STRICT_MODES": "yes",
                "FILEKIT_CWD": "/srv/data",
                "FILEKIT_LOG_LEVEL": "info",
            }
        )

        assert settings.encoding == "utf-16"
        assert settings.strict_modes is True
        assert settings.working_directory == "/srv/data"
        assert settings.log_level == "INFO"

    def test_from_env_empty(self) -> None:
        """Test an empty environment gives defaults."""
        assert Settings.from_env({}) == Settings()

    def test_from_env_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the process environment is the default source."""
        monkeypatch.setenv("FILEKIT_STRICT_MODES", "0")
        monkeypatch.setenv("FILEKIT_ENCODING", "ascii")

        settings = Settings.from_env()

        assert settings.strict_modes is False
        assert settings.encoding == "ascii"


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_installs_single_rich_handler(self) -> None:
        """Test repeated calls keep one handler and update the level."""
        logger = logging.getLogger("filekit")
        original_handlers = list(logger.handlers)
        original_level = logger.level
        try:
            configure_logging("INFO")
            configure_logging(logging.DEBUG)

            rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
            assert len(rich_handlers) == 1
            assert logger.level == logging.DEBUG
        finally:
            logger.handlers = original_handlers
            logger.setLevel(original_level)
