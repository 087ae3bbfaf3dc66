"""Configuration primitives for the process-wide logger registry."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from levellog.levels import Level
from levellog.paths import FilenameStyle


_loaded_env_files: set[str] = set()


def _load_env(dotenv_path: Optional[Path] = None) -> None:
    """Apply the embedding application's ``.env`` once per file.

    Without an explicit path the search starts from the working directory,
    not from this package's install location. Variables already present in the
    environment win over the file.
    """

    target = str(dotenv_path) if dotenv_path is not None else find_dotenv(usecwd=True)
    if not target or target in _loaded_env_files:
        return

    load_dotenv(target)
    _loaded_env_files.add(target)


@dataclass(frozen=True)
class LoggerSettings:
    """Defaults applied to loggers created through the registry."""

    base_dir: Path = Path("logs")
    level: Level = Level.DEBUG
    filename_style: FilenameStyle = FilenameStyle.CANONICAL

    @classmethod
    def from_env(cls) -> "LoggerSettings":
        """Instantiate settings using environment overrides when present."""

        defaults = cls()
        return cls(
            base_dir=Path(os.getenv("LEVELLOG_DIR", str(defaults.base_dir))).absolute(),
            level=Level.parse(os.getenv("LEVELLOG_LEVEL", defaults.level.name)),
            filename_style=FilenameStyle.parse(
                os.getenv("LEVELLOG_FILENAME_STYLE", defaults.filename_style.value)
            ),
        )


@dataclass(frozen=True)
class Settings:
    """Container for package configuration."""

    loggers: LoggerSettings = field(default_factory=LoggerSettings)
    diagnostics_level: str = "WARNING"

    @classmethod
    def from_env(cls, dotenv_path: Optional[Path] = None) -> "Settings":
        """Build ``Settings`` using environment variables (optionally from ``.env``)."""

        _load_env(dotenv_path)

        return cls(
            loggers=LoggerSettings.from_env(),
            diagnostics_level=os.getenv("LEVELLOG_DIAGNOSTICS_LEVEL", "WARNING").upper(),
        )


@lru_cache()
def get_settings(dotenv_path: Optional[Path] = None) -> Settings:
    """Return a cached settings instance."""

    return Settings.from_env(dotenv_path=dotenv_path)
