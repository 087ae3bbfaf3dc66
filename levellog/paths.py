"""Date-based log file locations, one directory per logger and level."""
from __future__ import annotations

import os
from datetime import date, datetime
from enum import Enum
from pathlib import Path

from levellog.core.log import get_diagnostics_logger
from levellog.levels import level_text

DATE_FORMAT = "%Y%m%d"
DIRECTORY_MODE = 0o777

LOGGER = get_diagnostics_logger()


class FilenameStyle(str, Enum):
    """Naming convention of the daily files; pick one per deployment."""

    CANONICAL = "canonical"
    DATE_ONLY = "date_only"

    @classmethod
    def parse(cls, value: "FilenameStyle | str") -> "FilenameStyle":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown filename style: {value!r}") from None


def file_date(moment: date | datetime) -> str:
    """Render the ``YYYYMMDD`` stamp used in file names."""

    return moment.strftime(DATE_FORMAT)


class PathResolver:
    """Compute ``<base>/<name>/<level>/<file>.log`` and create its directory."""

    def __init__(
        self,
        base_dir: str | os.PathLike[str],
        style: FilenameStyle | str = FilenameStyle.CANONICAL,
    ) -> None:
        self.base_dir = Path(base_dir)
        self.style = FilenameStyle.parse(style)

    def directory_for(self, logger_name: str, level: object) -> Path:
        return self.base_dir / logger_name / level_text(level).lower()

    def filename_for(self, logger_name: str, level: object, day: str) -> str:
        if self.style is FilenameStyle.DATE_ONLY:
            return f"{day}.log"
        return f"{logger_name.lower()}_{level_text(level).lower()}_{day}.log"

    def path_for(self, logger_name: str, level: object, day: str) -> Path:
        """Return the file path without touching the filesystem."""

        return self.directory_for(logger_name, level) / self.filename_for(logger_name, level, day)

    def resolve(self, logger_name: str, level: object, day: str) -> Path:
        """Return the file path, creating its directory when missing.

        A directory that cannot be created is reported on the diagnostic
        stream; the path is returned regardless and the write that follows
        reports its own failure.
        """

        path = self.path_for(logger_name, level, day)
        try:
            path.parent.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            LOGGER.warning("Could not create log directory %s: %s", path.parent, exc)
        return path
