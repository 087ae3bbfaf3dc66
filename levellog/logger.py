"""Per-subsystem logger writing one file per level per day.

Usage::

    from levellog import Fields, get_logger

    log = get_logger("billing")
    log.info("invoice sent", 42, "EUR")          # int: 42   str: EUR
    log.warn("retrying", Fields(["a", "b"]))     # a   b
    log.high_quality_error("gave up")            # adds [funcName: ..., file: ...:N]
"""
from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from threading import RLock
from typing import Callable, Optional

from levellog.caller import capture_caller
from levellog.core.config import get_settings
from levellog.core.log import diagnostics_configured, init_diagnostics
from levellog.formatting import RecordFormatter
from levellog.levels import Level, level_ordinal
from levellog.paths import FilenameStyle, PathResolver, file_date
from levellog.sink import FileSink

__all__ = ["Logger", "get_logger", "new_logger", "reset_loggers"]

Clock = Callable[[], datetime]


def _threshold(level: Level | int | str) -> int:
    if isinstance(level, int) and not isinstance(level, (bool, Level)):
        return level
    return Level.parse(level).ordinal


class Logger:
    """Level-gated writer for a single named subsystem.

    Records below the threshold are dropped before any formatting or I/O. The
    remaining ones are written synchronously; every level of one logger shares
    the sink lock, which also guards the cached date.
    """

    def __init__(
        self,
        name: str,
        base_dir: str | os.PathLike[str],
        level: Level | int | str = Level.DEBUG,
        style: FilenameStyle | str = FilenameStyle.CANONICAL,
        clock: Optional[Clock] = None,
    ) -> None:
        self._name = name
        self._threshold = _threshold(level)
        self._clock: Clock = clock or datetime.now
        self._resolver = PathResolver(base_dir, style)
        self._formatter = RecordFormatter(name)
        self._sink = FileSink()
        self._file_date = file_date(self._clock())

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, base_dir={str(self.base_dir)!r}, threshold={self._threshold})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def base_dir(self) -> Path:
        return self._resolver.base_dir

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def file_date(self) -> str:
        return self._file_date

    def set_level(self, level: Level | int | str) -> None:
        self._threshold = _threshold(level)

    def enabled_for(self, level: Level | int) -> bool:
        ordinal = level_ordinal(level)
        return ordinal is None or ordinal >= self._threshold

    def _refresh_file_date(self, moment: datetime) -> None:
        today = file_date(moment)
        if today != self._file_date:
            self._file_date = today

    def log(
        self,
        level: Level | int,
        message: str,
        *extras: object,
        caller_location: str = "",
    ) -> int:
        """Write one record and return the number of bytes appended.

        Levels outside :class:`Level` are never filtered and are written under
        the ``UNKNOWN`` label. Returns ``0`` when filtered or when the write
        failed (the failure goes to the diagnostic stream). The cached date is
        refreshed even for filtered records.
        """

        with self._sink.lock:
            moment = self._clock()
            self._refresh_file_date(moment)
            if not self.enabled_for(level):
                return 0
            path = self._resolver.resolve(self._name, level, self._file_date)
            line = self._formatter.format(level, caller_location, message, extras, moment)
            return self._sink.append(path, line)

    def debug(self, message: str, *extras: object) -> int:
        return self.log(Level.DEBUG, message, *extras)

    def info(self, message: str, *extras: object) -> int:
        return self.log(Level.INFO, message, *extras)

    def warn(self, message: str, *extras: object) -> int:
        return self.log(Level.WARN, message, *extras)

    def error(self, message: str, *extras: object) -> int:
        return self.log(Level.ERROR, message, *extras)

    def _log_located(self, level: Level, message: str, extras: tuple[object, ...]) -> int:
        # depth 2: skip this helper and the public high_quality_* method
        caller = capture_caller(depth=2)
        location = caller.render() if caller is not None else ""
        return self.log(level, message, *extras, caller_location=location)

    def high_quality_debug(self, message: str, *extras: object) -> int:
        return self._log_located(Level.DEBUG, message, extras)

    def high_quality_info(self, message: str, *extras: object) -> int:
        return self._log_located(Level.INFO, message, extras)

    def high_quality_warn(self, message: str, *extras: object) -> int:
        return self._log_located(Level.WARN, message, extras)

    def high_quality_error(self, message: str, *extras: object) -> int:
        return self._log_located(Level.ERROR, message, extras)


def new_logger(
    name: str,
    base_dir: str | os.PathLike[str] | None = None,
    level: Level | int | str = Level.DEBUG,
    style: FilenameStyle | str = FilenameStyle.CANONICAL,
    clock: Optional[Clock] = None,
) -> Logger:
    """Create a logger writing under ``base_dir`` (``./logs`` by default)."""

    directory = Path(base_dir) if base_dir is not None else Path("logs")
    return Logger(name, directory.absolute(), level=level, style=style, clock=clock)


_registry_lock = RLock()
_registry: dict[str, Logger] = {}


def get_logger(name: str) -> Logger:
    """Return the shared logger for ``name``, creating it from settings once."""

    with _registry_lock:
        logger = _registry.get(name)
        if logger is not None:
            return logger
        settings = get_settings()
        if not diagnostics_configured():
            init_diagnostics(level=settings.diagnostics_level)
        logger = new_logger(
            name,
            base_dir=settings.loggers.base_dir,
            level=settings.loggers.level,
            style=settings.loggers.filename_style,
        )
        _registry[name] = logger
        return logger


def reset_loggers() -> None:
    """Forget every shared logger, intended for tests."""

    with _registry_lock:
        _registry.clear()
