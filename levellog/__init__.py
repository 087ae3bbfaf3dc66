"""Leveled, date-rotated file logging for embedded subsystems."""

from .caller import CallerInfo, capture_caller
from .formatting import Fields, Loggable, RecordFormatter
from .levels import Level
from .logger import Logger, get_logger, new_logger, reset_loggers
from .paths import FilenameStyle, PathResolver
from .sink import FileSink

__all__ = [
    "CallerInfo",
    "Fields",
    "FileSink",
    "FilenameStyle",
    "Level",
    "Loggable",
    "Logger",
    "PathResolver",
    "RecordFormatter",
    "capture_caller",
    "get_logger",
    "new_logger",
    "reset_loggers",
]
