"""Append-only file writer shared by all levels of one logger."""
from __future__ import annotations

import os
from threading import RLock

from levellog.core.log import get_diagnostics_logger

LOGGER = get_diagnostics_logger()


class FileSink:
    """Open, append one line and close, serialized by ``lock``.

    No handle is kept between writes, so date rollover and external rotation
    need no invalidation.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self.lock = RLock()

    def append(self, path: str | os.PathLike[str], line: str) -> int:
        """Write ``line`` and a newline to ``path``; return the bytes written.

        Failures are reported on the diagnostic stream and yield ``0``.
        """

        data = f"{line}\n".encode(self.encoding, errors="backslashreplace")
        with self.lock:
            try:
                handle = open(path, "ab")
            except OSError as exc:
                LOGGER.error("Could not open log file %s: %s", path, exc)
                return 0
            try:
                with handle:
                    return handle.write(data)
            except OSError as exc:
                LOGGER.error("Could not write log file %s: %s", path, exc)
                return 0
