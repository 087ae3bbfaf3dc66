"""Diagnostic stream for failures of the file logger itself.

Failures to create directories or write files are never raised to the code
being logged. They are reported here, on the ``levellog.diagnostics`` logger of
the standard ``logging`` module. Until :func:`init_diagnostics` is called the
interpreter's last-resort handler prints them to stderr.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import QueueHandler, QueueListener
from queue import SimpleQueue
from threading import RLock

from rich.console import Console
from rich.logging import RichHandler

__all__ = [
    "DIAGNOSTICS_LOGGER_NAME",
    "DiagnosticsConfig",
    "diagnostics_configured",
    "get_diagnostics_logger",
    "init_diagnostics",
    "set_diagnostics_level",
    "shutdown_diagnostics",
]

DIAGNOSTICS_LOGGER_NAME = "levellog.diagnostics"


@dataclass
class DiagnosticsConfig:
    """Runtime configuration for the diagnostic stream."""

    level: str | int = "WARNING"
    console: bool = True
    # tracebacks rendered by the handler only, no global excepthook
    rich_tracebacks: bool = False
    queue: bool = False


_config_lock = RLock()
_config: DiagnosticsConfig | None = None
_listener: QueueListener | None = None
_handlers: list[logging.Handler] = []


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.WARNING)


def _build_handlers(cfg: DiagnosticsConfig, level: int) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if cfg.console:
        rich_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=cfg.rich_tracebacks,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="%Y-%m-%d %H:%M:%S",
        )
        rich_handler.setLevel(level)
        rich_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        handlers.append(rich_handler)

    return handlers


def init_diagnostics(**kwargs: object) -> None:
    """Configure the diagnostic stream.

    Idempotent: calling again with the same options is a no-op, different
    options replace the previous handlers.
    """

    with _config_lock:
        global _config, _listener

        cfg = DiagnosticsConfig()
        for key, value in kwargs.items():
            if hasattr(cfg, key):
                setattr(cfg, key, value)  # type: ignore[arg-type]

        if _config is not None:
            if _config == cfg:
                return
            _teardown_locked()
        level = _parse_level(cfg.level)

        logger = logging.getLogger(DIAGNOSTICS_LOGGER_NAME)
        logger.setLevel(level)
        logger.propagate = False

        handlers = _build_handlers(cfg, level)

        if cfg.queue and handlers:
            log_queue: SimpleQueue = SimpleQueue()
            queue_handler = QueueHandler(log_queue)
            queue_handler.setLevel(level)
            logger.addHandler(queue_handler)
            listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
            listener.start()
            _listener = listener
            _handlers.append(queue_handler)
        else:
            for handler in handlers:
                logger.addHandler(handler)
                _handlers.append(handler)

        _config = cfg


def _teardown_locked() -> None:
    global _listener, _config
    if _listener:
        _listener.stop()
    _listener = None
    _config = None
    logger = logging.getLogger(DIAGNOSTICS_LOGGER_NAME)
    for handler in _handlers:
        logger.removeHandler(handler)
    _handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def shutdown_diagnostics() -> None:
    """Remove the diagnostic handlers, intended for tests."""

    with _config_lock:
        _teardown_locked()


def diagnostics_configured() -> bool:
    with _config_lock:
        return _config is not None


def get_diagnostics_logger() -> logging.Logger:
    return logging.getLogger(DIAGNOSTICS_LOGGER_NAME)


def set_diagnostics_level(level: str | int) -> None:
    new_level = _parse_level(level)
    logger = logging.getLogger(DIAGNOSTICS_LOGGER_NAME)
    with _config_lock:
        logger.setLevel(new_level)
        handlers = list(logger.handlers)
        # queued handlers live on the listener, which respects their levels
        if _listener is not None:
            handlers.extend(_listener.handlers)
        for handler in handlers:
            handler.setLevel(new_level)
