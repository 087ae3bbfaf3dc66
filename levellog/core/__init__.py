"""Diagnostics and configuration shared across the package.

``levellog.core.config`` depends on the engine modules, which in turn report
through ``levellog.core.log``; import it by its full path.
"""

from .log import get_diagnostics_logger, init_diagnostics, shutdown_diagnostics  # noqa: F401

__all__ = ["get_diagnostics_logger", "init_diagnostics", "shutdown_diagnostics"]
