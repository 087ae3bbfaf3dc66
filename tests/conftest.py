from __future__ import annotations

import pytest

from levellog.core.config import get_settings
from levellog.core.log import shutdown_diagnostics
from levellog.logger import reset_loggers


@pytest.fixture(autouse=True)
def _isolate_package_state():
    """Reset the registry, cached settings and diagnostic handlers per test."""

    yield
    reset_loggers()
    get_settings.cache_clear()
    shutdown_diagnostics()
