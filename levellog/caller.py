"""Call-site capture for the ``high_quality_*`` logging methods."""
from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CallerInfo:
    function: str
    file: str
    line: int

    def render(self) -> str:
        return f"[funcName: {self.function}, file: {self.file}:{self.line}]"


def capture_caller(depth: int = 1) -> Optional[CallerInfo]:
    """Describe the frame ``depth`` levels above the function calling this one.

    Returns ``None`` when the interpreter does not expose frames or the stack is
    shallower than requested.
    """

    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        code = frame.f_code
        module = frame.f_globals.get("__name__", "")
        function = getattr(code, "co_qualname", code.co_name)
        if module:
            function = f"{module}.{function}"
        return CallerInfo(function=function, file=code.co_filename, line=frame.f_lineno)
    finally:
        del frame
