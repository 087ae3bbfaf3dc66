"""Composition of log lines and rendering of extra values."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Protocol, Sequence, runtime_checkable

from levellog.levels import level_text

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S.%f"
SEPARATOR = "\t"


@runtime_checkable
class Loggable(Protocol):
    """Value that chooses its own ``TypeName: Value`` rendering."""

    def render_typed(self) -> tuple[str, str]:
        ...


class Fields(tuple):
    """Pre-formatted fields, spliced one per column when passed alone."""

    def __new__(cls, items: Iterable[object] = ()) -> "Fields":
        return super().__new__(cls, (str(item) for item in items))

    def render_typed(self) -> tuple[str, str]:
        return type(self).__name__, "[" + " ".join(self) + "]"


def render_typed(value: object) -> tuple[str, str]:
    if isinstance(value, Loggable):
        return value.render_typed()
    return type(value).__name__, str(value)


def _as_fields(extras: Sequence[object]) -> Fields | None:
    if len(extras) != 1:
        return None
    only = extras[0]
    if isinstance(only, Fields):
        return only
    if isinstance(only, (list, tuple)) and all(isinstance(item, str) for item in only):
        return Fields(only)
    return None


def render_extras(extras: Sequence[object]) -> list[str]:
    """Render extras as columns.

    A single ``Fields`` (or list of strings) is spliced verbatim, anything else
    becomes one ``TypeName: Value`` column per value. Downstream parsers rely on
    both shapes.
    """

    fields = _as_fields(extras)
    if fields is not None:
        return list(fields)
    return ["%s: %s" % render_typed(value) for value in extras]


class RecordFormatter:
    """Build the tab-separated line written for one record."""

    def __init__(self, logger_name: str) -> None:
        self.logger_name = logger_name

    def prefix(self, level: object) -> str:
        return f"[{self.logger_name}]{SEPARATOR}[{level_text(level)}]{SEPARATOR}"

    def format(
        self,
        level: object,
        caller_location: str,
        message: str,
        extras: Sequence[object],
        moment: datetime,
    ) -> str:
        columns = [moment.strftime(TIMESTAMP_FORMAT)]
        if caller_location:
            columns.append(caller_location)
        columns.append(str(message))
        columns.extend(render_extras(extras))
        return self.prefix(level) + SEPARATOR.join(columns)
