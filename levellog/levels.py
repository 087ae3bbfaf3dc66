"""Severity levels used to gate and route log records."""
from __future__ import annotations

from enum import IntEnum
from typing import Optional

UNKNOWN_TEXT = "UNKNOWN"

_ALIASES = {"WARNING": "WARN"}


class Level(IntEnum):
    """Ordered severity of a log line."""

    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    @property
    def ordinal(self) -> int:
        return int(self)

    @property
    def text(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: "Level | int | str") -> "Level":
        """Return the level named or numbered by ``value``.

        Accepts a ``Level``, an ordinal (1..4) or a case-insensitive name.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Unknown log level ordinal: {value}") from None
        if isinstance(value, str):
            key = value.strip().upper()
            key = _ALIASES.get(key, key)
            if key.isdigit():
                return cls.parse(int(key))
            try:
                return cls[key]
            except KeyError:
                raise ValueError(f"Unknown log level name: {value!r}") from None
        raise ValueError(f"Unsupported log level value: {value!r}")


def known_level(value: object) -> Optional[Level]:
    """Return ``value`` as a ``Level`` or ``None`` when it is outside the set."""

    if isinstance(value, Level):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Level(value)
        except ValueError:
            return None
    return None


def level_ordinal(value: object) -> Optional[int]:
    level = known_level(value)
    return level.ordinal if level is not None else None


def level_text(value: object) -> str:
    level = known_level(value)
    return level.text if level is not None else UNKNOWN_TEXT
