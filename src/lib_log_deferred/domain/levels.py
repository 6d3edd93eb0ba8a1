"""Severity abstraction shared by buffered entries and sinks.

Purpose
-------
Offer a domain-specific representation of the six severities a deferred
logger accepts, including ``TRACE`` which the stdlib does not define.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* ``TRACE_LEVEL`` numeric value registered with :mod:`logging` as ``TRACE``.
* ``_ICON_TABLE`` constant mapping levels to console glyphs.

System Role
-----------
Stored on every :class:`~lib_log_deferred.domain.entries.LogEntry`, used by the
query facade for filtering and by the sink adapters to pick stdlib levels and
console styles.
"""

from __future__ import annotations

import logging
from enum import Enum


TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")


class LogLevel(Enum):
    """Enumerated logging levels used throughout the system."""

    TRACE = TRACE_LEVEL
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name for diagnostics and rendering."""

        return self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode icon visualizing the level on colored consoles."""

        return _ICON_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` level number matching this level."""

        return self.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve ``name`` case-insensitively, accepting common aliases."""
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging level integer into :class:`LogLevel`."""
        return cls.from_numeric(level)

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` corresponding to ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def coerce(cls, value: "LogLevel | str | int") -> "LogLevel":
        """Accept a member, a name, or a numeric level."""
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        return cls.from_numeric(value)


_ALIASES = {
    "INFORMATION": "INFO",
    "WARN": "WARNING",
    "FATAL": "CRITICAL",
}

_ICON_TABLE = {
    LogLevel.TRACE: "·",
    LogLevel.DEBUG: "🐞",
    LogLevel.INFO: "ℹ",
    LogLevel.WARNING: "⚠",
    LogLevel.ERROR: "✖",
    LogLevel.CRITICAL: "☠",
}
# Console glyphs displayed by the Rich sink per log level.


__all__ = ["LogLevel", "TRACE_LEVEL"]
