"""Immutable record of one buffered log call.

Purpose
-------
Capture everything the flusher needs to replay a log call later: severity,
message template, raw arguments, and the scope chain active at call time.

Contents
--------
* :class:`LogEntry` dataclass.

System Role
-----------
Produced by :class:`~lib_log_deferred.application.use_cases.capture.DeferredLogger`,
stored in :class:`~lib_log_deferred.domain.entry_queue.EntryQueue`, consumed by
the flush and query use cases.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .levels import LogLevel


@dataclass(slots=True, frozen=True)
class LogEntry:
    """Buffered log call.

    Attributes
    ----------
    level:
        :class:`LogLevel` severity of the call.
    message:
        Unformatted message template; may be empty.
    args:
        Arguments handed to the sink together with ``message``.
    scopes:
        Scope states active when the call was made, outermost first.
    """

    level: LogLevel
    message: str
    args: tuple[Any, ...] = ()
    scopes: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "scopes", tuple(self.scopes))

    @classmethod
    def capture(cls, level: LogLevel, message: str, args: Iterable[Any], scopes: Iterable[Any]) -> "LogEntry":
        """Build an entry, normalising ``None`` message to an empty string."""

        return cls(level=level, message="" if message is None else message, args=tuple(args), scopes=tuple(scopes))

    @property
    def has_scopes(self) -> bool:
        """Return ``True`` when the entry was logged inside at least one scope."""

        return bool(self.scopes)

    def summary(self) -> tuple[LogLevel, str]:
        """Return the ``(level, message)`` pair exposed by queries."""

        return (self.level, self.message)


__all__ = ["LogEntry"]
