"""Use case buffering log calls made before a real logger exists.

Purpose
-------
Expose a logger-shaped object (``info``/``error``/... plus ``begin_scope``)
that records each call, with the scope chain active at call time, into an
:class:`~lib_log_deferred.domain.entry_queue.EntryQueue`.

Contents
--------
* :class:`DeferredLogger`.

System Role
-----------
Producer side of the system. Buffering is silent and unconditional: no level
filtering, no formatting, no rejected input.
"""

from __future__ import annotations

from typing import Any

from lib_log_deferred.domain import EntryQueue, LogEntry, LogLevel, ScopeHandle, ScopeStack


class DeferredLogger:
    """Queue log calls for a later flush.

    Examples
    --------
    >>> queue = EntryQueue()
    >>> logger = DeferredLogger(queue)
    >>> with logger.begin_scope("request=42"):
    ...     logger.warning("slow call to %s", "db")
    >>> entry = queue.try_dequeue()
    >>> (entry.level.severity, entry.message, entry.args, entry.scopes)
    ('warning', 'slow call to %s', ('db',), ('request=42',))
    """

    def __init__(self, queue: EntryQueue, *, scopes: ScopeStack | None = None) -> None:
        self._queue = queue
        self._scopes = scopes if scopes is not None else ScopeStack()

    @property
    def queue(self) -> EntryQueue:
        """Return the queue receiving captured entries."""

        return self._queue

    @property
    def scopes(self) -> ScopeStack:
        """Return the scope stack snapshotted on every call."""

        return self._scopes

    def begin_scope(self, state: Any) -> ScopeHandle:
        """Start a scope for the calling context; ``state`` must not be ``None``."""

        return self._scopes.begin_scope(state)

    def log(self, level: LogLevel | str | int, message: str, *args: Any) -> None:
        """Queue ``message`` at ``level`` with the current scope chain."""

        entry = LogEntry.capture(LogLevel.coerce(level), message, args, self._scopes.snapshot())
        self._queue.append(entry)

    def trace(self, message: str, *args: Any) -> None:
        self.log(LogLevel.TRACE, message, *args)

    def debug(self, message: str, *args: Any) -> None:
        self.log(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: Any) -> None:
        self.log(LogLevel.INFO, message, *args)

    information = info

    def warning(self, message: str, *args: Any) -> None:
        self.log(LogLevel.WARNING, message, *args)

    def error(self, message: str, *args: Any) -> None:
        self.log(LogLevel.ERROR, message, *args)

    def critical(self, message: str, *args: Any) -> None:
        self.log(LogLevel.CRITICAL, message, *args)


__all__ = ["DeferredLogger"]
