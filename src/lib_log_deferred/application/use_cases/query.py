"""Read-only inspection of buffered entries.

Purpose
-------
Let bootstrap code decide what to do before any sink exists, e.g. abort when
configuration loading queued errors, without consuming the queue.

Contents
--------
* :class:`LiveView` – restartable lazy iterable re-scanning the queue.
* :class:`DeferredLogQuery` – the query facade.

System Role
-----------
Never dequeues. Each scan works on a snapshot taken under the queue lock, so
results reflect the queue at iteration time; no isolation from concurrent
appends or flushes is promised.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from lib_log_deferred.domain import EntryQueue, LogEntry, LogLevel

T = TypeVar("T")


class LiveView(Generic[T]):
    """Iterable whose every iteration re-runs ``producer`` against the live queue."""

    __slots__ = ("_producer",)

    def __init__(self, producer: Callable[[], Iterable[T]]) -> None:
        self._producer = producer

    def __iter__(self) -> Iterator[T]:
        return iter(self._producer())

    def __repr__(self) -> str:
        return f"LiveView({list(self)!r})"


class DeferredLogQuery:
    """Answer questions about the buffered entries of one queue.

    Examples
    --------
    >>> queue = EntryQueue()
    >>> queue.append(LogEntry(LogLevel.INFO, "start"))
    >>> queue.append(LogEntry(LogLevel.ERROR, "boom"))
    >>> query = DeferredLogQuery(queue)
    >>> query.has_errors()
    True
    >>> list(query.errors())
    ['boom']
    >>> len(queue)
    2
    """

    def __init__(self, queue: EntryQueue) -> None:
        self._queue = queue

    def _matching(self, level: LogLevel | None) -> Iterator[LogEntry]:
        for entry in self._queue:
            if level is None or entry.level is level:
                yield entry

    def has_entries(self, level: LogLevel | str | int) -> bool:
        """Return ``True`` when any buffered entry has ``level``."""

        target = LogLevel.coerce(level)
        return any(True for _ in self._matching(target))

    def has_errors(self) -> bool:
        """Return ``True`` when any buffered entry is an error."""

        return self.has_entries(LogLevel.ERROR)

    def errors(self) -> LiveView[str]:
        """Return the messages of buffered error entries in buffer order."""

        return LiveView(lambda: (entry.message for entry in self._matching(LogLevel.ERROR)))

    def entries_at(self, level: LogLevel | str | int) -> LiveView[tuple[LogLevel, str]]:
        """Return ``(level, message)`` pairs for entries at ``level``."""

        target = LogLevel.coerce(level)
        return LiveView(lambda: (entry.summary() for entry in self._matching(target)))

    def all_entries(self) -> LiveView[tuple[LogLevel, str]]:
        """Return ``(level, message)`` pairs for every buffered entry."""

        return LiveView(lambda: (entry.summary() for entry in self._matching(None)))

    def count(self, level: LogLevel | str | int | None = None) -> int:
        """Return how many entries are buffered, optionally at one level."""

        if level is None:
            return len(self._queue)
        target = LogLevel.coerce(level)
        return sum(1 for _ in self._matching(target))


__all__ = ["DeferredLogQuery", "LiveView"]
