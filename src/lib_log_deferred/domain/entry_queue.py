"""FIFO buffer holding log entries until a sink is available.

Purpose
-------
Provide the in-memory queue shared by every deferred logger of a process (or
of a test) and drained by the flusher.

Contents
--------
* :class:`EntryQueue` with append, dequeue and snapshot helpers.

System Role
-----------
Unbounded and never persisted. Appends and dequeues are serialised by a lock so
producers on different threads can log while a flusher drains.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Iterable, Iterator

from .entries import LogEntry


class EntryQueue:
    """Thread-safe FIFO of :class:`LogEntry` objects.

    Examples
    --------
    >>> from lib_log_deferred.domain.levels import LogLevel
    >>> queue = EntryQueue()
    >>> queue.append(LogEntry(LogLevel.INFO, "start"))
    >>> len(queue)
    1
    >>> queue.try_dequeue().message
    'start'
    >>> queue.try_dequeue() is None
    True
    """

    def __init__(self) -> None:
        self._buffer: Deque[LogEntry] = deque()
        self._lock = threading.Lock()

    def append(self, entry: LogEntry) -> None:
        """Append ``entry`` at the tail of the queue."""

        with self._lock:
            self._buffer.append(entry)

    def extend(self, entries: Iterable[LogEntry]) -> None:
        """Append a sequence of entries preserving their order."""
        for entry in entries:
            self.append(entry)

    def try_dequeue(self) -> LogEntry | None:
        """Remove and return the oldest entry, or ``None`` when empty."""

        with self._lock:
            if not self._buffer:
                return None
            return self._buffer.popleft()

    def snapshot(self) -> list[LogEntry]:
        """Return a copy of the current queue contents, oldest first."""

        with self._lock:
            return list(self._buffer)

    def __iter__(self) -> Iterator[LogEntry]:
        """Iterate over a snapshot from oldest to newest."""
        return iter(self.snapshot())

    def __len__(self) -> int:
        """Return the number of entries currently buffered."""
        with self._lock:
            return len(self._buffer)

    def __bool__(self) -> bool:
        return len(self) > 0


__all__ = ["EntryQueue"]
