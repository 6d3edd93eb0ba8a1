"""Use case replaying buffered entries into a real sink.

Purpose
-------
Drain the :class:`~lib_log_deferred.domain.entry_queue.EntryQueue` oldest
first and, for each entry, rebuild the scope chain it was logged under before
handing it to the sink.

Contents
--------
* :func:`flush_entries` – drain one queue into one sink.
* :func:`create_flush` – factory freezing the queue into a ``flush(sink)``
  callable that hosts can hand to their startup code.

System Role
-----------
Consumer side of the system. Per entry the sink observes
``begin_scope(outer) … begin_scope(inner)``, ``log``, then the scopes closing
innermost first, exactly as if the call had been made synchronously.

Alignment Notes
---------------
Errors raised by the sink propagate to the caller. The entry being replayed is
already dequeued at that point; entries behind it stay buffered so a later
flush resumes where this one stopped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from lib_log_deferred.application.ports.sink import SinkPort
from lib_log_deferred.domain import CompositeScope, EntryQueue, InvalidArgumentError, LogEntry, ScopeTeardownError

logger = logging.getLogger(__name__)

FlushCallable = Callable[[SinkPort], int]


def _open_scopes(sink: SinkPort, entry: LogEntry, composite: CompositeScope) -> None:
    """Open ``entry.scopes`` against ``sink`` outermost-first."""
    for state in entry.scopes:
        composite.add(sink.begin_scope(state))


def _replay(sink: SinkPort, entry: LogEntry) -> None:
    """Emit one entry inside its reconstructed scope chain."""
    if not entry.scopes:
        sink.log(entry.level, entry.message, entry.args)
        return
    with CompositeScope() as composite:
        _open_scopes(sink, entry, composite)
        sink.log(entry.level, entry.message, entry.args)


def flush_entries(queue: EntryQueue, sink: SinkPort) -> int:
    """Replay every entry observed in ``queue`` into ``sink``.

    Parameters
    ----------
    queue:
        Queue to drain. Entries appended while the flush runs are replayed too
        if they land before the queue reports empty.
    sink:
        Destination implementing :class:`SinkPort`.

    Returns
    -------
    int
        Number of entries handed to the sink.

    Raises
    ------
    InvalidArgumentError
        When ``sink`` is ``None`` or does not implement :class:`SinkPort`;
        the queue is left untouched.
    ScopeTeardownError
        When one or more sink scopes failed to close; every scope was still
        attempted.

    Examples
    --------
    >>> from lib_log_deferred.domain import LogEntry, LogLevel
    >>> class Printer:
    ...     def log(self, level, message, args):
    ...         print(level.severity, message % args)
    ...     def begin_scope(self, state):
    ...         return None
    >>> queue = EntryQueue()
    >>> queue.append(LogEntry(LogLevel.INFO, "booting %s", ("api",)))
    >>> flush_entries(queue, Printer())
    info booting api
    1
    >>> flush_entries(queue, Printer())
    0
    """

    if sink is None:
        raise InvalidArgumentError("sink must not be None")
    if not isinstance(sink, SinkPort):
        raise InvalidArgumentError(f"sink {sink!r} must provide log() and begin_scope()")

    replayed = 0
    while True:
        entry = queue.try_dequeue()
        if entry is None:
            break
        try:
            _replay(sink, entry)
        except ScopeTeardownError as exc:
            logger.error("Closing %d sink scope(s) failed while replaying %r", len(exc.errors), entry.message)
            raise
        replayed += 1

    if replayed:
        logger.debug("Flushed %d deferred log entries", replayed)
    return replayed


def create_flush(queue: EntryQueue) -> FlushCallable:
    """Return a callable flushing ``queue`` into the sink it receives."""

    def flush(sink: SinkPort) -> int:
        """Drain the bound queue into ``sink``."""
        return flush_entries(queue, sink)

    return flush


__all__ = ["FlushCallable", "create_flush", "flush_entries"]
