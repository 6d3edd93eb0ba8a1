"""Runtime façade over the process-wide deferred log queue.

Purpose
-------
Expose the small static API bootstrap code uses: create a deferred logger,
inspect what it buffered, and flush everything into the real logger once it
exists.

Contents
--------
* ``create_deferred_logger`` – logger bound to the shared queue and scopes.
* ``flush_deferred_logs`` – drain the shared queue into a sink.
* ``has_errors`` / ``get_errors`` / ``has_entries`` / ``get_all`` – queries.
* ``install_queue`` / ``reset`` – swap or clear the shared state (tests,
  embedding hosts that want an explicit queue).

System Role
-----------
Outer shell of the package. Code that prefers explicit ownership can skip this
module and wire :class:`EntryQueue`, :class:`DeferredLogger`,
:func:`flush_entries` and :class:`DeferredLogQuery` directly.
"""

from __future__ import annotations

from collections.abc import Iterable

from lib_log_deferred.application.ports.sink import SinkPort
from lib_log_deferred.application.use_cases import DeferredLogger, DeferredLogQuery, flush_entries
from lib_log_deferred.domain import EntryQueue, LogLevel, ScopeStack

from ._state import DeferredLogState, clear_state, current_state, set_state


def create_deferred_logger() -> DeferredLogger:
    """Return a logger queueing into the process-wide buffer.

    Every logger returned here shares one queue and one scope stack, so a
    scope begun through one of them is visible to calls made through another
    in the same logical context.
    """

    state = current_state()
    return DeferredLogger(state.queue, scopes=state.scopes)


def flush_deferred_logs(sink: SinkPort) -> int:
    """Replay all buffered entries into ``sink`` and return how many were sent.

    Raises :class:`~lib_log_deferred.domain.errors.InvalidArgumentError` when
    ``sink`` is ``None``. Sink failures propagate; entries not yet replayed
    stay buffered.
    """

    return flush_entries(current_state().queue, sink)


def _query() -> DeferredLogQuery:
    return DeferredLogQuery(current_state().queue)


def has_errors() -> bool:
    """Return ``True`` when the buffer holds at least one error entry."""

    return _query().has_errors()


def get_errors() -> Iterable[str]:
    """Return the buffered error messages, re-scanned on every iteration."""

    return _query().errors()


def has_entries(level: LogLevel | str | int) -> bool:
    """Return ``True`` when the buffer holds an entry at ``level``."""

    return _query().has_entries(level)


def get_all(level: LogLevel | str | int | None = None) -> Iterable[tuple[LogLevel, str]]:
    """Return ``(level, message)`` pairs, for one level or for all entries."""

    query = _query()
    if level is None:
        return query.all_entries()
    return query.entries_at(level)


def install_queue(queue: EntryQueue, *, scopes: ScopeStack | None = None) -> None:
    """Make ``queue`` the process-wide buffer used by the façade."""

    set_state(DeferredLogState(queue=queue, scopes=scopes if scopes is not None else ScopeStack()))


def reset() -> None:
    """Discard the process-wide buffer and scope stack."""

    clear_state()


__all__ = [
    "DeferredLogState",
    "create_deferred_logger",
    "current_state",
    "flush_deferred_logs",
    "get_all",
    "get_errors",
    "has_entries",
    "has_errors",
    "install_queue",
    "reset",
]
