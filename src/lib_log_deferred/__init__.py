"""Public package surface for deferred (bootstrap) logging.

Buffer log calls made before logging is configured with
:func:`create_deferred_logger`, inspect them with :func:`has_errors` and
friends, then replay them into a real sink with :func:`flush_deferred_logs`.
The building blocks (:class:`EntryQueue`, :class:`DeferredLogger`,
:func:`flush_entries`, :class:`DeferredLogQuery`) are exported for callers
that prefer to own their queue explicitly.
"""

from __future__ import annotations

from .adapters import LoggingSinkAdapter, RichConsoleSink
from .application.ports import SinkPort, SinkScopePort
from .application.use_cases import DeferredLogger, DeferredLogQuery, create_flush, flush_entries
from .domain import (
    CompositeScope,
    EntryQueue,
    InvalidArgumentError,
    LogEntry,
    LogLevel,
    ScopeHandle,
    ScopeStack,
    ScopeTeardownError,
)
from .runtime import (
    create_deferred_logger,
    flush_deferred_logs,
    get_all,
    get_errors,
    has_entries,
    has_errors,
    install_queue,
    reset,
)

__all__ = [
    "CompositeScope",
    "DeferredLogQuery",
    "DeferredLogger",
    "EntryQueue",
    "InvalidArgumentError",
    "LogEntry",
    "LogLevel",
    "LoggingSinkAdapter",
    "RichConsoleSink",
    "ScopeHandle",
    "ScopeStack",
    "ScopeTeardownError",
    "SinkPort",
    "SinkScopePort",
    "create_deferred_logger",
    "create_flush",
    "flush_deferred_logs",
    "flush_entries",
    "get_all",
    "get_errors",
    "has_entries",
    "has_errors",
    "install_queue",
    "reset",
]
