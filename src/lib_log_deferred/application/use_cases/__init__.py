"""Use cases capturing, flushing and querying deferred log entries."""

from __future__ import annotations

from .capture import DeferredLogger
from .flush import FlushCallable, create_flush, flush_entries
from .query import DeferredLogQuery, LiveView

__all__ = [
    "DeferredLogQuery",
    "DeferredLogger",
    "FlushCallable",
    "LiveView",
    "create_flush",
    "flush_entries",
]
