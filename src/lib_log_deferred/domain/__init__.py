"""Domain entities and value objects used by the deferred logging core."""

from __future__ import annotations

from .composite_scope import CompositeScope
from .entries import LogEntry
from .entry_queue import EntryQueue
from .errors import InvalidArgumentError, ScopeTeardownError
from .levels import TRACE_LEVEL, LogLevel
from .scopes import ScopeHandle, ScopeStack

__all__ = [
    "CompositeScope",
    "EntryQueue",
    "InvalidArgumentError",
    "LogEntry",
    "LogLevel",
    "ScopeHandle",
    "ScopeStack",
    "ScopeTeardownError",
    "TRACE_LEVEL",
]
