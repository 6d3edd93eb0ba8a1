"""Concrete sinks for replaying deferred log entries."""

from __future__ import annotations

from .logging_sink import LoggingSinkAdapter
from .rich_console import RichConsoleSink

__all__ = ["LoggingSinkAdapter", "RichConsoleSink"]
