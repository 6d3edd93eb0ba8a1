"""Port describing the real logger that buffered entries are replayed into.

Purpose
-------
Keep the flusher independent of any concrete logging backend: it only needs
``log`` and ``begin_scope``.

Contents
--------
* :class:`SinkScopePort` – handle returned by ``begin_scope``.
* :class:`SinkPort` – runtime-checkable protocol consumed by the flusher.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from lib_log_deferred.domain.levels import LogLevel


@runtime_checkable
class SinkScopePort(Protocol):
    """Opened sink scope; closing it ends the scope."""

    def close(self) -> None:
        """End the scope."""


@runtime_checkable
class SinkPort(Protocol):
    """Emit replayed entries and open nested scopes around them.

    Examples
    --------
    >>> class Recorder:
    ...     def __init__(self):
    ...         self.calls = []
    ...     def log(self, level, message, args):
    ...         self.calls.append((level.severity, message, args))
    ...     def begin_scope(self, state):
    ...         return None
    >>> isinstance(Recorder(), SinkPort)
    True
    """

    def log(self, level: LogLevel, message: str, args: tuple[Any, ...]) -> None:
        """Emit ``message`` with its unformatted ``args`` at ``level``."""

    def begin_scope(self, state: Any) -> SinkScopePort | None:
        """Open a scope for ``state``; ``None`` means the sink has no scope support."""


__all__ = ["SinkPort", "SinkScopePort"]
