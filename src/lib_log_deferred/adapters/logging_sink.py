"""Sink forwarding replayed entries to a stdlib :class:`logging.Logger`.

Purpose
-------
Let applications flush bootstrap logs into whatever :mod:`logging`
configuration they install once startup completes.

Contents
--------
* :class:`LoggingSinkAdapter` - :class:`SinkPort` implementation.

System Role
-----------
The stdlib has no scope concept, so the adapter keeps its own
:class:`~lib_log_deferred.domain.scopes.ScopeStack` and attaches the active
chain to every record as ``record.<scope_key>`` (a tuple, outermost first).
Message templates and args are passed through untouched so the stdlib applies
its usual ``%`` formatting.
"""

from __future__ import annotations

import logging
from typing import Any

from lib_log_deferred.application.ports.sink import SinkPort
from lib_log_deferred.domain.levels import LogLevel
from lib_log_deferred.domain.scopes import ScopeHandle, ScopeStack


class LoggingSinkAdapter(SinkPort):
    """Replay entries through a stdlib logger.

    Examples
    --------
    >>> import io
    >>> stream = io.StringIO()
    >>> target = logging.getLogger("lib_log_deferred.doctest")
    >>> handler = logging.StreamHandler(stream)
    >>> handler.setFormatter(logging.Formatter("%(levelname)s %(scopes)s %(message)s"))
    >>> target.addHandler(handler)
    >>> target.setLevel(logging.DEBUG)
    >>> sink = LoggingSinkAdapter(target)
    >>> with sink.begin_scope("request=42"):
    ...     sink.log(LogLevel.WARNING, "slow %s", ("db",))
    >>> stream.getvalue()
    "WARNING ('request=42',) slow db\\n"
    >>> target.removeHandler(handler)
    """

    def __init__(self, logger: logging.Logger | str | None = None, *, scope_key: str = "scopes") -> None:
        """Bind the adapter to ``logger`` (a logger, a logger name, or the root logger)."""
        if isinstance(logger, logging.Logger):
            self._logger = logger
        else:
            self._logger = logging.getLogger(logger)
        self._scope_key = scope_key
        self._scopes = ScopeStack(name=f"lib_log_deferred_sink_scopes_{id(self)}")

    @property
    def logger(self) -> logging.Logger:
        """Return the stdlib logger receiving replayed records."""

        return self._logger

    def begin_scope(self, state: Any) -> ScopeHandle:
        """Push ``state`` onto the adapter's scope chain."""

        return self._scopes.begin_scope(state)

    def log(self, level: LogLevel, message: str, args: tuple[Any, ...]) -> None:
        """Emit ``message`` with ``args`` and the current scope chain."""

        self._logger.log(
            level.to_python_level(),
            message,
            *args,
            extra={self._scope_key: self._scopes.snapshot()},
        )


__all__ = ["LoggingSinkAdapter"]
