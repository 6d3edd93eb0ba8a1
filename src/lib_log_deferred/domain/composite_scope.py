"""Aggregate of sink scopes released as one unit.

Purpose
-------
Hold the scopes a sink opened while replaying one entry and close them in
reverse order of acquisition, so the sink sees properly nested teardown.

Contents
--------
* :class:`CompositeScope`.
* ``_close_scope`` helper accepting ``close()`` or context-manager handles.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any

from .errors import ScopeTeardownError


def _close_scope(scope: Any) -> None:
    """Release one sink scope through ``close()`` or ``__exit__``."""
    close = getattr(scope, "close", None)
    if callable(close):
        close()
        return
    exit_ = getattr(scope, "__exit__", None)
    if callable(exit_):
        exit_(None, None, None)
        return
    raise TypeError(f"sink scope {scope!r} has neither close() nor __exit__()")


class CompositeScope:
    """Close a list of opened sink scopes innermost-first.

    Every scope is attempted even when an earlier close raises; the failures
    are re-raised together as :class:`ScopeTeardownError`.

    Examples
    --------
    >>> closed = []
    >>> class Scope:
    ...     def __init__(self, name):
    ...         self.name = name
    ...     def close(self):
    ...         closed.append(self.name)
    >>> with CompositeScope() as composite:
    ...     composite.add(Scope("outer"))
    ...     composite.add(Scope("inner"))
    >>> closed
    ['inner', 'outer']
    """

    __slots__ = ("_scopes", "_closed")

    def __init__(self) -> None:
        self._scopes: list[Any] = []
        self._closed = False

    def add(self, scope: Any) -> None:
        """Track ``scope``; ``None`` (a sink's "no scope" sentinel) is ignored."""

        if scope is None:
            return
        self._scopes.append(scope)

    def __len__(self) -> int:
        return len(self._scopes)

    def close(self) -> None:
        """Close every tracked scope in reverse order, collecting failures."""

        if self._closed:
            return
        self._closed = True
        errors: list[Exception] = []
        for scope in reversed(self._scopes):
            try:
                _close_scope(scope)
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)
        self._scopes.clear()
        if errors:
            raise ScopeTeardownError(errors)

    def __enter__(self) -> "CompositeScope":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["CompositeScope"]
