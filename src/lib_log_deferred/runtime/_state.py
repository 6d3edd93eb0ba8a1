"""Process-wide deferred logging state and access helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import RLock

from lib_log_deferred.domain import EntryQueue, ScopeStack


@dataclass(slots=True)
class DeferredLogState:
    """Queue and scope stack shared by every logger created through the façade."""

    queue: EntryQueue = field(default_factory=EntryQueue)
    scopes: ScopeStack = field(default_factory=ScopeStack)


_STATE: DeferredLogState | None = None
_STATE_LOCK = RLock()


def current_state() -> DeferredLogState:
    """Return the active state, creating it on first use."""

    global _STATE
    with _STATE_LOCK:
        if _STATE is None:
            _STATE = DeferredLogState()
        return _STATE


def set_state(state: DeferredLogState) -> None:
    """Install ``state`` as the active singleton."""

    global _STATE
    with _STATE_LOCK:
        _STATE = state


def clear_state() -> None:
    """Forget the active state; the next access starts with an empty queue."""

    global _STATE
    with _STATE_LOCK:
        _STATE = None


__all__ = ["DeferredLogState", "clear_state", "current_state", "set_state"]
