"""Logical-context-local scope stack built atop :mod:`contextvars`.

Purpose
-------
Track the logging scopes active in the current execution flow so each
buffered entry can record the chain it was logged under.

Contents
--------
* :class:`ScopeStack` – per-context stack with begin/snapshot/release helpers.
* :class:`ScopeHandle` – token returned by :meth:`ScopeStack.begin_scope` that
  pops the stack when released.

System Role
-----------
The stack value is an immutable tuple stored in a :class:`contextvars.ContextVar`.
Threads start from an empty stack and every asyncio task works on a copy of
the stack it was created with, so pushes and pops never leak between sibling
or parent contexts.
"""

from __future__ import annotations

import contextvars
from types import TracebackType
from typing import Any

from .errors import InvalidArgumentError


class ScopeHandle:
    """Active scope token; release it exactly once, in reverse acquisition order.

    Examples
    --------
    >>> stack = ScopeStack()
    >>> with stack.begin_scope("request=42") as handle:
    ...     stack.snapshot()
    ('request=42',)
    >>> stack.snapshot()
    ()
    """

    __slots__ = ("_stack", "_state")

    def __init__(self, stack: "ScopeStack", state: Any) -> None:
        self._stack = stack
        self._state = state

    @property
    def state(self) -> Any:
        """Return the value presented to the sink when the scope is replayed."""

        return self._state

    def release(self) -> None:
        """End the scope by popping the top of the owning stack."""

        self._stack.release(self)

    close = release

    def __enter__(self) -> "ScopeHandle":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"ScopeHandle(state={self._state!r})"


class ScopeStack:
    """Manage scope states bound to the current execution flow."""

    _stack_var: contextvars.ContextVar[tuple[Any, ...]]

    def __init__(self, name: str = "lib_log_deferred_scope_stack") -> None:
        self._stack_var = contextvars.ContextVar(name, default=())

    def begin_scope(self, state: Any) -> ScopeHandle:
        """Push ``state`` and return the handle that ends the scope."""

        if state is None:
            raise InvalidArgumentError("scope state must not be None")
        handle = ScopeHandle(self, state)
        self._stack_var.set(self._stack_var.get() + (state,))
        return handle

    def release(self, handle: ScopeHandle) -> None:
        """Pop one state if any is active.

        The popped state is not compared with ``handle``; callers release
        scopes in reverse order of acquisition.
        """

        stack = self._stack_var.get()
        if stack:
            self._stack_var.set(stack[:-1])

    def snapshot(self) -> tuple[Any, ...]:
        """Return the active states outermost-first."""

        # The tuple is already ordered oldest push first.
        return self._stack_var.get()

    def current(self) -> Any | None:
        """Return the innermost active state, if any."""

        stack = self._stack_var.get()
        return stack[-1] if stack else None

    @property
    def depth(self) -> int:
        """Return the number of scopes active in the current context."""

        return len(self._stack_var.get())


__all__ = ["ScopeHandle", "ScopeStack"]
