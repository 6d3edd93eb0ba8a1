"""Exceptions raised by the deferred logging core."""

from __future__ import annotations

from collections.abc import Iterable


class InvalidArgumentError(ValueError):
    """A required collaborator or value was missing (``None`` sink or scope state)."""


class ScopeTeardownError(RuntimeError):
    """One or more opened sink scopes failed to close.

    Attributes
    ----------
    errors:
        Every exception raised during teardown, in the order the scopes were
        closed (innermost first).
    """

    def __init__(self, errors: Iterable[BaseException]) -> None:
        self.errors: tuple[BaseException, ...] = tuple(errors)
        detail = "; ".join(repr(exc) for exc in self.errors)
        super().__init__(f"{len(self.errors)} scope(s) failed to close: {detail}")


__all__ = ["InvalidArgumentError", "ScopeTeardownError"]
