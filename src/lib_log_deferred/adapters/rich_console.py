"""Rich-powered console sink implementing :class:`SinkPort`.

Purpose
-------
Give CLI tools and the demo command a human-readable destination for flushed
bootstrap logs without configuring :mod:`logging`.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleSink` - sink printing one styled line per entry.

System Role
-----------
Scopes opened during replay are kept on the sink's own stack and rendered as a
``[outer › inner]`` prefix.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping

from rich.console import Console

from lib_log_deferred.application.ports.sink import SinkPort
from lib_log_deferred.domain.levels import LogLevel
from lib_log_deferred.domain.scopes import ScopeHandle, ScopeStack


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.TRACE: "dim",
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.

_SCOPE_SEPARATOR = " › "


def render_message(message: str, args: tuple[Any, ...]) -> str:
    """Apply ``%``-style ``args`` to ``message`` the way :mod:`logging` does."""
    if not args:
        return message
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return message % args[0]
    return message % args


class RichConsoleSink(SinkPort):
    """Render replayed entries using Rich with per-level styles."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogLevel | str, str] | None = None,
    ) -> None:
        """Configure the sink with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            merged[LogLevel.coerce(key)] = value
        self._style_map = merged
        self._scopes = ScopeStack(name=f"lib_log_deferred_console_scopes_{id(self)}")

    @property
    def console(self) -> Console:
        return self._console

    def begin_scope(self, state: Any) -> ScopeHandle:
        """Push ``state`` so following lines carry it in their prefix."""

        return self._scopes.begin_scope(state)

    def log(self, level: LogLevel, message: str, args: tuple[Any, ...]) -> None:
        """Print one line for the replayed entry.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=120)
        >>> sink = RichConsoleSink(console=console, no_color=True)
        >>> with sink.begin_scope("request=42"):
        ...     sink.log(LogLevel.WARNING, "slow %s", ("db",))
        >>> "[request=42] slow db" in console.export_text()
        True
        """
        style = "" if self._no_color else self._style_map.get(level, "")
        self._console.print(self.format_line(level, message, args), style=style, markup=False, highlight=False)

    def format_line(self, level: LogLevel, message: str, args: tuple[Any, ...]) -> str:
        """Return the console line for one entry under the current scopes."""
        scopes = self._scopes.snapshot()
        scope_text = "" if not scopes else "[" + _SCOPE_SEPARATOR.join(str(state) for state in scopes) + "] "
        return f"{level.icon} {level.severity.upper():>8} {scope_text}{render_message(message, args)}"


__all__ = ["RichConsoleSink", "render_message"]
