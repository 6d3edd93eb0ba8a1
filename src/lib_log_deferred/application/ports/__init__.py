"""Protocols the application layer depends on."""

from __future__ import annotations

from .sink import SinkPort, SinkScopePort

__all__ = ["SinkPort", "SinkScopePort"]
