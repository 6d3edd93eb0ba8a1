from __future__ import annotations

from typing import Any

from lib_log_deferred.adapters import LoggingSinkAdapter, RichConsoleSink
from lib_log_deferred.application.ports.sink import SinkPort, SinkScopePort
from lib_log_deferred.domain import LogLevel, ScopeStack


class _FakeSink(SinkPort):
    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def log(self, level: LogLevel, message: str, args: tuple[Any, ...]) -> None:
        self.calls.append(("log", (level, message, args)))

    def begin_scope(self, state: Any) -> None:
        self.calls.append(("begin_scope", state))
        return None


def test_recording_fake_satisfies_sink_port(sink) -> None:
    assert isinstance(sink, SinkPort)
    assert isinstance(sink.begin_scope("s"), SinkScopePort)


def test_subclassed_fake_satisfies_sink_port() -> None:
    fake = _FakeSink()
    assert isinstance(fake, SinkPort)
    fake.log(LogLevel.INFO, "hello", ())
    assert fake.begin_scope("s") is None
    assert fake.calls == [("log", (LogLevel.INFO, "hello", ())), ("begin_scope", "s")]


def test_shipped_adapters_satisfy_sink_port() -> None:
    assert isinstance(LoggingSinkAdapter("tests"), SinkPort)
    assert isinstance(RichConsoleSink(no_color=True), SinkPort)


def test_scope_handles_satisfy_sink_scope_port() -> None:
    handle = ScopeStack().begin_scope("s")
    assert isinstance(handle, SinkScopePort)
    handle.close()


def test_objects_missing_methods_are_rejected() -> None:
    class LogOnly:
        def log(self, level: LogLevel, message: str, args: tuple) -> None:
            pass

    assert not isinstance(LogOnly(), SinkPort)
