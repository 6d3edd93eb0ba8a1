from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from lib_log_deferred import runtime
from lib_log_deferred.domain import EntryQueue, LogLevel


class RecordingScope:
    def __init__(self, sink: "RecordingSink", state: Any) -> None:
        self.sink = sink
        self.state = state

    def close(self) -> None:
        self.sink.calls.append(("close_scope", self.state))


class RecordingSink:
    """Sink fake recording every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def log(self, level: LogLevel, message: str, args: tuple[Any, ...]) -> None:
        self.calls.append(("log", level, message, args))

    def begin_scope(self, state: Any) -> RecordingScope:
        self.calls.append(("begin_scope", state))
        return RecordingScope(self, state)


@pytest.fixture
def queue() -> EntryQueue:
    return EntryQueue()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture(autouse=True)
def fresh_runtime() -> Iterator[None]:
    runtime.reset()
    yield
    runtime.reset()
