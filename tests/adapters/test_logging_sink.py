from __future__ import annotations

import logging

import pytest

from lib_log_deferred.adapters.logging_sink import LoggingSinkAdapter
from lib_log_deferred.application.use_cases import DeferredLogger, flush_entries
from lib_log_deferred.domain import EntryQueue, LogLevel

LOGGER_NAME = "tests.deferred.logging_sink"


def test_log_forwards_level_message_and_args(caplog: pytest.LogCaptureFixture) -> None:
    sink = LoggingSinkAdapter(LOGGER_NAME)
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        sink.log(LogLevel.WARNING, "slow %s took %dms", ("db", 250))

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "slow db took 250ms"
    assert record.scopes == ()


def test_trace_entries_use_registered_trace_level(caplog: pytest.LogCaptureFixture) -> None:
    sink = LoggingSinkAdapter(LOGGER_NAME)
    with caplog.at_level(LogLevel.TRACE.to_python_level(), logger=LOGGER_NAME):
        sink.log(LogLevel.TRACE, "fine detail", ())
    assert caplog.records[-1].levelname == "TRACE"


def test_scopes_are_attached_to_records(caplog: pytest.LogCaptureFixture) -> None:
    sink = LoggingSinkAdapter(logging.getLogger(LOGGER_NAME), scope_key="log_scopes")
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        with sink.begin_scope("S1"), sink.begin_scope("S2"):
            sink.log(LogLevel.INFO, "inside", ())
        sink.log(LogLevel.INFO, "outside", ())

    inside, outside = caplog.records[-2:]
    assert inside.log_scopes == ("S1", "S2")
    assert outside.log_scopes == ()


def test_flush_into_stdlib_logger(caplog: pytest.LogCaptureFixture) -> None:
    queue = EntryQueue()
    deferred = DeferredLogger(queue)
    deferred.info("start")
    with deferred.begin_scope("request=42"):
        deferred.warning("slow")
    deferred.error("boom %s", "!")

    sink = LoggingSinkAdapter(LOGGER_NAME)
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        assert flush_entries(queue, sink) == 3

    records = [record for record in caplog.records if record.name == LOGGER_NAME]
    assert [(record.levelname, record.getMessage(), record.scopes) for record in records] == [
        ("INFO", "start", ()),
        ("WARNING", "slow", ("request=42",)),
        ("ERROR", "boom !", ()),
    ]


def test_default_logger_is_root() -> None:
    assert LoggingSinkAdapter().logger is logging.getLogger()
