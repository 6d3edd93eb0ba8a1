from __future__ import annotations

import pytest

from lib_log_deferred.application.use_cases.capture import DeferredLogger
from lib_log_deferred.application.use_cases.query import DeferredLogQuery
from lib_log_deferred.domain import EntryQueue, LogLevel


@pytest.fixture
def populated(queue: EntryQueue) -> DeferredLogQuery:
    logger = DeferredLogger(queue)
    logger.info("info-1")
    logger.error("error-1")
    logger.warning("warning-1")
    logger.error("error-2")
    return DeferredLogQuery(queue)


def test_query_accuracy(populated: DeferredLogQuery) -> None:
    assert populated.has_errors() is True
    assert list(populated.errors()) == ["error-1", "error-2"]
    assert populated.has_entries(LogLevel.WARNING) is True
    assert populated.has_entries(LogLevel.CRITICAL) is False


def test_entries_at_and_all_entries(populated: DeferredLogQuery) -> None:
    assert list(populated.entries_at("error")) == [(LogLevel.ERROR, "error-1"), (LogLevel.ERROR, "error-2")]
    assert list(populated.all_entries()) == [
        (LogLevel.INFO, "info-1"),
        (LogLevel.ERROR, "error-1"),
        (LogLevel.WARNING, "warning-1"),
        (LogLevel.ERROR, "error-2"),
    ]


def test_count(populated: DeferredLogQuery) -> None:
    assert populated.count() == 4
    assert populated.count(LogLevel.ERROR) == 2
    assert populated.count("critical") == 0


def test_queries_do_not_consume(queue: EntryQueue, populated: DeferredLogQuery) -> None:
    for _ in range(3):
        populated.has_errors()
        list(populated.errors())
        list(populated.all_entries())
    assert len(queue) == 4


def test_views_rescan_live_queue(queue: EntryQueue) -> None:
    query = DeferredLogQuery(queue)
    errors = query.errors()
    assert list(errors) == []
    assert query.has_errors() is False

    DeferredLogger(queue).error("late")
    assert list(errors) == ["late"]
    assert list(errors) == ["late"]

    queue.try_dequeue()
    assert list(errors) == []


def test_empty_queue_answers(queue: EntryQueue) -> None:
    query = DeferredLogQuery(queue)
    assert not query.has_errors()
    assert list(query.all_entries()) == []
    assert query.count() == 0
