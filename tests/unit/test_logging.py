"""Unit tests for logging helpers: module loggers and the request-ID filter."""

import logging

from app.shared.context import set_request_id
from app.shared.telemetry.logging import RequestIdFilter, get_logger


def _record() -> logging.LogRecord:
    return logging.LogRecord("app", logging.INFO, __file__, 1, "uploaded", None, None)


def test_get_logger_uses_module_name() -> None:
    logger = get_logger("app.infrastructure.external.storage.dispatcher")
    assert logger.name == "app.infrastructure.external.storage.dispatcher"
    assert logger is logging.getLogger("app.infrastructure.external.storage.dispatcher")


def test_filter_uses_dash_outside_request() -> None:
    set_request_id(None)
    record = _record()
    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "-"


def test_filter_attaches_bound_request_id() -> None:
    set_request_id("req-42")
    try:
        record = _record()
        RequestIdFilter().filter(record)
        assert record.request_id == "req-42"
    finally:
        set_request_id(None)


def test_storage_modules_log_through_get_logger() -> None:
    from app.infrastructure.external.storage import dispatcher, factory

    assert dispatcher.logger.name == dispatcher.__name__
    assert factory.logger.name == factory.__name__
