"""Correlation logging tests."""

import logging

from coverme.logging_utils import CorrelationFilter, reset_request_id, set_request_id


def make_record() -> logging.LogRecord:
    return logging.LogRecord("coverme", logging.INFO, __file__, 1, "message", None, None)


def test_filter_uses_current_request_id() -> None:
    token = set_request_id("abc-123")
    try:
        record = make_record()
        assert CorrelationFilter().filter(record) is True
        assert record.request_id == "abc-123"
    finally:
        reset_request_id(token)


def test_filter_outside_request() -> None:
    record = make_record()
    CorrelationFilter().filter(record)
    assert record.request_id == "-"
