"""Structured Logging — JSONFormatter output shape."""

import json
import logging

from storefront.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "storefront.test", logging.WARNING, __file__, 1, "Product %s gone", (7,), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "storefront.test"
    assert log["message"] == "Product 7 gone"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(product_id=7, username="alice", unrelated="x"),
    ))
    assert log["product_id"] == 7
    assert log["username"] == "alice"
    assert "unrelated" not in log
