"""Tests for structured log formatting."""

import logging

from rollout.core.logging import StructuredFormatter, get_logger, log_with_context


def _record(msg="Created issue", **extra):
    record = logging.LogRecord(
        "rollout.api.issues", logging.INFO, "/srv/rollout/api/issues.py", 10, msg, None, None, "create_issue"
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_renders_key_value_pairs():
    line = StructuredFormatter().format(_record(entity_id="abc", extra_data={"fields": "status"}))

    assert "level=INFO" in line
    assert "module=issues" in line
    assert "function=create_issue" in line
    assert 'message="Created issue"' in line
    assert "entity_id=abc" in line
    assert "fields=status" in line


def test_log_with_context_lifts_entity_id(caplog):
    logger = get_logger("rollout.tests.logging")

    with caplog.at_level(logging.INFO, logger="rollout.tests.logging"):
        log_with_context(logger, logging.INFO, "Deleted issue", entity_id="i-1", upstream="x")

    record = caplog.records[-1]
    assert record.entity_id == "i-1"
    assert record.extra_data == {"upstream": "x"}


def test_log_with_context_reports_calling_function(caplog):
    logger = get_logger("rollout.tests.caller")

    def delete_issue():
        log_with_context(logger, logging.INFO, "Deleted issue", entity_id="i-2")

    with caplog.at_level(logging.INFO, logger="rollout.tests.caller"):
        delete_issue()

    record = caplog.records[-1]
    assert record.funcName == "delete_issue"
    assert record.module == "test_logging"


def test_get_logger_configures_once():
    first = get_logger("rollout.tests.once")
    second = get_logger("rollout.tests.once")

    assert first is second
    assert len(first.handlers) == 1
