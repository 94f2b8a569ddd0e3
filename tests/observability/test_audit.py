"""Tests for timing audit and research logging."""

import json
import logging
from unittest.mock import patch

from aws_lambda_helper.logging.audit import log_error_for_research, log_timing


def test_log_timing_records_marker_and_elapsed(caplog):
    """Test timing markers carry the elapsed time since instance creation."""
    with patch("aws_lambda_helper.logging.audit.time.time", return_value=2.5):
        with caplog.at_level(logging.DEBUG, logger="aws_lambda_helper.logging.audit"):
            log_timing("Start", "AWS invoke lambda", 1000)

    record = caplog.records[0]
    assert record.getMessage() == "Start: AWS invoke lambda"
    assert record.context["timing_marker"] == "Start"
    assert record.context["elapsed_ms"] == 1500


def test_log_timing_without_start_time(caplog):
    """Test markers work without an instance start time."""
    with caplog.at_level(logging.DEBUG, logger="aws_lambda_helper.logging.audit"):
        log_timing("Init-End", "AWS Lambda Loader")

    assert caplog.records[0].context["elapsed_ms"] is None


def test_log_error_for_research_single_record(caplog):
    """Test one error record holds cause, command and params."""
    error = RuntimeError("throttled")

    with caplog.at_level(logging.DEBUG):
        log_error_for_research(
            error,
            cause="AWS Lambda",
            command="Invoke Lambda",
            params={"FunctionName": "my-function"},
        )

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.ERROR
    assert record.exc_info[1] is error
    assert record.context["cause"] == "AWS Lambda"
    assert record.context["command"] == "Invoke Lambda"
    assert record.context["error_type"] == "RuntimeError"
    assert json.loads(record.context["params"]) == {"FunctionName": "my-function"}
