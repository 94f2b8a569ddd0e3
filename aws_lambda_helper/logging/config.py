"""Logging configuration with JSON formatting."""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any

from aws_lambda_helper.config import Settings, settings

# Context keys written by logging.audit, grouped under stable top-level keys
ERROR_FIELDS: dict[str, str] = {
    "error_type": "type",
    "error_detail": "detail",
    "cause": "cause",
    "command": "command",
    "params": "params",
}
TIMING_FIELDS: dict[str, str] = {
    "timing_marker": "marker",
    "timing_label": "label",
    "elapsed_ms": "elapsed_ms",
}


def _group(context: dict[str, Any], fields: dict[str, str]) -> dict[str, Any]:
    """Pop fields out of context, renamed."""
    return {name: context.pop(key) for key, name in fields.items() if key in context}


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs helper log records as JSON for CloudWatch.

    Each log record is formatted as a JSON object with the following fields:
    - timestamp: ISO 8601 record creation time in UTC
    - level, logger, message
    - function_name: Lambda function name (when running in Lambda)
    - correlation_id: Lambda request ID (if present in extra)
    - error: research fields of a failed service call (type, detail,
      cause, command, params)
    - timing: audit marker fields (marker, label, elapsed_ms)
    - Remaining fields from the `context` dict passed to logger calls
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as JSON.

        Args:
            record: The log record to format

        Returns:
            JSON string representation of the log record
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        function_name = os.getenv("AWS_LAMBDA_FUNCTION_NAME")
        if function_name:
            log_data["function_name"] = function_name

        if hasattr(record, "correlation_id"):
            log_data["correlation_id"] = record.correlation_id

        if hasattr(record, "context"):
            context = dict(record.context)
            error = _group(context, ERROR_FIELDS)
            if error:
                log_data["error"] = error
            timing = _group(context, TIMING_FIELDS)
            if timing:
                log_data["timing"] = timing
            log_data.update(context)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if record.levelno == logging.DEBUG:
            log_data["file"] = record.pathname
            log_data["line"] = record.lineno
            log_data["function"] = record.funcName

        # Request params may carry values json cannot encode natively
        return json.dumps(log_data, default=str)


def configure_logging(config: Settings | None = None) -> None:
    """
    Configure application logging with JSON formatter.

    Sets up the root logger to output structured JSON logs to stdout.
    Log level is determined by the LOG_LEVEL environment variable.

    Args:
        config: Settings to read the log level from (defaults to global settings)
    """
    config = config or settings
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates (Lambda installs its own)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    root_logger.info(
        "Logging configured",
        extra={"context": {"log_level": config.log_level}},
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: The name of the logger (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
