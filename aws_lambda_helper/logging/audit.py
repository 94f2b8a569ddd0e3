"""Timing audit and research logging for AWS service calls."""

import json
import time
from typing import Any

from aws_lambda_helper.logging.config import get_logger

logger = get_logger(__name__)


def _elapsed_ms(start_time_ms: int | None) -> int | None:
    if start_time_ms is None:
        return None
    return int(time.time() * 1000) - start_time_ms


def log_timing(marker: str, label: str, start_time_ms: int | None = None) -> None:
    """
    Log a timing audit marker.

    Markers are used for external latency auditing only.

    Args:
        marker: Marker name ("Start", "End", "Init-Start", "Init-End")
        label: What is being timed
        start_time_ms: Epoch ms the request instance was created at
    """
    logger.debug(
        f"{marker}: {label}",
        extra={
            "context": {
                "timing_marker": marker,
                "timing_label": label,
                "elapsed_ms": _elapsed_ms(start_time_ms),
            }
        },
    )


def log_error_for_research(
    error: BaseException,
    cause: str,
    command: str,
    params: dict[str, Any] | None = None,
) -> None:
    """
    Report a failed service call with enough context to reproduce it.

    Emits exactly one ERROR record.

    Args:
        error: The exception raised by the service call
        cause: Label of the failing collaborator (e.g. "AWS Lambda")
        command: The attempted command name
        params: Request parameters that were sent
    """
    logger.error(
        f"Cause: {cause} | cmd: {command}",
        exc_info=error,
        extra={
            "context": {
                "error_type": type(error).__name__,
                "error_detail": str(error),
                "cause": cause,
                "command": command,
                "params": json.dumps(params, default=str) if params is not None else None,
            }
        },
    )
