"""Service layer for Lambda invocation and event binding."""

from aws_lambda_helper.services.client_service import ensure_lambda_client
from aws_lambda_helper.services.gateway_service import (
    bind_event,
    dispatch_response,
    is_lambda_instance,
)
from aws_lambda_helper.services.invoke_service import InvokeService

__all__ = [
    "InvokeService",
    "bind_event",
    "dispatch_response",
    "ensure_lambda_client",
    "is_lambda_instance",
]
