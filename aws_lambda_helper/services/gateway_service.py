"""Binding of Lambda trigger events to request instances and response return."""

import json
from typing import Any, Callable, Mapping

from aws_lambda_helper.exceptions import InstanceNotBoundError
from aws_lambda_helper.logging.config import get_logger
from aws_lambda_helper.models.auth import AuthData
from aws_lambda_helper.models.instance import (
    REQUEST_DISABLED,
    GatewayResponse,
    RequestInstance,
)

logger = get_logger(__name__)


def _authorizer_custom_data(event: Mapping[str, Any]) -> Any:
    """
    De-flatten the custom data saved by an API Gateway authorizer.

    Args:
        event: Lambda trigger event

    Returns:
        Parsed custom data, or None if absent, empty or malformed
    """
    request_context = event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    string_key = authorizer.get("stringKey")

    if not isinstance(string_key, str) or not string_key:
        return None

    try:
        return json.loads(string_key)
    except json.JSONDecodeError:
        logger.warning(
            "Authorizer stringKey is not valid JSON",
            extra={"context": {"length": len(string_key)}},
        )
        return None


def bind_event(
    instance: RequestInstance,
    event: Mapping[str, Any] | None,
    request_context: Any,
    response_callback: Callable[..., Any],
) -> None:
    """
    Set Lambda specific data into the request instance.

    Auth, request and response data are always reset and cleanup is
    locked until the gateway response is returned, even without an event.

    Args:
        instance: Request instance to be modified
        event: Event data that executed this function (API Gateway data)
        request_context: Lambda execution related data (LambdaContext)
        response_callback: Callback for the final output sent to API Gateway
    """
    instance.auth = AuthData()
    instance.request = {}
    instance.response = {}

    # Lock cleanup until response is returned
    instance.cleanup_locked = True
    instance.gateway_response_callback = GatewayResponse(instance, response_callback)

    if event is None:
        return

    # Auth token and method ARN (token authorizer only)
    if event.get("authorizationToken"):
        instance.auth.token = event["authorizationToken"]

    if event.get("methodArn"):
        instance.auth.method_id = event["methodArn"]

    # Custom data saved in API Gateway authorizer (request authorizer only)
    custom_data = _authorizer_custom_data(event)
    if custom_data is not None:
        instance.auth.custom_data = custom_data

    logger.debug(
        "Lambda event bound to instance",
        extra={
            "correlation_id": getattr(request_context, "aws_request_id", None),
            "context": {
                "has_token": instance.auth.token is not None,
                "has_method_id": instance.auth.method_id is not None,
                "has_custom_data": instance.auth.custom_data is not None,
            },
        },
    )


def dispatch_response(instance: RequestInstance, response: Any = None) -> bool:
    """
    Return response data to the Lambda callback.

    Args:
        instance: Request instance bound with bind_event
        response: Lambda response data

    Returns:
        True once the response has been handed to the callback

    Raises:
        InstanceNotBoundError: If no event was bound to the instance
        ResponseAlreadySentError: If the response was already returned
    """
    if instance.gateway_response_callback is None:
        logger.error(
            "Response dispatched before Lambda event was bound",
            extra={"context": {"time_ms": instance.time_ms}},
        )
        raise InstanceNotBoundError()

    instance.gateway_response_callback(None, response)
    return True


def is_lambda_instance(instance: RequestInstance) -> bool:
    """
    Check if Lambda request data is initialized in the instance.

    Args:
        instance: Request instance

    Returns:
        True if running in a Lambda instance, False otherwise
    """
    return instance.request is not None and instance.request is not REQUEST_DISABLED
