"""AWS Lambda handler entry point.

The Python Lambda runtime has no response callback: the handler returns
the response, or raises to report an error. This module bridges that
contract to the helper's callback(err, response) contract so application
code can bind the event, invoke other functions and return its response
through the gateway response slot.
"""

import asyncio
from typing import Any, Awaitable, Callable

from aws_lambda_helper.adapter import LambdaHelper
from aws_lambda_helper.exceptions import LambdaHelperError
from aws_lambda_helper.logging.config import get_logger
from aws_lambda_helper.models.instance import RequestInstance

logger = get_logger(__name__)

App = Callable[[RequestInstance, LambdaHelper], Awaitable[Any]]


async def handle_event(
    app: App, helper: LambdaHelper, event: dict | None, context: object
) -> Any:
    """
    Run the application for one Lambda event.

    If the application never returns a response through the helper,
    its return value is used as the response.

    Args:
        app: Async application function taking (instance, helper)
        helper: LambdaHelper used to bind the event
        event: Lambda trigger event
        context: Lambda context object with runtime information

    Returns:
        Response handed to the gateway response callback

    Raises:
        Exception: The error handed to the gateway response callback,
            wrapped in LambdaHelperError if it is not an exception
    """
    outcome: dict[str, Any] = {"error": None, "response": None}

    def response_callback(err: Any = None, response: Any = None) -> None:
        outcome["error"] = err
        outcome["response"] = response

    instance = RequestInstance.initialize()
    helper.load_lambda_args_to_instance(instance, event, context, response_callback)
    gateway_response = instance.gateway_response_callback

    try:
        result = await app(instance, helper)
        if not gateway_response.is_sent:
            helper.return_response_to_lambda_callback(instance, result)
    except Exception as exc:
        logger.error(
            "Application failed while handling Lambda event",
            exc_info=exc,
            extra={"correlation_id": getattr(context, "aws_request_id", None)},
        )
        if gateway_response.is_sent:
            raise
        gateway_response(exc)
    finally:
        await instance.aclose()

    error = outcome["error"]
    if error is not None:
        if isinstance(error, BaseException):
            raise error
        raise LambdaHelperError(
            str(error),
            error_code="APPLICATION_ERROR",
            details={"error": error},
        )
    return outcome["response"]


def build_lambda_handler(
    app: App, helper: LambdaHelper | None = None
) -> Callable[[dict, object], Any]:
    """
    Build an AWS Lambda function handler for an async application.

    Args:
        app: Async application function taking (instance, helper)
        helper: LambdaHelper to use (default configuration if None)

    Returns:
        Handler with the (event, context) signature of the Lambda runtime
    """
    helper = helper or LambdaHelper()

    def lambda_handler(event: dict, context: object) -> Any:
        """
        AWS Lambda function handler.

        Args:
            event: Lambda trigger event
            context: Lambda context object with runtime information

        Returns:
            Response returned by the application
        """
        return asyncio.run(handle_event(app, helper, event, context))

    return lambda_handler
