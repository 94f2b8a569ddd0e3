"""Invocation of other Lambda functions."""

import inspect
import json
from typing import Any, Callable

from botocore.exceptions import BotoCoreError, ClientError

from aws_lambda_helper.config import Settings, settings
from aws_lambda_helper.logging.audit import log_error_for_research, log_timing
from aws_lambda_helper.logging.config import get_logger
from aws_lambda_helper.models.instance import RequestInstance
from aws_lambda_helper.models.invocation import InvocationRequest
from aws_lambda_helper.services.client_service import ensure_lambda_client

logger = get_logger(__name__)


async def _run_callback(callback: Callable[..., Any], *args: Any) -> Any:
    """Run a sync or async callback."""
    result = callback(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def read_payload(response: dict[str, Any]) -> Any:
    """
    Convert the stringified payload of an Invoke response back to JSON.

    Args:
        response: Response from the Lambda client's invoke call

    Returns:
        Parsed payload, or None if the payload is absent, empty or not JSON
    """
    payload = response.get("Payload")
    if payload is None:
        return None

    if hasattr(payload, "read"):
        payload = await payload.read()

    if not payload or not payload.strip():
        return None

    try:
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8")
        return json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError):
        logger.warning(
            "Lambda response payload is not valid JSON",
            extra={"context": {"payload_length": len(payload)}},
        )
        return None


class InvokeService:
    """
    Service for invoking Lambda functions.

    Builds the Invoke API request, sends it through the instance's
    Lambda client and maps the result onto a callback(err, response)
    contract.
    """

    def __init__(self, config: Settings | None = None) -> None:
        """
        Initialize InvokeService.

        Args:
            config: Settings used to build Lambda clients (global settings if None)
        """
        self.config = config or settings

    async def invoke(
        self,
        instance: RequestInstance,
        callback: Callable[..., Any],
        function_name: str,
        function_args: Any,
        synchronous: bool = False,
    ) -> Any:
        """
        Run a Lambda function.

        Args:
            instance: Request instance
            callback: Invoked once the call is finished, sync or async.
                callback(None, response) on success, where response is the
                parsed payload (synchronous execution only) or None.
                callback(err) on failure.
            function_name: Name or ARN of the Lambda function
            function_args: Event arguments for the function (JSON serializable)
            synchronous: If True, wait until the function returns a response

        Returns:
            Whatever the callback returns
        """
        await ensure_lambda_client(instance, self.config)

        request = InvocationRequest(
            function_name=function_name,
            function_args=function_args,
            synchronous=synchronous,
        )
        service_params = request.to_service_params()

        log_timing("Start", "AWS invoke lambda", instance.time_ms)
        try:
            response = await instance.aws.lambda_client.invoke(**service_params)
        except (ClientError, BotoCoreError) as err:
            log_error_for_research(
                err,
                cause="AWS Lambda",
                command="Invoke Lambda",
                params=service_params,
            )
            return await _run_callback(callback, err)

        log_timing("End", "AWS invoke lambda", instance.time_ms)

        if response.get("FunctionError"):
            logger.warning(
                "Invoked Lambda function returned an error",
                extra={
                    "context": {
                        "function_name": function_name,
                        "function_error": response["FunctionError"],
                    }
                },
            )

        lambda_response = await read_payload(response)
        return await _run_callback(callback, None, lambda_response)
