"""Public facade for the Lambda helper."""

from typing import Any, Callable, Mapping

from aws_lambda_helper.config import Settings, settings
from aws_lambda_helper.models.instance import RequestInstance
from aws_lambda_helper.services.gateway_service import (
    bind_event,
    dispatch_response,
    is_lambda_instance,
)
from aws_lambda_helper.services.invoke_service import InvokeService


class LambdaHelper:
    """
    Lambda helper bound to one configuration snapshot.

    Custom configuration is merged over the base settings once, at
    construction, and never changes afterwards.
    """

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        base_settings: Settings | None = None,
    ) -> None:
        """
        Initialize LambdaHelper.

        Args:
            config: Custom configuration (KEY, SECRET, REGION, MAX_RETRIES
                or settings field names) merged over the base settings
            base_settings: Settings to merge into (global settings if None)

        Raises:
            ConfigurationError: If the custom configuration is invalid
        """
        base = base_settings or settings
        self.settings = base.with_overrides(dict(config) if config else None)
        self.invoke_service = InvokeService(self.settings)

    async def invoke(
        self,
        instance: RequestInstance,
        callback: Callable[..., Any],
        function_name: str,
        function_args: Any,
        synchronous: bool = False,
    ) -> Any:
        """Run a Lambda function. See InvokeService.invoke."""
        return await self.invoke_service.invoke(
            instance, callback, function_name, function_args, synchronous
        )

    def load_lambda_args_to_instance(
        self,
        instance: RequestInstance,
        event: Mapping[str, Any] | None,
        request_context: Any,
        response_callback: Callable[..., Any],
    ) -> None:
        bind_event(instance, event, request_context, response_callback)

    def return_response_to_lambda_callback(
        self, instance: RequestInstance, response: Any = None
    ) -> bool:
        return dispatch_response(instance, response)

    def is_lambda_instance(self, instance: RequestInstance) -> bool:
        return is_lambda_instance(instance)
