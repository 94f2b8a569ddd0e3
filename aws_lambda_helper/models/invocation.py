"""Invocation request model for the Lambda Invoke API."""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class InvocationType(str, Enum):
    """Lambda invocation modes."""

    EVENT = "Event"  # Fire-and-forget, no response awaited
    REQUEST_RESPONSE = "RequestResponse"  # Wait for the function to return


class InvocationRequest(BaseModel):
    """
    Request to invoke a Lambda function.

    Attributes:
        function_name: Name or ARN of the function
            ("my-function" | "my-function:v1" | "123456789012:function:my-function")
        function_args: Event arguments for the function (JSON serializable)
        synchronous: Keep the connection open until the function returns
    """

    function_name: str = Field(..., min_length=1, description="Function name or ARN")
    function_args: Any = Field(..., description="Event arguments for the function")
    synchronous: bool = Field(default=False, description="Wait for response")

    @property
    def invocation_type(self) -> InvocationType:
        if self.synchronous:
            return InvocationType.REQUEST_RESPONSE
        return InvocationType.EVENT

    def to_service_params(self) -> dict[str, str]:
        """
        Build Invoke API parameters.

        Returns:
            Parameters for the Lambda client's invoke call
        """
        return {
            "FunctionName": self.function_name,
            "Payload": json.dumps(self.function_args, indent=2),
            "LogType": "None",  # No log trail
            "InvocationType": self.invocation_type.value,
        }
