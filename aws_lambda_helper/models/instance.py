"""Per-request instance model."""

import time
from contextlib import AsyncExitStack
from enum import Enum
from typing import Any, Callable, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from aws_lambda_helper.exceptions import ResponseAlreadySentError
from aws_lambda_helper.logging.config import get_logger
from aws_lambda_helper.models.auth import AuthData

logger = get_logger(__name__)

# Marks an instance as deliberately not bound to a Lambda event
REQUEST_DISABLED: Literal[False] = False


class ResponseState(str, Enum):
    """Gateway response lifecycle."""

    PENDING = "pending"
    SENT = "sent"


class GatewayResponse:
    """
    One-shot wrapper around the Lambda response callback.

    Calling it forwards all arguments verbatim to the original callback
    and unlocks cleanup of the owning instance. A second call raises
    ResponseAlreadySentError instead of reaching the callback again.
    """

    def __init__(self, instance: "RequestInstance", callback: Callable[..., Any]) -> None:
        self.instance = instance
        self.callback = callback
        self.state = ResponseState.PENDING

    @property
    def is_sent(self) -> bool:
        return self.state is ResponseState.SENT

    def send(self, *args: Any) -> Any:
        """
        Send the response to the original callback.

        Returns:
            Whatever the original callback returns

        Raises:
            ResponseAlreadySentError: If the response was already sent
        """
        if self.is_sent:
            logger.error(
                "Gateway response sent more than once",
                extra={"context": {"time_ms": self.instance.time_ms}},
            )
            raise ResponseAlreadySentError()

        self.state = ResponseState.SENT
        result = self.callback(*args)
        self.instance.cleanup_locked = False  # Unlock cleanup
        return result

    __call__ = send


class AwsClients(BaseModel):
    """
    AWS service clients lazily created for one request instance.

    Attributes:
        lambda_client: aiobotocore Lambda client (None until first use)
        exit_stack: Owns the client context managers until cleanup
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    lambda_client: Optional[Any] = None
    exit_stack: AsyncExitStack = Field(default_factory=AsyncExitStack)

    async def aclose(self) -> None:
        """Close every client entered on the exit stack."""
        await self.exit_stack.aclose()
        self.lambda_client = None
        self.exit_stack = AsyncExitStack()


class RequestInstance(BaseModel):
    """
    Mutable context threaded through a single request.

    Attributes:
        time_ms: Epoch milliseconds the instance was created at
        auth: Authorization data (set when bound to an event)
        request: Request data received by Lambda, None if unbound,
            REQUEST_DISABLED if deliberately not event-bound
        response: Response data to be sent out by Lambda
        cleanup_locked: True until the gateway response is returned
        gateway_response_callback: One-shot response slot
        aws: Lazily created AWS clients
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    time_ms: int = Field(default_factory=lambda: int(time.time() * 1000))
    auth: Optional[AuthData] = None
    request: Union[Dict[str, Any], Literal[False], None] = None
    response: Optional[Dict[str, Any]] = None
    cleanup_locked: bool = False
    gateway_response_callback: Optional[GatewayResponse] = None
    aws: AwsClients = Field(default_factory=AwsClients)

    @classmethod
    def initialize(cls) -> "RequestInstance":
        """Create a fresh instance for a new request."""
        return cls()

    def disable_request(self) -> None:
        """Mark this instance as not bound to a Lambda event."""
        self.request = REQUEST_DISABLED

    async def aclose(self) -> bool:
        """
        Release AWS clients held by this instance.

        Returns:
            True if cleaned up, False if cleanup is still locked
        """
        if self.cleanup_locked:
            logger.warning(
                "Cleanup skipped, response not yet returned",
                extra={"context": {"time_ms": self.time_ms}},
            )
            return False

        await self.aws.aclose()
        return True
