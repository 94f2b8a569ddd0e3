"""Custom exception classes for the Lambda helper."""

from typing import Any


class LambdaHelperError(Exception):
    """Base exception for the Lambda helper."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(LambdaHelperError):
    """Raised when a configuration override is invalid."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="INVALID_CONFIGURATION",
            details=details,
        )


class InstanceNotBoundError(LambdaHelperError):
    """Raised when a response is dispatched before the event was bound."""

    def __init__(
        self,
        message: str = "Instance is not bound to a Lambda event",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="INSTANCE_NOT_BOUND",
            details=details,
        )


class ResponseAlreadySentError(LambdaHelperError):
    """Raised when the gateway response is sent more than once."""

    def __init__(
        self,
        message: str = "Gateway response has already been sent",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="RESPONSE_ALREADY_SENT",
            details=details,
        )
