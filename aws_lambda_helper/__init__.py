"""Helper for invoking AWS Lambda functions and handling Lambda events."""

from aws_lambda_helper.adapter import LambdaHelper
from aws_lambda_helper.config import Settings, settings
from aws_lambda_helper.exceptions import (
    ConfigurationError,
    InstanceNotBoundError,
    LambdaHelperError,
    ResponseAlreadySentError,
)
from aws_lambda_helper.lambda_handler import build_lambda_handler
from aws_lambda_helper.models import REQUEST_DISABLED, AuthData, RequestInstance

__all__ = [
    "AuthData",
    "ConfigurationError",
    "InstanceNotBoundError",
    "LambdaHelper",
    "LambdaHelperError",
    "REQUEST_DISABLED",
    "RequestInstance",
    "ResponseAlreadySentError",
    "Settings",
    "build_lambda_handler",
    "settings",
]
