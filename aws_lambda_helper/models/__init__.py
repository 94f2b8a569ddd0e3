"""Data models for the Lambda helper."""

from aws_lambda_helper.models.auth import AuthData
from aws_lambda_helper.models.instance import (
    REQUEST_DISABLED,
    AwsClients,
    GatewayResponse,
    RequestInstance,
    ResponseState,
)
from aws_lambda_helper.models.invocation import InvocationRequest, InvocationType

__all__ = [
    "AuthData",
    "AwsClients",
    "GatewayResponse",
    "InvocationRequest",
    "InvocationType",
    "REQUEST_DISABLED",
    "RequestInstance",
    "ResponseState",
]
