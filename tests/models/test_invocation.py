"""Tests for the invocation request model."""

import pytest
from pydantic import ValidationError

from aws_lambda_helper.models.invocation import InvocationRequest, InvocationType


def test_service_params_fire_and_forget():
    """Test asynchronous requests use the Event invocation type."""
    request = InvocationRequest(function_name="my-function:v1", function_args={"a": 1})

    params = request.to_service_params()

    assert request.invocation_type is InvocationType.EVENT
    assert params == {
        "FunctionName": "my-function:v1",
        "Payload": '{\n  "a": 1\n}',
        "LogType": "None",
        "InvocationType": "Event",
    }


def test_service_params_wait_for_response():
    """Test synchronous requests use the RequestResponse invocation type."""
    request = InvocationRequest(
        function_name="123456789012:function:my-function",
        function_args=[],
        synchronous=True,
    )

    assert request.to_service_params()["InvocationType"] == "RequestResponse"


def test_function_name_is_required():
    """Test an empty function name is rejected."""
    with pytest.raises(ValidationError):
        InvocationRequest(function_name="", function_args={})
