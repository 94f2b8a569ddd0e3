"""Tests for the request instance model."""

import time
from unittest.mock import AsyncMock, Mock

import pytest

from aws_lambda_helper.exceptions import ResponseAlreadySentError
from aws_lambda_helper.models.instance import GatewayResponse, RequestInstance, ResponseState


def test_initialize_sets_defaults():
    """Test a new instance is unbound with a creation time."""
    before = int(time.time() * 1000)
    instance = RequestInstance.initialize()

    assert instance.time_ms >= before
    assert instance.auth is None
    assert instance.request is None
    assert instance.cleanup_locked is False
    assert instance.gateway_response_callback is None
    assert instance.aws.lambda_client is None


def test_gateway_response_forwards_arguments_verbatim(instance):
    """Test all arguments reach the callback unchanged."""
    callback = Mock(return_value="returned")
    instance.cleanup_locked = True
    gateway_response = GatewayResponse(instance, callback)

    result = gateway_response(ValueError("x"), {"a": 1}, "extra")

    args = callback.call_args.args
    assert isinstance(args[0], ValueError)
    assert args[1:] == ({"a": 1}, "extra")
    assert result == "returned"
    assert gateway_response.state is ResponseState.SENT
    assert instance.cleanup_locked is False


def test_gateway_response_is_single_use(instance):
    """Test the second send raises without calling the callback."""
    callback = Mock()
    gateway_response = GatewayResponse(instance, callback)
    gateway_response.send(None, 1)

    with pytest.raises(ResponseAlreadySentError):
        gateway_response.send(None, 2)

    assert callback.call_count == 1


def test_gateway_response_callback_failure_keeps_cleanup_locked(instance):
    """Test cleanup stays locked when the callback raises."""
    instance.cleanup_locked = True
    gateway_response = GatewayResponse(instance, Mock(side_effect=RuntimeError("x")))

    with pytest.raises(RuntimeError):
        gateway_response(None, 1)

    assert instance.cleanup_locked is True
    assert gateway_response.is_sent


@pytest.mark.asyncio
async def test_aclose_refused_while_locked(instance):
    """Test clients are kept until the response is returned."""
    instance.cleanup_locked = True
    instance.aws.lambda_client = Mock()

    assert await instance.aclose() is False
    assert instance.aws.lambda_client is not None


@pytest.mark.asyncio
async def test_aclose_closes_entered_clients(instance):
    """Test cleanup exits every client context."""
    client_cm = AsyncMock()
    instance.aws.lambda_client = await instance.aws.exit_stack.enter_async_context(
        client_cm
    )

    assert await instance.aclose() is True

    client_cm.__aexit__.assert_awaited_once()
    assert instance.aws.lambda_client is None
