"""Tests for lazy Lambda client initialization."""

from unittest.mock import MagicMock, patch

import pytest
from moto import mock_aws

from aws_lambda_helper.services.client_service import ensure_lambda_client


@pytest.mark.asyncio
async def test_ensure_lambda_client_creates_client_once(instance, test_settings):
    """Test two calls on one instance construct exactly one client."""
    with patch(
        "aws_lambda_helper.services.client_service.get_session"
    ) as mock_get_session:
        session = MagicMock()
        mock_get_session.return_value = session

        await ensure_lambda_client(instance, test_settings)
        first_client = instance.aws.lambda_client
        await ensure_lambda_client(instance, test_settings)

    assert session.create_client.call_count == 1
    assert instance.aws.lambda_client is first_client
    args, kwargs = session.create_client.call_args
    assert args == ("lambda",)
    assert kwargs["region_name"] == "us-east-1"
    assert kwargs["config"].retries == {"total_max_attempts": 2}


@pytest.mark.asyncio
async def test_ensure_lambda_client_skips_existing_client(instance, test_settings):
    """Test an already attached client is kept."""
    existing = object()
    instance.aws.lambda_client = existing

    with patch(
        "aws_lambda_helper.services.client_service.get_session"
    ) as mock_get_session:
        await ensure_lambda_client(instance, test_settings)

    mock_get_session.assert_not_called()
    assert instance.aws.lambda_client is existing


@pytest.mark.asyncio
async def test_instances_do_not_share_clients(test_settings):
    """Test each instance gets its own client."""
    from aws_lambda_helper.models.instance import RequestInstance

    first = RequestInstance.initialize()
    second = RequestInstance.initialize()

    with patch(
        "aws_lambda_helper.services.client_service.get_session"
    ) as mock_get_session:
        await ensure_lambda_client(first, test_settings)
        await ensure_lambda_client(second, test_settings)

    assert mock_get_session.call_count == 2
    assert first.aws.lambda_client is not None
    assert second.aws.lambda_client is not None


@pytest.mark.asyncio
async def test_ensure_lambda_client_builds_real_client(instance, test_settings):
    """Test a real aiobotocore client is configured from settings."""
    config = test_settings.with_overrides({"REGION": "eu-west-1"})

    with mock_aws():
        await ensure_lambda_client(instance, config)
        client = instance.aws.lambda_client

        assert client.meta.service_model.service_name == "lambda"
        assert client.meta.region_name == "eu-west-1"

        assert await instance.aclose() is True
        assert instance.aws.lambda_client is None
