"""Shared pytest fixtures."""

from unittest.mock import AsyncMock, Mock

import pytest

from aws_lambda_helper.config import Settings
from aws_lambda_helper.models.instance import RequestInstance


@pytest.fixture
def test_settings() -> Settings:
    """Create settings with fake credentials."""
    return Settings(
        aws_region="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        max_retries=2,
    )


@pytest.fixture
def instance() -> RequestInstance:
    """Create a fresh request instance."""
    return RequestInstance.initialize()


def make_payload(body: bytes) -> Mock:
    """Create a streaming payload returning body."""
    return Mock(read=AsyncMock(return_value=body))


@pytest.fixture
def mock_lambda_client(instance: RequestInstance) -> AsyncMock:
    """Attach a mock Lambda client to the instance."""
    client = AsyncMock()
    client.invoke.return_value = {"StatusCode": 202, "Payload": make_payload(b"")}
    instance.aws.lambda_client = client
    return client


@pytest.fixture
def callback() -> Mock:
    """Create a callback recording (err, response) calls."""
    return Mock(return_value=None)


@pytest.fixture
def payload_factory():
    """Create streaming payloads for mocked Invoke responses."""
    return make_payload
