"""Lazy initialization of AWS service clients on a request instance."""

from aiobotocore.session import get_session

from aws_lambda_helper.config import Settings, get_lambda_client_config
from aws_lambda_helper.logging.audit import log_timing
from aws_lambda_helper.logging.config import get_logger
from aws_lambda_helper.models.instance import RequestInstance

logger = get_logger(__name__)


async def ensure_lambda_client(instance: RequestInstance, config: Settings) -> None:
    """
    Initialize the Lambda client on the instance, only if not already initialized.

    The client is entered on the instance's exit stack and stays open
    until the instance is cleaned up, so every invocation made with the
    same instance reuses it.

    Args:
        instance: Request instance to hold the client
        config: Settings snapshot to build the client from
    """
    if instance.aws.lambda_client is not None:
        return  # Already initialized

    log_timing("Init-Start", "AWS Lambda Loader", instance.time_ms)

    session = get_session()
    instance.aws.lambda_client = await instance.aws.exit_stack.enter_async_context(
        session.create_client("lambda", **get_lambda_client_config(config))
    )
    logger.debug(
        "Lambda client initialized",
        extra={
            "context": {
                "region": config.aws_region,
                "max_retries": config.max_retries,
            }
        },
    )

    log_timing("Init-End", "AWS Lambda Loader", instance.time_ms)
