"""
Sample Lambda function built on the Lambda helper.

Demonstrates common workflows:
- Reading authorizer data bound from the trigger event
- Invoking another function and waiting for its response
- Firing an asynchronous audit event
- Returning the response through the gateway callback

Deploy with handler "sample_handler.lambda_handler".
"""

import os
from typing import Any

from aws_lambda_helper import LambdaHelper, RequestInstance, build_lambda_handler
from aws_lambda_helper.logging.config import configure_logging

configure_logging()

PROFILE_FUNCTION = os.getenv("PROFILE_FUNCTION", "user-profile-prod")
AUDIT_FUNCTION = os.getenv("AUDIT_FUNCTION", "audit-log-prod")


async def app(instance: RequestInstance, helper: LambdaHelper) -> None:
    """Look up the caller's profile and return it."""
    custom_data = instance.auth.custom_data or {}
    user_id = custom_data.get("user_id")

    profile: dict[str, Any] = {}

    def on_profile(err, response=None):
        if err:
            raise err
        profile.update(response or {})

    await helper.invoke(
        instance, on_profile, PROFILE_FUNCTION, {"user_id": user_id}, synchronous=True
    )

    # Audit failures must not fail the request
    def on_audit(err, response=None):
        return None

    await helper.invoke(
        instance, on_audit, AUDIT_FUNCTION, {"user_id": user_id, "action": "profile.read"}
    )

    helper.return_response_to_lambda_callback(
        instance, {"statusCode": 200, "body": profile}
    )


lambda_handler = build_lambda_handler(app)
