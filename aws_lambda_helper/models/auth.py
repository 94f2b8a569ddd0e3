"""Authorization data extracted from a Lambda trigger event."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class AuthData(BaseModel):
    """
    Authorization data for a request instance.

    Attributes:
        token: Authorization token (API Gateway token authorizer only)
        method_id: Method ARN the authorization is being done for
        custom_data: Data cached by the API Gateway authorizer, de-flattened
            from its string form (usually session tokens and session data)
    """

    token: Optional[str] = Field(None, description="Authorization token")
    method_id: Optional[str] = Field(None, description="Method ARN")
    custom_data: Optional[Any] = Field(
        None, description="Authorizer custom data (parsed JSON)"
    )

    def is_empty(self) -> bool:
        """Check that no authorization data was extracted."""
        return self.token is None and self.method_id is None and self.custom_data is None
