"""Configuration management using Pydantic Settings."""

import os
from typing import Any

from botocore.config import Config
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aws_lambda_helper.exceptions import ConfigurationError

# Keys accepted by the module loader, mapped onto settings fields
LEGACY_CONFIG_KEYS: dict[str, str] = {
    "KEY": "aws_access_key_id",
    "SECRET": "aws_secret_access_key",
    "REGION": "aws_region",
    "MAX_RETRIES": "max_retries",
}


class Settings(BaseSettings):
    """Helper settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Only load .env file in development (not Lambda/production)
        env_file=".env" if os.getenv("AWS_EXECUTION_ENV") is None else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # AWS Configuration
    aws_region: str = "us-east-1"  # Default: US East (N. Virginia)
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_session_token: str | None = None  # Required for temporary credentials

    @field_validator(
        "aws_access_key_id", "aws_secret_access_key", "aws_session_token", mode="before"
    )
    @classmethod
    def convert_empty_string_to_none(cls, v):
        """Convert empty strings to None so boto3 can use IAM role in Lambda."""
        if v is None:
            return None
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    # Lambda client Configuration
    lambda_endpoint_url: str | None = None  # LocalStack only
    max_retries: int = 3  # Total attempts, including the first request

    @field_validator("max_retries")
    @classmethod
    def validate_max_retries(cls, v: int) -> int:
        """Require at least the first attempt."""
        if v < 1:
            raise ValueError("max_retries must be 1 or greater")
        return v

    # Application Configuration
    log_level: str = "INFO"

    def with_overrides(self, overrides: dict[str, Any] | None) -> "Settings":
        """
        Merge custom configuration over these settings.

        The merge is a shallow key overwrite. Both the loader keys
        (KEY, SECRET, REGION, MAX_RETRIES) and field names are accepted.
        The current settings object is left untouched.

        Args:
            overrides: Custom configuration in key-value pairs (None = no change)

        Returns:
            New validated Settings instance

        Raises:
            ConfigurationError: If a key is unknown or a value fails validation
        """
        if not overrides:
            return self

        update: dict[str, Any] = {}
        for key, value in overrides.items():
            field_name = LEGACY_CONFIG_KEYS.get(key, key)
            if field_name not in type(self).model_fields:
                raise ConfigurationError(
                    f"Unknown configuration key: {key}",
                    details={"key": key},
                )
            update[field_name] = value

        merged = self.model_dump()
        merged.update(update)
        try:
            return type(self).model_validate(merged)
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid configuration override",
                details={"errors": exc.errors(include_url=False)},
            ) from exc


def get_lambda_client_config(config: Settings) -> dict[str, Any]:
    """
    Build Lambda client configuration from settings.

    Credentials are only passed when explicitly configured, otherwise
    the default credential chain (IAM role in Lambda) is used.

    Args:
        config: Settings snapshot to build the client from

    Returns:
        Dictionary of aiobotocore client parameters
    """
    client_config: dict[str, Any] = {
        "region_name": config.aws_region,
        "config": Config(retries={"total_max_attempts": config.max_retries}),
    }

    if config.lambda_endpoint_url:
        client_config["endpoint_url"] = config.lambda_endpoint_url

    if config.aws_access_key_id is not None:
        client_config["aws_access_key_id"] = config.aws_access_key_id
    if config.aws_secret_access_key is not None:
        client_config["aws_secret_access_key"] = config.aws_secret_access_key
    if config.aws_session_token is not None:
        client_config["aws_session_token"] = config.aws_session_token

    return client_config


# Global settings instance
settings = Settings()
