"""
App-level configuration shared by every block.

Blocks receive the account credentials and the optional endpoint override
from the host's ``app.config`` mapping. The Lambda entry point falls back to
environment variables when the event carries no app config.
"""
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _optional(value: Any) -> Optional[str]:
    # Host forms submit empty strings for untouched fields
    if value is None or value == "":
        return None
    return str(value)


@dataclass
class AppConfig:
    """Type-safe app configuration: static credentials plus endpoint override."""

    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    session_token: Optional[str] = None
    endpoint: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, app_config: Optional[Mapping[str, Any]]) -> "AppConfig":
        """
        Create AppConfig from the host's ``app.config`` mapping.

        Args:
            app_config: Mapping with camelCase keys (accessKeyId,
                secretAccessKey, sessionToken, endpoint)

        Returns:
            AppConfig: The app configuration
        """
        app_config = app_config or {}
        return cls(
            access_key_id=_optional(app_config.get("accessKeyId")),
            secret_access_key=_optional(app_config.get("secretAccessKey")),
            session_token=_optional(app_config.get("sessionToken")),
            endpoint=_optional(app_config.get("endpoint")),
        )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Create AppConfig from environment variables.

        Raises:
            ValueError: If required environment variables are missing or invalid.
        """
        access_key_id = os.environ.get("AWS_ACCESS_KEY_ID")
        if not access_key_id:
            raise ValueError(
                "AWS_ACCESS_KEY_ID environment variable is required"
            )

        secret_access_key = os.environ.get("AWS_SECRET_ACCESS_KEY")
        if not secret_access_key:
            raise ValueError(
                "AWS_SECRET_ACCESS_KEY environment variable is required"
            )

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {log_level}"
            )

        return cls(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=_optional(os.environ.get("AWS_SESSION_TOKEN")),
            endpoint=_optional(os.environ.get("AWS_ENDPOINT_URL")),
            log_level=log_level,
        )


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the global app configuration built from the environment.

    Returns:
        AppConfig: The validated configuration object

    Raises:
        ValueError: If required environment variables are missing or invalid.
    """
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config
