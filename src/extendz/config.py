"""Configuration for the Extend client and CLI."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.errors import ConfigurationError

EMAIL_ENV = "EXTEND_EMAIL"
PASSWORD_ENV = "EXTEND_PASSWORD"


class ExtendSettings(BaseSettings):
    """Extend client settings, read from ``EXTEND_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EXTEND_",
        env_file=".env",
        extra="ignore",
    )

    # Credentials
    email: str = ""
    password: SecretStr = SecretStr("")

    # API
    api_base_url: str = "https://api.paywithextend.com"
    request_timeout: float = 10.0
    token_validity_seconds: float = 600.0

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("request_timeout", "token_validity_seconds")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v

    def require_credentials(self) -> None:
        """Raise ConfigurationError unless both email and password are set."""
        missing = []
        if not self.email:
            missing.append(EMAIL_ENV)
        if not self.password.get_secret_value():
            missing.append(PASSWORD_ENV)
        if missing:
            raise ConfigurationError(
                f"The '{EMAIL_ENV}' and '{PASSWORD_ENV}' environment variables must be set",
                missing=missing,
            )


def load_settings(env_file: Optional[str] = None, **overrides: Any) -> ExtendSettings:
    """Load settings from the environment, applying non-None overrides."""
    env_path = Path(env_file) if env_file else None
    values = {k: v for k, v in overrides.items() if v is not None}
    if env_path is not None:
        return ExtendSettings(_env_file=env_path, **values)
    return ExtendSettings(**values)
