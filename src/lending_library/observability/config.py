"""Configuration for Logfire observability."""

import os
from typing import Literal

from pydantic import BaseModel, Field

SendMode = bool | Literal["if-token-present"]


def _send_mode_from_env() -> SendMode:
    value = os.getenv("LOGFIRE_SEND", "if-token-present").lower()
    if value in ("true", "false"):
        return value == "true"
    return "if-token-present"


class ObservabilityConfig(BaseModel):
    """Configuration for Logfire observability."""

    # Connection
    token: str = Field(default_factory=lambda: os.getenv("LOGFIRE_TOKEN", ""), repr=False)
    project_name: str = "lending-library"
    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))

    # Behavior
    enabled: bool = Field(
        default_factory=lambda: os.getenv("LOGFIRE_ENABLED", "true").lower() == "true"
    )
    console_output: bool = Field(
        default_factory=lambda: os.getenv("LOGFIRE_CONSOLE", "false").lower() == "true"
    )
    send_to_logfire: SendMode = Field(default_factory=_send_mode_from_env)


class ProductionConfig(ObservabilityConfig):
    """Production-specific configuration."""

    console_output: bool = False
    send_to_logfire: SendMode = True


class DevelopmentConfig(ObservabilityConfig):
    """Development-specific configuration."""

    console_output: bool = True
    send_to_logfire: SendMode = False  # No token required locally


def get_environment_config() -> ObservabilityConfig:
    """Get configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development")

    if env == "production":
        return ProductionConfig()
    if env == "development":
        return DevelopmentConfig()
    return ObservabilityConfig()
