"""Configuration management for the lending library.

Settings come from LENDING_LIBRARY_* environment variables or a local
.env file and are validated with pydantic-settings. The borrowing rules
themselves are fixed by the resource and member models and are not
configurable here.
"""

import logging
import sys

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LibraryConfig(BaseSettings):
    """Runtime configuration for the lending library."""

    model_config = SettingsConfigDict(
        # Use LENDING_LIBRARY_ prefix for all env vars
        env_prefix="LENDING_LIBRARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    library_name: str = Field(
        default="lending-library",
        description="Name used to identify this library in logs and traces",
        pattern=r"^[a-z0-9-]+$",
    )

    version: str = Field(
        default="0.1.0",
        description="Library package version",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$",
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging for state transitions",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    tracing_enabled: bool = Field(
        default=True,
        description="Wrap member and resource operations in Logfire spans",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("library_name")
    @classmethod
    def validate_library_name(cls, v: str) -> str:
        """Keep library names short enough for span and logger labels."""
        if len(v) < 3:
            raise ValueError("Library name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Library name must not exceed 50 characters")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.log_level == "DEBUG"

    @property
    def effective_log_level(self) -> int:
        """Logging level to install, with debug forcing DEBUG."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


# === Global Configuration Instance ===


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: LibraryConfig | None = None


def get_config() -> LibraryConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = LibraryConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]


def configure_logging(config: LibraryConfig | None = None) -> None:
    """Install a stderr log handler for applications built on the library.

    The package never configures logging on import; hosting applications
    call this once at startup.
    """
    config = config or get_config()
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.getLogger(__name__).debug(
        "Logging configured for %s at %s", config.library_name, config.log_level
    )
