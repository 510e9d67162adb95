"""Logfire observability for the lending library."""

import logging

import logfire

from .config import ObservabilityConfig, get_environment_config
from .decorators import trace_operation
from .metrics import record_circulation_event

logger = logging.getLogger(__name__)


def initialize_observability(config: ObservabilityConfig | None = None) -> None:
    """Initialize Logfire with configuration."""
    config = config or get_environment_config()

    if not config.enabled:
        logger.debug("Observability disabled via configuration")
        return

    # console=None keeps Logfire's default console exporter, False turns it off
    logfire.configure(
        token=config.token or None,
        service_name=config.project_name,
        environment=config.environment,
        send_to_logfire=config.send_to_logfire,
        console=None if config.console_output else False,
    )
    logger.info("Observability initialized for %s (%s)", config.project_name, config.environment)


__all__ = [
    "ObservabilityConfig",
    "initialize_observability",
    "record_circulation_event",
    "trace_operation",
]
