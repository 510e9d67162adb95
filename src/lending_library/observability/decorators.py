"""Decorators for tracing library operations."""

import functools
from collections.abc import Callable
from datetime import datetime
from typing import Any

import logfire

from ..config import get_config


def trace_operation(operation: str):
    """
    Decorator to trace a member or resource operation.

    The wrapped method runs inside a Logfire span tagged with the ids of
    the entity it was called on and of any entity passed to it. Errors are
    recorded on the span and re-raised unchanged.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            if not get_config().tracing_enabled:
                return func(self, *args, **kwargs)

            with logfire.span(
                "library.{operation}",
                operation=operation,
                operation_category=_categorize_operation(operation),
                entity_type=type(self).__name__,
            ) as span:
                start_time = datetime.now()

                _add_entity_attributes(span, "subject", self)
                for arg in (*args, *kwargs.values()):
                    _add_entity_attributes(span, "target", arg)

                try:
                    result = func(self, *args, **kwargs)

                    span.set_attribute("operation.success", True)
                    span.set_attribute(
                        "operation.duration_ms",
                        (datetime.now() - start_time).total_seconds() * 1000,
                    )
                    return result

                except Exception as e:
                    span.set_attribute("operation.success", False)
                    span.set_attribute("operation.error", str(e))
                    span.set_attribute("operation.error_type", type(e).__name__)
                    raise

        return wrapper

    return decorator


def _categorize_operation(operation: str) -> str:
    """Group operations for dashboards."""
    if "borrow" in operation or "return" in operation:
        return "circulation"
    if "reserv" in operation:
        return "reservation"
    return "general"


def _add_entity_attributes(span, prefix: str, entity: Any) -> None:
    """Tag the span with whichever identifiers the entity carries."""
    for attribute in ("resource_id", "member_id"):
        value = getattr(entity, attribute, None)
        if isinstance(value, str):
            span.set_attribute(f"{prefix}.{attribute}", value)
