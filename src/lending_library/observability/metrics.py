"""Custom metrics for the lending library."""

import logfire

resources_circulation = logfire.metric_counter(
    "library.resources.circulation",
    description="Resource circulation events (borrow/return)",
)

reservation_events = logfire.metric_counter(
    "library.resources.reservations",
    description="Reservation events (reserve/cancel)",
)


def record_circulation_event(event_type: str, resource_type: str) -> None:
    """Record a borrow or return."""
    resources_circulation.add(1, {"event_type": event_type, "resource_type": resource_type})


def record_reservation_event(event_type: str, resource_type: str) -> None:
    """Record a reservation being placed or cancelled."""
    reservation_events.add(1, {"event_type": event_type, "resource_type": resource_type})
