"""
Periodical model for the lending library.

Unlike books, a periodical on the shelf can be reserved directly, and any
member may cancel a periodical reservation.
"""

import logging
from typing import TYPE_CHECKING, ClassVar

from pydantic import ConfigDict, Field, field_validator

from ..exceptions import AlreadyBorrowedError
from ..observability import trace_operation
from ..observability.metrics import record_reservation_event
from .capabilities import Renewable, Reservable
from .enums import ResourceStatus
from .resource import LibraryResource

if TYPE_CHECKING:
    from .member import LibraryMember

logger = logging.getLogger(__name__)


class Periodical(LibraryResource, Reservable, Renewable):
    """A magazine or journal issue."""

    LATE_FEE_PER_DAY: ClassVar[float] = 0.75
    MAX_LOAN_PERIOD_DAYS: ClassVar[int] = 7

    issue_number: int = Field(
        ...,
        description="Issue (edition) number of the periodical",
        ge=1,
        examples=[1, 42, 625],
    )

    frequency: str = Field(
        ...,
        description="Publication frequency label",
        min_length=1,
        max_length=50,
        examples=["weekly", "monthly", "quarterly"],
    )

    @field_validator("frequency")
    @classmethod
    def normalize_frequency(cls, v: str) -> str:
        """Store frequency labels in lowercase."""
        return v.lower()

    @property
    def max_loan_period(self) -> int:
        return self.MAX_LOAN_PERIOD_DAYS

    def calculate_late_fee(self, days_late: int) -> float:
        return self.LATE_FEE_PER_DAY * days_late

    @trace_operation("reserve")
    def reserve(self, member: "LibraryMember") -> None:
        """
        Reserve the periodical.

        Raises:
            AlreadyBorrowedError: If the periodical is currently borrowed
        """
        if self.status == ResourceStatus.BORROWED:
            logger.info(
                "Reservation of periodical '%s' by '%s' rejected: already borrowed",
                self.resource_id,
                member.member_id,
            )
            raise AlreadyBorrowedError(f"Periodical '{self.title}' is already borrowed")

        self._set_status(ResourceStatus.RESERVED)
        record_reservation_event("reserve", type(self).__name__)
        logger.info("Periodical '%s' reserved by '%s'", self.resource_id, member.member_id)

    @trace_operation("cancel_reservation")
    def cancel_reservation(self, member: "LibraryMember") -> None:
        """Make the periodical available again, whoever asks."""
        # No holder is recorded, so there is nothing to check the member against.
        if self.status != ResourceStatus.RESERVED:
            logger.warning(
                "Cancelling reservation of periodical '%s' that is %s; forcing available",
                self.resource_id,
                self.status.value,
            )

        self._set_status(ResourceStatus.AVAILABLE)
        record_reservation_event("cancel", type(self).__name__)
        logger.info(
            "Reservation of periodical '%s' cancelled by '%s'", self.resource_id, member.member_id
        )

    def renew_loan(self, member: "LibraryMember") -> bool:
        """A periodical loan can be renewed only while it is borrowed."""
        return self.status == ResourceStatus.BORROWED

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "resource_id": "P001",
                "title": "Nature",
                "issue_number": 625,
                "frequency": "weekly",
            }
        }
    )
