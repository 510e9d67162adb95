"""
Book model for the lending library.

Books are the only variant with an owned reservation: a book already out
on loan can be put on hold by exactly one member, and only that member
can withdraw the hold.
"""

import logging
from typing import TYPE_CHECKING, ClassVar

from pydantic import ConfigDict, Field, PrivateAttr, computed_field

from ..exceptions import InvalidStateError
from ..observability import trace_operation
from ..observability.metrics import record_reservation_event
from .capabilities import Renewable, Reservable
from .enums import ResourceStatus
from .resource import LibraryResource

if TYPE_CHECKING:
    from .member import LibraryMember

logger = logging.getLogger(__name__)


class Book(LibraryResource, Reservable, Renewable):
    """A printed book, reservable while on loan and renewable while borrowed."""

    LATE_FEE_PER_DAY: ClassVar[float] = 0.5
    MAX_LOAN_PERIOD_DAYS: ClassVar[int] = 14

    author: str = Field(
        ...,
        description="Author of the book",
        min_length=1,
        max_length=200,
        examples=["Robert C. Martin", "Joshua Bloch"],
    )

    isbn: str = Field(
        ...,
        description="International Standard Book Number",
        min_length=1,
        max_length=20,
        examples=["9780134685479", "978-0-13-235088-4"],
    )

    # Member id of the outstanding reservation, never a member object
    _reserved_by: str | None = PrivateAttr(default=None)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def reserved_by(self) -> str | None:
        """Id of the member holding the reservation, if any."""
        return self._reserved_by

    @property
    def max_loan_period(self) -> int:
        return self.MAX_LOAN_PERIOD_DAYS

    def calculate_late_fee(self, days_late: int) -> float:
        return self.LATE_FEE_PER_DAY * days_late

    def _set_status(self, status: ResourceStatus) -> None:
        """Move the book to a new status, dropping the hold once it leaves RESERVED."""
        if status != ResourceStatus.RESERVED and self._reserved_by is not None:
            logger.info(
                "Reservation of book '%s' by '%s' cleared on move to %s",
                self.resource_id,
                self._reserved_by,
                status.value,
            )
            self._reserved_by = None
        super()._set_status(status)

    @trace_operation("reserve")
    def reserve(self, member: "LibraryMember") -> None:
        """
        Reserve the book for a member while it is out on loan.

        Raises:
            InvalidStateError: If the book is available, already reserved,
                or otherwise not eligible for a reservation
        """
        if self.status != ResourceStatus.BORROWED or self._reserved_by is not None:
            logger.info(
                "Reservation of book '%s' by '%s' rejected: status is %s",
                self.resource_id,
                member.member_id,
                self.status.value,
            )
            raise InvalidStateError(f"Book '{self.title}' cannot be reserved")

        self._set_status(ResourceStatus.RESERVED)
        self._reserved_by = member.member_id
        record_reservation_event("reserve", type(self).__name__)
        logger.info("Book '%s' reserved by '%s'", self.resource_id, member.member_id)

    @trace_operation("cancel_reservation")
    def cancel_reservation(self, member: "LibraryMember") -> None:
        """Cancel the reservation if the member holds it; otherwise do nothing."""
        if self._reserved_by is None or self._reserved_by != member.member_id:
            logger.debug(
                "Ignoring cancellation of book '%s' by non-holder '%s'",
                self.resource_id,
                member.member_id,
            )
            return

        self._reserved_by = None
        self._set_status(ResourceStatus.AVAILABLE)
        record_reservation_event("cancel", type(self).__name__)
        logger.info("Reservation of book '%s' cancelled by '%s'", self.resource_id, member.member_id)

    def renew_loan(self, member: "LibraryMember") -> bool:
        """A book loan can be renewed only while it is borrowed."""
        # A waiting reservation does not block renewal.
        return self.status == ResourceStatus.BORROWED

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "resource_id": "B001",
                "title": "Clean Code",
                "author": "Robert C. Martin",
                "isbn": "9780132350884",
            }
        }
    )
