"""
Abstract library resource.

LibraryResource holds what every lendable item shares: an identifier, a
title, and a lifecycle status. Variants (Book, DigitalContent, Periodical)
supply their own late-fee rate and loan period, and opt into reservation
or renewal through the capability mixins.

Status moves through AVAILABLE -> BORROWED -> (RESERVED) -> AVAILABLE and
cycles indefinitely. It is exposed read-only; only member and variant
operations change it.
"""

import logging
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, computed_field

from .enums import ResourceStatus

logger = logging.getLogger(__name__)


class LibraryResource(BaseModel, ABC):
    """
    Common identity and state for every lendable item.

    Resources are owned by whatever collection holds them. Members keep
    non-owning references to the resources they borrow.
    """

    resource_id: str = Field(
        ...,
        description="Unique identifier of the resource",
        min_length=1,
        max_length=100,
        frozen=True,
        examples=["B001", "DC-2024-17", "P-0042"],
    )

    title: str = Field(
        ...,
        description="Title of the resource",
        min_length=1,
        max_length=500,
        examples=["The Pragmatic Programmer", "Nature, Vol. 625"],
    )

    _status: ResourceStatus = PrivateAttr(default=ResourceStatus.AVAILABLE)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> ResourceStatus:
        """Current lifecycle status of the resource."""
        return self._status

    @property
    def is_available(self) -> bool:
        """Check if the resource can be borrowed right now."""
        return self._status == ResourceStatus.AVAILABLE

    @property
    @abstractmethod
    def max_loan_period(self) -> int:
        """Maximum number of days the resource may be borrowed."""

    @abstractmethod
    def calculate_late_fee(self, days_late: int) -> float:
        """
        Calculate the late fee for an overdue resource.

        Args:
            days_late: Number of days past the due date (non-negative)

        Returns:
            The variant's daily rate multiplied by days_late
        """

    def _set_status(self, status: ResourceStatus) -> None:
        """Move the resource to a new status (member and variant operations only)."""
        if status != self._status:
            logger.debug(
                "Resource '%s' status %s -> %s", self.resource_id, self._status.value, status.value
            )
        self._status = status

    model_config = ConfigDict(
        # Validate field values on assignment (title, author, ...)
        validate_assignment=True,
        populate_by_name=True,
        validate_default=True,
        # Reject unknown keyword arguments
        extra="forbid",
        str_strip_whitespace=True,
    )
