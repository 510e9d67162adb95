"""
DigitalContent model for the lending library.

Digital copies are never reserved: any number of members may hold one at
the same time, and a loan can always be renewed.
"""

from typing import TYPE_CHECKING, ClassVar

from pydantic import ConfigDict, Field, field_validator

from .capabilities import Renewable
from .enums import ContentFormat
from .resource import LibraryResource

if TYPE_CHECKING:
    from .member import LibraryMember


class DigitalContent(LibraryResource, Renewable):
    """An e-book or document delivered as a file."""

    LATE_FEE_PER_DAY: ClassVar[float] = 0.25
    MAX_LOAN_PERIOD_DAYS: ClassVar[int] = 7

    file_size: float = Field(
        ...,
        description="Size of the file in megabytes",
        ge=0.0,
        examples=[2.5, 14.8],
    )

    format: ContentFormat = Field(
        ...,
        description="File format of the content",
        examples=["pdf", "epub"],
    )

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Accept format names in any case ("PDF", "epub")."""
        if isinstance(v, str) and not isinstance(v, ContentFormat):
            return v.strip().lower()
        return v

    @property
    def max_loan_period(self) -> int:
        return self.MAX_LOAN_PERIOD_DAYS

    def calculate_late_fee(self, days_late: int) -> float:
        return self.LATE_FEE_PER_DAY * days_late

    def renew_loan(self, member: "LibraryMember") -> bool:
        """Digital content can always be renewed."""
        return True

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "resource_id": "DC001",
                "title": "Python Tricks",
                "file_size": 4.2,
                "format": "epub",
            }
        }
    )
