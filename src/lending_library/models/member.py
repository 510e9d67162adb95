"""
LibraryMember model for the lending library.

A member borrows and returns resources and is held to the borrow limit of
their membership tier. The member keeps non-owning references to the
resources it has out, in borrow order; the serialized form carries only
their ids.
"""

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, computed_field, field_validator

from ..exceptions import InvalidMembershipError, LoanLimitExceededError, ResourceNotAvailableError
from ..observability import record_circulation_event, trace_operation
from .enums import MembershipType, ResourceStatus
from .resource import LibraryResource

logger = logging.getLogger(__name__)


class LibraryMember(BaseModel):
    """
    Represents a library member who can borrow resources.

    Borrowing checks the tier limit and the resource status before
    changing anything, so a rejected borrow leaves both the member and the
    resource untouched.
    """

    BORROW_LIMITS: ClassVar[dict[MembershipType, int]] = {
        MembershipType.STANDARD: 5,
        MembershipType.PREMIUM: 10,
    }

    member_id: str = Field(
        ...,
        description="Unique identifier for the member",
        min_length=1,
        max_length=100,
        frozen=True,
        examples=["M001", "member_jane_doe"],
    )

    membership_type: MembershipType = Field(
        ...,
        description="Membership tier, which sets the borrow limit",
        frozen=True,
        examples=["standard", "premium"],
    )

    _borrowed_resources: list[LibraryResource] = PrivateAttr(default_factory=list)

    @field_validator("membership_type", mode="before")
    @classmethod
    def validate_membership_type(cls, v):
        """Reject tiers the library does not offer."""
        if isinstance(v, MembershipType):
            return v
        try:
            return MembershipType(v.strip().lower() if isinstance(v, str) else v)
        except ValueError:
            raise InvalidMembershipError(f"Unknown membership type: {v!r}") from None

    @property
    def borrowed_resources(self) -> list[LibraryResource]:
        """Resources currently checked out, oldest borrow first."""
        return list(self._borrowed_resources)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def borrowed_resource_ids(self) -> list[str]:
        """Ids of the resources currently checked out."""
        return [resource.resource_id for resource in self._borrowed_resources]

    @property
    def borrow_limit(self) -> int:
        """Maximum number of resources this member may hold at once."""
        return self.BORROW_LIMITS[self.membership_type]

    @property
    def can_borrow(self) -> bool:
        """Check if the member has room for another loan."""
        return len(self._borrowed_resources) < self.borrow_limit

    @property
    def available_borrows(self) -> int:
        """Calculate how many more resources the member can borrow."""
        return max(0, self.borrow_limit - len(self._borrowed_resources))

    def has_borrowed(self, resource: LibraryResource) -> bool:
        """Check if this exact resource is among the member's loans."""
        return any(held is resource for held in self._borrowed_resources)

    @trace_operation("borrow_resource")
    def borrow_resource(self, resource: LibraryResource) -> None:
        """
        Check out a resource to this member.

        Raises:
            LoanLimitExceededError: If the member is at their borrow limit
            ResourceNotAvailableError: If the resource is reserved or
                already borrowed
        """
        if not self.can_borrow:
            logger.info(
                "Borrow of '%s' by '%s' rejected: limit of %d reached",
                resource.resource_id,
                self.member_id,
                self.borrow_limit,
            )
            raise LoanLimitExceededError(self.member_id, self.borrow_limit)

        if resource.status == ResourceStatus.RESERVED:
            logger.info(
                "Borrow of '%s' by '%s' rejected: resource is reserved",
                resource.resource_id,
                self.member_id,
            )
            raise ResourceNotAvailableError(f"Resource '{resource.title}' is reserved")

        if resource.status != ResourceStatus.AVAILABLE:
            logger.info(
                "Borrow of '%s' by '%s' rejected: resource is %s",
                resource.resource_id,
                self.member_id,
                resource.status.value,
            )
            raise ResourceNotAvailableError(f"Resource '{resource.title}' is not available")

        resource._set_status(ResourceStatus.BORROWED)  # type: ignore[reportPrivateUsage]
        self._borrowed_resources.append(resource)
        record_circulation_event("borrow", type(resource).__name__)
        logger.info(
            "Member '%s' borrowed '%s' (%d/%d)",
            self.member_id,
            resource.resource_id,
            len(self._borrowed_resources),
            self.borrow_limit,
        )

    @trace_operation("return_resource")
    def return_resource(self, resource: LibraryResource) -> None:
        """
        Return a resource, making it available again.

        The resource is dropped from this member's loans if present, and its
        status is set to AVAILABLE either way.
        """
        for index, held in enumerate(self._borrowed_resources):
            if held is resource:
                del self._borrowed_resources[index]
                break
        else:
            logger.warning(
                "Member '%s' returned '%s' without holding it; status was %s",
                self.member_id,
                resource.resource_id,
                resource.status.value,
            )

        resource._set_status(ResourceStatus.AVAILABLE)  # type: ignore[reportPrivateUsage]
        record_circulation_event("return", type(resource).__name__)
        logger.info("Member '%s' returned '%s'", self.member_id, resource.resource_id)

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
        validate_default=True,
        extra="forbid",
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "member_id": "M001",
                "membership_type": "standard",
            }
        },
    )
