"""
Lending Library Package.

An in-memory model of a small lending library: books, digital content
and periodicals that members borrow, reserve, renew, and return.

Key Components:
- models: Pydantic models for resources and members
- exceptions: error taxonomy raised by member and resource operations
- config: configuration management with pydantic-settings
- observability: Logfire tracing and metrics for lending operations
"""

__version__ = "0.1.0"

from .exceptions import (
    AlreadyBorrowedError,
    InvalidMembershipError,
    InvalidStateError,
    LibraryError,
    LoanLimitExceededError,
    ResourceNotAvailableError,
)
from .models import (
    Book,
    ContentFormat,
    DigitalContent,
    LibraryMember,
    LibraryResource,
    MembershipType,
    Periodical,
    Renewable,
    Reservable,
    ResourceStatus,
)

__all__ = [
    "AlreadyBorrowedError",
    "Book",
    "ContentFormat",
    "DigitalContent",
    "InvalidMembershipError",
    "InvalidStateError",
    "LibraryError",
    "LibraryMember",
    "LibraryResource",
    "LoanLimitExceededError",
    "MembershipType",
    "Periodical",
    "Renewable",
    "Reservable",
    "ResourceNotAvailableError",
    "ResourceStatus",
    "__version__",
]
