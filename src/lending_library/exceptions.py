"""
Error taxonomy for the lending library.

Every failure raised by a member or resource operation derives from
LibraryError, so callers can catch the whole family at once or react to
a single kind. Operations check before they mutate: when one of these is
raised, neither the member nor the resource has changed.
"""


class LibraryError(Exception):
    """Base exception for lending library operations."""


class InvalidStateError(LibraryError):
    """Raised when a resource is not in a state that allows the operation."""


class AlreadyBorrowedError(LibraryError):
    """Raised when reserving a resource that is currently out on loan."""


class ResourceNotAvailableError(LibraryError):
    """Raised when borrowing a resource that is reserved or already borrowed."""


class LoanLimitExceededError(LibraryError):
    """Raised when a member is already at their membership's borrow limit."""

    def __init__(self, member_id: str, limit: int):
        super().__init__(f"Maximum loan limit of {limit} reached for member '{member_id}'")
        self.member_id = member_id
        self.limit = limit


class InvalidMembershipError(LibraryError):
    """Raised when a membership type is not one the library offers."""


__all__ = [
    "AlreadyBorrowedError",
    "InvalidMembershipError",
    "InvalidStateError",
    "LibraryError",
    "LoanLimitExceededError",
    "ResourceNotAvailableError",
]
