"""
Optional capabilities a resource variant may opt into.

These are plain abstract mixins rather than models: a variant lists them
next to LibraryResource in its bases, and isinstance() answers whether a
given resource supports the behavior.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .member import LibraryMember


class Reservable(ABC):
    """A resource a member can place a hold on."""

    @abstractmethod
    def reserve(self, member: "LibraryMember") -> None:
        """Place a reservation for the member."""

    @abstractmethod
    def cancel_reservation(self, member: "LibraryMember") -> None:
        """Withdraw a reservation and make the resource available again."""


class Renewable(ABC):
    """A resource whose loan can be extended."""

    @abstractmethod
    def renew_loan(self, member: "LibraryMember") -> bool:
        """Return True if the loan is eligible for renewal."""
