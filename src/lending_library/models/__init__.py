"""
Lending library models.

Pydantic models for the entities of the lending domain:
- LibraryResource: abstract lendable item with a status lifecycle
- Book, DigitalContent, Periodical: resource variants with their own
  late-fee rates, loan periods, and reservation/renewal policies
- LibraryMember: a borrower held to a membership-tier borrow limit
"""

from .book import Book
from .capabilities import Renewable, Reservable
from .digital_content import DigitalContent
from .enums import ContentFormat, MembershipType, ResourceStatus
from .member import LibraryMember
from .periodical import Periodical
from .resource import LibraryResource

__all__ = [
    "Book",
    "ContentFormat",
    "DigitalContent",
    "LibraryMember",
    "LibraryResource",
    "MembershipType",
    "Periodical",
    "Renewable",
    "Reservable",
    "ResourceStatus",
]
