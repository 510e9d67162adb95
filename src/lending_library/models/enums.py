"""Closed value types shared by resources and members."""

from enum import Enum


class ResourceStatus(str, Enum):
    """Lifecycle status of a library resource."""

    AVAILABLE = "available"
    BORROWED = "borrowed"
    RESERVED = "reserved"


class MembershipType(str, Enum):
    """Membership tiers; each tier carries its own borrow limit."""

    STANDARD = "standard"
    PREMIUM = "premium"


class ContentFormat(str, Enum):
    """File formats for digital content."""

    PDF = "pdf"
    EPUB = "epub"
