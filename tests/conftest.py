"""Test configuration and fixtures for the lending library.

1. Isolated configuration - each test starts from a fresh settings singleton
2. Local-only observability - Logfire is configured without exporting
3. Ready-made members and resources in their initial states
"""

import os
from collections.abc import Generator
from unittest.mock import patch

import pytest

from lending_library.config import reset_config
from lending_library.models import (
    Book,
    ContentFormat,
    DigitalContent,
    LibraryMember,
    MembershipType,
    Periodical,
)
from lending_library.observability import ObservabilityConfig, initialize_observability

# === Session Setup ===


@pytest.fixture(scope="session", autouse=True)
def local_observability() -> None:
    """Configure Logfire once so spans are created but never sent anywhere."""
    initialize_observability(
        ObservabilityConfig(
            token="",
            environment="test",
            enabled=True,
            console_output=False,
            send_to_logfire=False,
        )
    )


@pytest.fixture(autouse=True)
def isolated_config() -> Generator[None, None, None]:
    """Keep LENDING_LIBRARY_* settings from leaking between tests."""
    clean_env = {k: v for k, v in os.environ.items() if not k.startswith("LENDING_LIBRARY_")}
    with patch.dict(os.environ, clean_env, clear=True):
        reset_config()
        yield
    reset_config()


# === Member Fixtures ===


@pytest.fixture
def standard_member() -> LibraryMember:
    return LibraryMember(member_id="M001", membership_type=MembershipType.STANDARD)


@pytest.fixture
def premium_member() -> LibraryMember:
    return LibraryMember(member_id="M002", membership_type=MembershipType.PREMIUM)


@pytest.fixture
def other_member() -> LibraryMember:
    return LibraryMember(member_id="M003", membership_type=MembershipType.STANDARD)


# === Resource Fixtures ===


@pytest.fixture
def book() -> Book:
    return Book(
        resource_id="B001",
        title="Clean Code",
        author="Robert C. Martin",
        isbn="9780132350884",
    )


@pytest.fixture
def digital_content() -> DigitalContent:
    return DigitalContent(
        resource_id="DC001",
        title="Python Tricks",
        file_size=4.2,
        format=ContentFormat.EPUB,
    )


@pytest.fixture
def periodical() -> Periodical:
    return Periodical(
        resource_id="P001",
        title="Nature",
        issue_number=625,
        frequency="weekly",
    )


@pytest.fixture
def make_books():
    """Factory for a batch of distinct, available books."""

    def _make(count: int, prefix: str = "BX") -> list[Book]:
        return [
            Book(
                resource_id=f"{prefix}{i:03d}",
                title=f"Volume {i}",
                author="Test Author",
                isbn=f"978000000{i:04d}",
            )
            for i in range(1, count + 1)
        ]

    return _make
