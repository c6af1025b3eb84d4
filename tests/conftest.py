# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides a fake Teamtailor API built on httpx.MockTransport
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("TEAMTAILOR_API_KEY", "test-api-key")
os.environ.setdefault("TEAMTAILOR_BASE_URL", "https://api.teamtailor.test/v1")
os.environ.setdefault("TEAMTAILOR_API_VERSION", "20240404")
os.environ.setdefault("TEAMTAILOR_PAGE_SIZE", "2")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest

from tests.fake_teamtailor import FakeTeamtailor, candidate, job_application, page


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_teamtailor():
    """An empty fake Teamtailor API; tests register pages on it."""
    return FakeTeamtailor()


@pytest.fixture
def teamtailor_client(fake_teamtailor):
    """A TeamtailorClient wired to the fake API."""
    return fake_teamtailor.client()


@pytest.fixture
def two_application_page():
    """One candidate with two job applications (single page)."""
    return page(
        data=[candidate("1", "Ada", "Lovelace", "ada@example.com", applications=["10", "11"])],
        included=[
            job_application("10", "2024-01-15T10:00:00.000+01:00"),
            job_application("11", "2024-02-01T09:30:00.000+01:00"),
        ],
    )


@pytest.fixture
def no_application_candidate():
    """A candidate resource without job applications."""
    return candidate("2", "Alan", "Turing", "alan@example.com", applications=[])
