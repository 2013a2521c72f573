"""Shared test fixtures for all tests."""

from __future__ import annotations

import pytest

from isbncheck.config import IsbnCheckSettings, get_settings


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Isolate every test from ISBNCHECK_* variables, .env files and the settings cache."""
    for name in ("ISBNCHECK_LOG_LEVEL", "ISBNCHECK_STRICT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_settings() -> IsbnCheckSettings:
    """Create settings with non-default values."""
    return IsbnCheckSettings(log_level="debug", strict=True)


# ============================================================================
# Test Data Constants
# ============================================================================


# Valid identifiers for testing
VALID_ISBN_10 = "99921-58-10-7"
VALID_ISBN_10_PLAIN = "0306406152"
VALID_ISBN_13 = "978-0-306-40615-7"
VALID_ISBN_13_PLAIN = "9780134093413"

# Invalid identifiers for testing
INVALID_ISBN_10 = "99921-58-10-8"  # Bad checksum
INVALID_ISBN_13 = "978-0-306-40615-8"  # Bad checksum
ISBN_10_X = "155860832X"  # X check digit is not recognized
TOO_SHORT = "12345"


@pytest.fixture
def valid_isbns() -> dict[str, str]:
    """Return a dictionary of valid ISBNs."""
    return {
        "isbn_10": VALID_ISBN_10,
        "isbn_10_plain": VALID_ISBN_10_PLAIN,
        "isbn_13": VALID_ISBN_13,
        "isbn_13_plain": VALID_ISBN_13_PLAIN,
    }


@pytest.fixture
def invalid_isbns() -> dict[str, str]:
    """Return a dictionary of invalid ISBNs."""
    return {
        "isbn_10": INVALID_ISBN_10,
        "isbn_13": INVALID_ISBN_13,
        "isbn_10_x": ISBN_10_X,
        "too_short": TOO_SHORT,
    }
