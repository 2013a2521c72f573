"""Core enums and type definitions."""

from enum import StrEnum


class ParseErrorKind(StrEnum):
    """Reasons an input string fails to parse as an ISBN."""

    WRONG_LENGTH = "wrong_length"  # Neither 10 nor 13 digits
    FAILED_CHECK_10 = "failed_check_10"
    FAILED_CHECK_13 = "failed_check_13"

    @property
    def description(self) -> str:
        """Human-readable summary used in error messages."""
        match self:
            case ParseErrorKind.WRONG_LENGTH:
                return "wrong length (expected 10 or 13 digits)"
            case ParseErrorKind.FAILED_CHECK_10:
                return "failed ISBN-10 checksum"
            case ParseErrorKind.FAILED_CHECK_13:
                return "failed ISBN-13 checksum"
