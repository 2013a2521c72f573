"""Core types, identifiers, and exceptions."""

from .exceptions import IsbnCheckError, IsbnParseError, ValidationError
from .identifiers import (
    ISBN13_MULTIPLIERS,
    Isbn,
    extract_digits,
    is_valid_isbn10,
    is_valid_isbn13,
)
from .types import ParseErrorKind

__all__ = [
    # Types
    "ParseErrorKind",
    # Identifiers
    "ISBN13_MULTIPLIERS",
    "Isbn",
    "extract_digits",
    "is_valid_isbn10",
    "is_valid_isbn13",
    # Exceptions
    "IsbnCheckError",
    "IsbnParseError",
    "ValidationError",
]
