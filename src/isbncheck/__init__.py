"""isbncheck - ISBN-10 and ISBN-13 checksum validation."""

from isbncheck.core.exceptions import IsbnCheckError, IsbnParseError
from isbncheck.core.identifiers import Isbn
from isbncheck.core.types import ParseErrorKind

__version__ = "0.1.0"
__all__ = [
    # Identifiers
    "Isbn",
    # Types
    "ParseErrorKind",
    # Exceptions
    "IsbnCheckError",
    "IsbnParseError",
    # Version
    "__version__",
]
