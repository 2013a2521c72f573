"""Custom exception hierarchy for isbncheck."""

from typing import Any

from .types import ParseErrorKind


class IsbnCheckError(Exception):
    """Base exception for all isbncheck errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(IsbnCheckError):
    """Input validation failed."""

    pass


class IsbnParseError(ValidationError, ValueError):
    """Input string is not a valid ISBN-10 or ISBN-13."""

    def __init__(self, raw: str, kind: ParseErrorKind) -> None:
        super().__init__(
            f"{kind.description}: {raw!r}",
            details={"raw": raw, "kind": kind.value},
        )
        self.raw = raw
        self.kind = kind

    def __repr__(self) -> str:
        return f"IsbnParseError(kind={self.kind.value}, raw={self.raw!r})"
