"""ISBN value object with checksum validation."""

from __future__ import annotations

import logging
import re
from typing import ClassVar, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import IsbnParseError
from .types import ParseErrorKind

logger = logging.getLogger(__name__)

ISBN13_MULTIPLIERS: tuple[int, ...] = (1, 3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3, 1)

# ASCII digits only; \d would also match other Unicode decimal digits
_DIGIT_PATTERN = re.compile(r"[0-9]")


def extract_digits(value: str) -> tuple[int, ...]:
    """Return the ASCII digits of ``value`` as integers, in order.

    Every other character, including hyphens, spaces and a trailing ``X``
    check character, is discarded.
    """
    return tuple(int(c) for c in _DIGIT_PATTERN.findall(value))


def is_valid_isbn10(digits: tuple[int, ...]) -> bool:
    """Validate an ISBN-10 digit sequence using modulo 11."""
    if len(digits) != 10:
        return False
    return sum(d * (10 - i) for i, d in enumerate(digits)) % 11 == 0


def is_valid_isbn13(digits: tuple[int, ...]) -> bool:
    """Validate an ISBN-13 digit sequence using alternating 1/3 weights."""
    if len(digits) != 13:
        return False
    return sum(d * m for d, m in zip(digits, ISBN13_MULTIPLIERS)) % 10 == 0


class Isbn(BaseModel):
    """A checksum-valid ISBN-10 or ISBN-13, remembering how it was written."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(..., description="Input string exactly as given")
    digits: tuple[int, ...] = Field(..., description="Digit values extracted from raw")

    VALID_LENGTHS: ClassVar[frozenset[int]] = frozenset({10, 13})

    @model_validator(mode="after")
    def validate_digits(self) -> Self:
        """Reject digit sequences that could not have come from parse()."""
        if any(not 0 <= d <= 9 for d in self.digits):
            raise ValueError(f"Digit values must be 0-9: {self.digits}")
        if self.digits != extract_digits(self.raw):
            raise ValueError(f"Digits do not match raw value: {self.raw!r}")
        if len(self.digits) not in self.VALID_LENGTHS:
            raise ValueError(f"Invalid ISBN length: {len(self.digits)}")
        if len(self.digits) == 10 and not is_valid_isbn10(self.digits):
            raise ValueError(f"Invalid ISBN-10 checksum: {self.raw!r}")
        if len(self.digits) == 13 and not is_valid_isbn13(self.digits):
            raise ValueError(f"Invalid ISBN-13 checksum: {self.raw!r}")
        return self

    @property
    def format(self) -> Literal["isbn10", "isbn13"]:
        return "isbn10" if len(self.digits) == 10 else "isbn13"

    @classmethod
    def parse(cls, value: str) -> Isbn:
        """
        Parse an ISBN string, auto-detecting ISBN-10 or ISBN-13 by digit count.

        Non-digit characters are ignored. The original string is kept verbatim
        in ``raw``.

        Raises:
            IsbnParseError: if the digit count is neither 10 nor 13, or the
                matching checksum fails.
        """
        digits = extract_digits(value)
        match len(digits):
            case 10:
                if not is_valid_isbn10(digits):
                    raise IsbnParseError(value, ParseErrorKind.FAILED_CHECK_10)
            case 13:
                if not is_valid_isbn13(digits):
                    raise IsbnParseError(value, ParseErrorKind.FAILED_CHECK_13)
            case _:
                raise IsbnParseError(value, ParseErrorKind.WRONG_LENGTH)
        return cls(raw=value, digits=digits)

    @classmethod
    def try_parse(cls, value: str) -> Isbn | IsbnParseError:
        """Like parse(), but return the error instead of raising it."""
        try:
            isbn = cls.parse(value)
        except IsbnParseError as e:
            logger.debug(f"Rejected {value!r}: {e.kind.value}")
            return e
        logger.debug(f"Accepted {value!r} as {isbn.format}")
        return isbn

    def __str__(self) -> str:
        return self.raw
