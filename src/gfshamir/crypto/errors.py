"""
Error taxonomy for splitting and combining secrets.

Every failure raised by the core is a ShamirError tagged with an ErrorKind,
so callers can branch on the kind instead of matching message strings.
"""

from enum import Enum, auto
from typing import Optional


class ErrorKind(Enum):
    """Distinct, non-retryable failure kinds."""

    # split() input validation
    PARTS_LESS_THAN_THRESHOLD = auto()
    PARTS_EXCEED_LIMIT = auto()
    THRESHOLD_TOO_SMALL = auto()
    THRESHOLD_EXCEEDS_LIMIT = auto()
    EMPTY_SECRET = auto()

    # combine() input validation
    INSUFFICIENT_SHARES = auto()
    SHARES_TOO_SHORT = auto()
    INCONSISTENT_SHARE_LENGTH = auto()

    # Arithmetic and entropy
    DIVISION_BY_ZERO = auto()
    RANDOM_SOURCE_FAILURE = auto()


_MESSAGES = {
    ErrorKind.PARTS_LESS_THAN_THRESHOLD: "number of parts cannot be less than the threshold",
    ErrorKind.PARTS_EXCEED_LIMIT: "number of parts cannot exceed 255",
    ErrorKind.THRESHOLD_TOO_SMALL: "threshold must be at least 2",
    ErrorKind.THRESHOLD_EXCEEDS_LIMIT: "threshold cannot exceed 255",
    ErrorKind.EMPTY_SECRET: "cannot split an empty secret",
    ErrorKind.INSUFFICIENT_SHARES: "less than two shares cannot be used to reconstruct the secret",
    ErrorKind.SHARES_TOO_SHORT: "shares must be at least two bytes long",
    ErrorKind.INCONSISTENT_SHARE_LENGTH: "all shares must be the same length",
    ErrorKind.DIVISION_BY_ZERO: "division by zero",
    ErrorKind.RANDOM_SOURCE_FAILURE: "failed to generate random coefficients",
}


class ShamirError(Exception):
    """
    Raised when a split or combine cannot proceed.

    Attributes:
        kind: The ErrorKind identifying the failure
    """

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or _MESSAGES[kind])
