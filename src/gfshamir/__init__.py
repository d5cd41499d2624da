"""Shamir's Secret Sharing over GF(2^8)."""

from .crypto.errors import ErrorKind, ShamirError
from .crypto.shamir import combine, split

__all__ = ["split", "combine", "ShamirError", "ErrorKind"]

__version__ = "0.1.0"
