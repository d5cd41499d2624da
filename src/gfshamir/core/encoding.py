"""
Text encodings that make shares printable.

Shares are raw bytes; on the command line they travel as base64 or hex
strings. Nothing here touches field arithmetic.
"""

import base64
import binascii
import re
from enum import Enum


class Encoding(str, Enum):
    """Supported share text encodings."""

    BASE64 = "base64"
    HEX = "hex"


class ShareDecodeError(ValueError):
    """Raised when a share string is not valid for the chosen encoding."""


# Shares may be separated by commas and/or whitespace (including newlines).
_SEPARATORS = re.compile(r"[,\s]+")


def encode_share(share: bytes, encoding: Encoding) -> str:
    """Encode a share as text."""
    if encoding is Encoding.BASE64:
        return base64.b64encode(share).decode("ascii")
    return share.hex()


def decode_share(text: str, encoding: Encoding) -> bytes:
    """
    Decode a share from text.

    Raises:
        ShareDecodeError: If text is not valid base64 / hex
    """
    text = text.strip()
    try:
        if encoding is Encoding.BASE64:
            return base64.b64decode(text, validate=True)
        return bytes.fromhex(text)
    except (binascii.Error, ValueError) as e:
        raise ShareDecodeError(f"Invalid {encoding.value} share {text!r}: {e}") from e


def parse_shares(text: str, encoding: Encoding) -> list[bytes]:
    """Split text on commas/whitespace and decode every non-empty item."""
    return [decode_share(item, encoding) for item in _SEPARATORS.split(text) if item]
