"""
Random sources for polynomial coefficients.

A random source is any callable taking a byte count and returning that many
bytes. The default reads from the operating system CSPRNG via the secrets
module. Tests pass deterministic sources instead.
"""

import secrets
from typing import Callable, Optional

from .errors import ErrorKind, ShamirError


RandomSource = Callable[[int], bytes]


def system_random(n: int) -> bytes:
    """Cryptographically secure random bytes from the OS."""
    return secrets.token_bytes(n)


def read_random(n: int, source: Optional[RandomSource] = None) -> bytes:
    """
    Read exactly n random bytes from source.

    Failures of the source are reported as RANDOM_SOURCE_FAILURE with the
    original exception chained. A short or oversized read is a failure too;
    no weaker fallback is ever used.

    Raises:
        ShamirError: RANDOM_SOURCE_FAILURE
    """
    if source is None:
        source = system_random

    try:
        data = source(n)
    except Exception as e:
        raise ShamirError(
            ErrorKind.RANDOM_SOURCE_FAILURE,
            f"failed to generate random coefficients: {e}",
        ) from e

    if data is None or len(data) != n:
        got = 0 if data is None else len(data)
        raise ShamirError(
            ErrorKind.RANDOM_SOURCE_FAILURE,
            f"random source returned {got} bytes, expected {n}",
        )

    return bytes(data)
