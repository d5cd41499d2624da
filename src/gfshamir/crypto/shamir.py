"""
Shamir Secret Sharing (SSS) over GF(2^8).

This module implements (t, n) threshold secret sharing of byte strings:
- A secret S is split into n shares
- Any t shares can reconstruct S
- Fewer than t shares reveal no information about S

Each byte of the secret is shared independently with its own random
polynomial, so a share is one field element per secret byte plus the
x-coordinate it was evaluated at.

Mathematical Basis:
    1. Secret byte S_i becomes the constant term (a_0) of a polynomial
    2. Polynomial: f_i(x) = a_0 + a_1*x + ... + a_{t-1}*x^{t-1} over GF(2^8)
    3. Share j holds f_i(x_j) for every i, followed by x_j
    4. Reconstruction uses Lagrange interpolation to recover f_i(0) = S_i

Share Format:
    len(secret) bytes of evaluations + 1 byte x-coordinate in [1, 255]

Note that combine() cannot tell whether it was given at least t genuine
shares of the same split. Fewer than t shares still produce a byte string,
it is just not the secret. Supplying enough shares is the caller's job.

Reference:
    Shamir, A. (1979). "How to share a secret". Communications of the ACM.
"""

import logging
from typing import Optional, Sequence

from . import gf256
from .entropy import RandomSource
from .errors import ErrorKind, ShamirError
from .polynomial import Polynomial


logger = logging.getLogger(__name__)

# x-coordinates are single nonzero bytes, which caps both parameters.
MAX_PARTS = 255
MAX_THRESHOLD = 255
MIN_THRESHOLD = 2


def split(
    secret: Optional[bytes],
    parts: int,
    threshold: int,
    random_source: Optional[RandomSource] = None,
) -> list[bytes]:
    """
    Split a secret into parts shares with the given threshold.

    Args:
        secret: The secret to split (non-empty bytes)
        parts: Total number of shares to generate (n)
        threshold: Minimum shares needed for reconstruction (t)
        random_source: Callable returning n random bytes (default: OS CSPRNG)

    Returns:
        List of parts shares, each len(secret) + 1 bytes long

    Raises:
        ShamirError: If parameters are invalid or randomness is unavailable

    Example:
        >>> shares = split(b"test", parts=5, threshold=3)
        >>> len(shares), len(shares[0])
        (5, 5)
    """
    if parts < threshold:
        raise ShamirError(ErrorKind.PARTS_LESS_THAN_THRESHOLD)
    if parts > MAX_PARTS:
        raise ShamirError(ErrorKind.PARTS_EXCEED_LIMIT)
    if threshold < MIN_THRESHOLD:
        raise ShamirError(ErrorKind.THRESHOLD_TOO_SMALL)
    if threshold > MAX_THRESHOLD:
        raise ShamirError(ErrorKind.THRESHOLD_EXCEEDS_LIMIT)
    if not secret:
        raise ShamirError(ErrorKind.EMPTY_SECRET)

    # Evaluate at x = 1, 2, ..., parts
    # x = 0 is avoided because f(0) is the secret byte itself
    x_coords = range(1, parts + 1)

    shares = [bytearray(len(secret) + 1) for _ in x_coords]
    for share, x in zip(shares, x_coords):
        share[-1] = x

    for i, byte in enumerate(secret):
        polynomial = Polynomial.random(byte, threshold - 1, random_source)
        for share, x in zip(shares, x_coords):
            share[i] = polynomial.evaluate(x)

    logger.debug(
        "Split %d-byte secret into %d shares (threshold %d)",
        len(secret),
        parts,
        threshold,
    )

    return [bytes(share) for share in shares]


def combine(shares: Sequence[bytes]) -> bytes:
    """
    Reconstruct a secret from shares using Lagrange interpolation.

    Args:
        shares: At least threshold shares from the same split

    Returns:
        The reconstructed secret (len(share) - 1 bytes)

    Raises:
        ShamirError: If the shares are too few, too short, of unequal
            length, or contain duplicate x-coordinates
    """
    if shares is None or len(shares) < 2:
        raise ShamirError(ErrorKind.INSUFFICIENT_SHARES)

    share_len = len(shares[0])
    if share_len < 2:
        raise ShamirError(ErrorKind.SHARES_TOO_SHORT)

    for share in shares:
        if len(share) != share_len:
            raise ShamirError(ErrorKind.INCONSISTENT_SHARE_LENGTH)

    x_samples = [share[-1] for share in shares]

    secret = bytearray(share_len - 1)
    for i in range(len(secret)):
        y_samples = [share[i] for share in shares]
        secret[i] = interpolate(x_samples, y_samples, 0)

    logger.debug("Combined %d shares into %d-byte secret", len(shares), len(secret))

    return bytes(secret)


def interpolate(x_samples: Sequence[int], y_samples: Sequence[int], x: int) -> int:
    """
    Evaluate at x the polynomial passing through the sample points.

    The formula is:
        f(x) = sum_{i} y_i * L_i(x)

    Where L_i(x) is the Lagrange basis polynomial:
        L_i(x) = product_{j != i} (x - x_j) / (x_i - x_j)

    In GF(2^8) subtraction is addition, so every difference is an XOR.

    Args:
        x_samples: x-coordinates of the samples (pairwise distinct)
        y_samples: y-coordinates of the samples
        x: Point at which to evaluate (0 recovers the intercept)

    Raises:
        ShamirError: DIVISION_BY_ZERO if two samples share an x-coordinate
    """
    result = 0

    for i, x_i in enumerate(x_samples):
        numerator = 1
        denominator = 1

        for j, x_j in enumerate(x_samples):
            if i == j:
                continue

            numerator = gf256.mult(numerator, gf256.add(x, x_j))
            denominator = gf256.mult(denominator, gf256.add(x_i, x_j))

        basis = gf256.div(numerator, denominator)
        result = gf256.add(result, gf256.mult(y_samples[i], basis))

    return result
