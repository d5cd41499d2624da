"""
Arithmetic in the finite field GF(2^8).

Elements are bytes (ints in [0, 255]) interpreted as polynomials over GF(2)
modulo Rijndael's reduction polynomial:

    x^8 + x^4 + x^3 + x + 1    (0x11B)

In characteristic 2 addition and subtraction are both XOR, so every element
is its own additive inverse. The nonzero elements form a cyclic group of
order 255 generated by 0x03, which gives every nonzero byte a unique
multiplicative inverse.

Arguments are not range-checked; callers pass bytes.
"""

from .errors import ErrorKind, ShamirError


# Low byte of the reduction polynomial, applied after a shift overflows.
REDUCTION = 0x1B

# Order of the multiplicative group GF(2^8) \ {0}.
GROUP_ORDER = 255

GENERATOR = 0x03


def add(a: int, b: int) -> int:
    """Addition (and subtraction) in GF(2^8)."""
    return a ^ b


def mult(a: int, b: int) -> int:
    """
    Multiply two field elements.

    Carryless multiplication by repeated doubling: whenever the low bit of b
    is set, a is accumulated into the product; a is then doubled (reduced by
    0x1B when its high bit was set) and b shifted right. Terminates after at
    most 8 iterations.
    """
    product = 0
    while b:
        if b & 1:
            product ^= a
        if a & 0x80:
            a = ((a << 1) ^ REDUCTION) & 0xFF
        else:
            a <<= 1
        b >>= 1
    return product


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Powers of the generator and their discrete logarithms."""
    exp = [0] * GROUP_ORDER
    log = [0] * 256

    x = 1
    for i in range(GROUP_ORDER):
        exp[i] = x
        log[x] = i
        x = mult(x, GENERATOR)

    return tuple(exp), tuple(log)


_EXP, _LOG = _build_tables()


def inverse(a: int) -> int:
    """
    Multiplicative inverse of a nonzero element.

    Uses a^-1 = g^(255 - log_g(a)), which is equivalent to searching
    1..255 for the b with mult(a, b) == 1.

    Raises:
        ShamirError: DIVISION_BY_ZERO if a is zero (zero has no inverse)
    """
    if a == 0:
        raise ShamirError(ErrorKind.DIVISION_BY_ZERO)
    return _EXP[(GROUP_ORDER - _LOG[a]) % GROUP_ORDER]


def div(a: int, b: int) -> int:
    """
    Divide a by b.

    Raises:
        ShamirError: DIVISION_BY_ZERO if b is zero
    """
    if b == 0:
        raise ShamirError(ErrorKind.DIVISION_BY_ZERO)
    return mult(a, inverse(b))
