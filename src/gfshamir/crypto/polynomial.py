"""
Random polynomials over GF(2^8), one per secret byte.

    f(x) = a_0 + a_1*x + ... + a_d*x^d

a_0 (the intercept) is a byte of the secret, a_1..a_d are fresh random
bytes. The degree d is threshold - 1, so threshold points determine f and
therefore f(0).
"""

from dataclasses import dataclass
from typing import Optional

from . import gf256
from .entropy import RandomSource, read_random


MAX_DEGREE = 254


@dataclass(frozen=True)
class Polynomial:
    """
    Coefficients of a polynomial, lowest degree first.

    Attributes:
        coefficients: (a_0, a_1, ..., a_d), each a field element
    """

    coefficients: tuple[int, ...]

    @classmethod
    def random(
        cls,
        intercept: int,
        degree: int,
        random_source: Optional[RandomSource] = None,
    ) -> "Polynomial":
        """
        Build a polynomial with the given intercept and random higher terms.

        Args:
            intercept: The constant term a_0 (one secret byte)
            degree: Degree of the polynomial (threshold - 1)
            random_source: Callable returning n random bytes

        Raises:
            ValueError: If intercept is not a byte or degree is out of range
            ShamirError: RANDOM_SOURCE_FAILURE if randomness is unavailable
        """
        if not 0 <= intercept <= 255:
            raise ValueError(f"Intercept must be in range [0, 255], got {intercept}")
        if not 0 <= degree <= MAX_DEGREE:
            raise ValueError(
                f"Degree must be in range [0, {MAX_DEGREE}], got {degree}"
            )

        higher = read_random(degree, random_source)
        return cls(coefficients=(intercept, *higher))

    @property
    def intercept(self) -> int:
        return self.coefficients[0]

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def evaluate(self, x: int) -> int:
        """
        Evaluate at x using Horner's method.

        f(x) = a_0 + x*(a_1 + x*(a_2 + ... + x*a_d))

        f(0) is returned directly as the intercept.
        """
        if x == 0:
            return self.intercept

        result = 0
        for coeff in reversed(self.coefficients):
            result = gf256.add(gf256.mult(result, x), coeff)

        return result
