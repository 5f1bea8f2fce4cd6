"""
Quotient Rings of Polynomial Rings.

Given a modulus polynomial m(x), the quotient ring R[x]/(m) identifies any
two polynomials that differ by a multiple of m. Every class has exactly one
representative of degree below deg(m): the remainder of long division by m.

Reduction works by repeatedly cancelling the leading term:

    while deg(p) >= deg(m):
        t = (lc(p) / lc(m)) * x^(deg(p) - deg(m))
        p = p - t * m

Each step strictly lowers deg(p), so the loop always ends.

Example - x^2 = 2:
    >>> ring = QuotientRing(Polynomial([-2, 0, 1]))
    >>> print(ring.get_representative(Polynomial([-5, -1, 1, 3])))
    -3 + 5x

Over the integers the leading coefficient of the modulus must divide the
coefficients it meets; otherwise InexactDivisionError is raised. Pass
``division=Division.TRUE`` to divide with ``/`` instead.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Tuple

from .coefficients import Division, divide
from .polynomial import Polynomial


logger = logging.getLogger(__name__)


class ZeroModulusError(ValueError):
    """Raised when a quotient ring is built from the zero polynomial."""


@dataclass(frozen=True)
class QuotientRing:
    """
    The quotient ring R[x]/(modulus).

    Attributes:
        modulus: The ideal generator, a non-zero Polynomial
        division: How leading coefficients are divided during reduction

    Example:
        >>> ring = QuotientRing(Polynomial([0, 1]))  # x = 0
        >>> ring.get_representative(Polynomial([9, 3, -1, 14]))
        Polynomial([9])
    """
    modulus: Polynomial
    division: Division = Division.AUTO

    def __post_init__(self):
        """Validate the modulus."""
        if not isinstance(self.modulus, Polynomial):
            raise TypeError(
                f"modulus must be a Polynomial, got {type(self.modulus).__name__}")
        if self.modulus.is_zero():
            raise ZeroModulusError("the zero polynomial cannot be a modulus")
        if not isinstance(self.division, Division):
            raise TypeError(f"division must be a Division, got {self.division!r}")
        logger.debug("quotient ring by %s (division=%s)",
                     self.modulus, self.division.value)

    @property
    def degree(self) -> int:
        """Degree of the modulus; every representative has lower degree."""
        return self.modulus.degree

    def divmod(self, element: Polynomial) -> Tuple[Polynomial, Polynomial]:
        """
        Long division of ``element`` by the modulus.

        Returns:
            (quotient, remainder) with element == quotient * modulus + remainder
            and remainder.degree < modulus.degree
        """
        modulus = self.modulus
        lead = modulus.leading_coefficient
        remainder = element
        quotient = Polynomial.zero()

        while remainder.degree >= modulus.degree:
            shift = remainder.degree - modulus.degree
            factor = divide(remainder.leading_coefficient, lead, self.division)
            step = Polynomial.term(factor, shift)
            reduced = remainder - step * modulus

            if reduced.degree >= remainder.degree:
                # Inexact coefficients (floats) may leave a residue behind
                reduced = Polynomial(reduced.coefficients[:remainder.degree])

            logger.debug("eliminate %s: %s -> %s", step, remainder, reduced)
            quotient = quotient + step
            remainder = reduced

        return quotient, remainder

    def get_representative(self, element: Polynomial) -> Polynomial:
        """Reduce ``element`` to the canonical representative of its class."""
        if element.degree < self.modulus.degree:
            return element
        return self.divmod(element)[1]

    reduce = get_representative

    def __contains__(self, element: Polynomial) -> bool:
        """True when ``element`` is already a canonical representative."""
        return isinstance(element, Polynomial) and element.degree < self.degree

    def are_equivalent(self, a: Polynomial, b: Polynomial) -> bool:
        """Check whether ``a`` and ``b`` lie in the same class."""
        return self.get_representative(a - b).is_zero()

    # Ring operations on representatives

    def add(self, a: Polynomial, b: Polynomial) -> Polynomial:
        return self.get_representative(a + b)

    def negate(self, a: Polynomial) -> Polynomial:
        return self.get_representative(-a)

    def multiply(self, a: Polynomial, b: Polynomial) -> Polynomial:
        return self.get_representative(a * b)

    def power(self, a: Polynomial, exponent: int) -> Polynomial:
        """
        Compute a^exponent in the quotient ring.

        Uses square-and-multiply, reducing after every product so the
        intermediate degrees stay below twice the modulus degree.
        """
        if exponent < 0:
            raise ValueError("exponent must be non-negative")

        result = self.get_representative(
            Polynomial.one(self.modulus.leading_coefficient))
        base = self.get_representative(a)
        while exponent > 0:
            if exponent & 1:
                result = self.multiply(result, base)
            base = self.multiply(base, base)
            exponent >>= 1
        return result

    def __repr__(self) -> str:
        return f"QuotientRing({self.modulus!r})"

    def __str__(self) -> str:
        return f"R[x]/({self.modulus})"
