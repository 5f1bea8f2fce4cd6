"""
polyring
========

Symbolic univariate polynomial arithmetic over a generic coefficient ring,
and reduction to canonical representatives in quotient rings R[x]/(m).

Modules:
    - polynomial: Immutable Polynomial value type
    - quotient: QuotientRing and long-division reduction
    - coefficients: Coefficient capabilities and division policy
    - field: Prime field coefficients (Z_p)

Quick Start:
    >>> from polyring import Polynomial, QuotientRing
    >>> ring = QuotientRing(Polynomial([-2, 0, 1]))  # x^2 = 2
    >>> print(ring.get_representative(Polynomial([-5, -1, 1, 3])))
    -3 + 5x
"""

__version__ = "0.1.0"

from .coefficients import Division, InexactDivisionError
from .field import FieldElement, PrimeField
from .polynomial import Polynomial, VARIABLE
from .quotient import QuotientRing, ZeroModulusError

__all__ = [
    "Division",
    "FieldElement",
    "InexactDivisionError",
    "Polynomial",
    "PrimeField",
    "QuotientRing",
    "VARIABLE",
    "ZeroModulusError",
]
