"""
Coefficient Capabilities.

A polynomial only asks three things of its coefficients: addition,
multiplication and a recognisable zero. Reduction in a quotient ring also
needs division by the modulus's leading coefficient, which plain integers
do not provide in general.

Division policies:
    - AUTO: exact division for integer pairs, true division otherwise
    - EXACT: always exact; an uneven division raises InexactDivisionError
    - TRUE: always use ``/`` (field semantics)

Example:
    >>> divide(6, 3)
    2
    >>> divide(1.0, 4.0)
    0.25
    >>> divide(7, 2)
    Traceback (most recent call last):
        ...
    polyring.coefficients.InexactDivisionError: 2 does not divide 7 exactly
"""

from __future__ import annotations
from enum import Enum
from numbers import Integral
from typing import Any


class InexactDivisionError(ArithmeticError):
    """Raised when a coefficient division in an integer ring leaves a remainder."""


class Division(Enum):
    """How leading coefficients are divided during long division."""
    AUTO = "auto"
    EXACT = "exact"
    TRUE = "true"


def is_zero(coefficient: Any) -> bool:
    """
    Check whether a coefficient is the zero of its ring.

    Coefficient types that know their own zero (like FieldElement) expose
    ``is_zero()``; everything else is compared against the integer 0.
    """
    check = getattr(coefficient, "is_zero", None)
    if callable(check):
        return bool(check())
    return bool(coefficient == 0)


def zero_like(coefficient: Any) -> Any:
    """Return the additive identity of the ring ``coefficient`` lives in."""
    return coefficient * 0


def divide(numerator: Any, denominator: Any, mode: Division = Division.AUTO) -> Any:
    """
    Divide two coefficients according to ``mode``.

    Raises:
        ZeroDivisionError: If the denominator is zero
        InexactDivisionError: If exact division is required and does not
            come out even
    """
    if is_zero(denominator):
        raise ZeroDivisionError("division by a zero coefficient")

    exact = mode is Division.EXACT or (
        mode is Division.AUTO
        and isinstance(numerator, Integral)
        and isinstance(denominator, Integral)
    )
    if not exact:
        return numerator / denominator

    if not is_zero(numerator % denominator):
        raise InexactDivisionError(
            f"{denominator} does not divide {numerator} exactly")
    return numerator // denominator
