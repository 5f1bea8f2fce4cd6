"""
Univariate Polynomials over a Generic Coefficient Ring.

A polynomial c0 + c1*x + c2*x^2 + ... is stored as the tuple of its
coefficients, lowest power first. The tuple is always normalized: it never
ends in a zero coefficient, and the empty tuple is the zero polynomial.
Because of that, equality and degree can be read straight off the tuple.

Coefficients can be anything that adds, multiplies and has a zero:
int, float, complex, Fraction, numpy scalars or FieldElement.

Example:
    >>> p = Polynomial([9, 3, 1])   # x^2 + 3x + 9
    >>> q = Polynomial([5, 1])      # x + 5
    >>> print(p * q)
    45 + 24x + 8x^2 + 1x^3
    >>> Polynomial([-7, 4, -100, 0, 0]) == Polynomial([-7, 4, -100])
    True
    >>> Polynomial.zero().degree
    -1
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .coefficients import is_zero, zero_like


VARIABLE = "x"


def _normalize(coefficients: Iterable[Any]) -> Tuple[Any, ...]:
    """Strip trailing zero coefficients."""
    trimmed = list(coefficients)
    while trimmed and is_zero(trimmed[-1]):
        trimmed.pop()
    return tuple(trimmed)


@dataclass(frozen=True)
class Polynomial:
    """
    An immutable univariate polynomial.

    Every arithmetic operation returns a new, normalized Polynomial; no
    operation changes an existing one.

    Attributes:
        coefficients: Tuple of coefficients, index i holding the
                      coefficient of x^i (no trailing zeros)
    """
    coefficients: Tuple[Any, ...] = ()

    # Makes numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __post_init__(self):
        """Store the coefficients in normalized form."""
        object.__setattr__(self, "coefficients", _normalize(self.coefficients))

    # Construction

    @classmethod
    def term(cls, coefficient: Any, power: int) -> Polynomial:
        """
        Build the single-term polynomial coefficient * x^power.

        A zero coefficient yields the zero polynomial at any power.
        """
        if power < 0:
            raise ValueError(f"power must be non-negative, got {power}")
        return cls([zero_like(coefficient)] * power + [coefficient])

    @classmethod
    def zero(cls) -> Polynomial:
        """Return the zero polynomial (no coefficients)."""
        return cls()

    @classmethod
    def one(cls, like: Any = None) -> Polynomial:
        """
        Return the constant polynomial 1.

        Passing a coefficient as ``like`` builds the unit in that
        coefficient's ring (1.0 for floats, FieldElement(1) for Z_p).
        """
        if like is None:
            return cls([1])
        return cls([zero_like(like) + 1])

    # Introspection

    @property
    def degree(self) -> int:
        """Degree of the polynomial, -1 for the zero polynomial."""
        return len(self.coefficients) - 1

    @property
    def leading_coefficient(self) -> Optional[Any]:
        """Coefficient of the highest power, None for the zero polynomial."""
        if not self.coefficients:
            return None
        return self.coefficients[-1]

    def is_zero(self) -> bool:
        return not self.coefficients

    def __len__(self) -> int:
        return len(self.coefficients)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.coefficients)

    def __getitem__(self, power: int) -> Any:
        """Coefficient of x^power; the ring's zero above the degree."""
        if power < 0:
            raise IndexError(f"power must be non-negative, got {power}")
        if power >= len(self.coefficients):
            if not self.coefficients:
                return 0
            return zero_like(self.coefficients[-1])
        return self.coefficients[power]

    # Arithmetic

    def __add__(self, other: Any) -> Polynomial:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented

        if len(self.coefficients) >= len(other.coefficients):
            longer, shorter = self.coefficients, other.coefficients
        else:
            longer, shorter = other.coefficients, self.coefficients

        summed = [a + b for a, b in zip(longer, shorter)]
        summed.extend(longer[len(shorter):])
        return Polynomial(summed)

    def __radd__(self, other: Any) -> Polynomial:
        return self.__add__(other)

    def __neg__(self) -> Polynomial:
        return Polynomial([-c for c in self.coefficients])

    def __sub__(self, other: Any) -> Polynomial:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: Any) -> Polynomial:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other: Any) -> Polynomial:
        """
        Multiply by another polynomial (convolution) or scale by a scalar.

        The coefficient of x^k in the product is the sum of a_i * b_j over
        all i + j = k. An empty operand simply contributes no products.
        """
        if not isinstance(other, Polynomial):
            if isinstance(other, (list, tuple, np.ndarray)):
                return NotImplemented
            return Polynomial([c * other for c in self.coefficients])

        product: List[Any] = []
        for i, a in enumerate(self.coefficients):
            for j, b in enumerate(other.coefficients):
                power = i + j
                if power >= len(product):
                    product.append(a * b)
                else:
                    product[power] = product[power] + a * b
        return Polynomial(product)

    def __rmul__(self, other: Any) -> Polynomial:
        if isinstance(other, (list, tuple, np.ndarray)):
            return NotImplemented
        return Polynomial([other * c for c in self.coefficients])

    def __pow__(self, exponent: int) -> Polynomial:
        """Raise to a non-negative integer power by square-and-multiply."""
        if exponent < 0:
            raise ValueError("polynomials cannot be raised to negative powers")

        result = Polynomial.one(self.leading_coefficient)
        base = self
        while exponent > 0:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    # Evaluation

    def evaluate(self, x: Any) -> Any:
        """
        Evaluate at ``x`` using Horner's rule.

        ``x`` may be a scalar or a numpy array of points, in which case the
        result is an array of values.
        """
        result: Any = 0
        for c in reversed(self.coefficients):
            result = result * x + c
        return result

    def as_array(self, dtype: Any = None) -> np.ndarray:
        """Coefficients as a numpy array (lowest power first)."""
        return np.asarray(self.coefficients, dtype=dtype)

    # Rendering

    def format(self, variable: str = VARIABLE) -> str:
        """
        Render as terms from lowest to highest power joined by " + ".

        Example:
            >>> Polynomial([3.521, 9.0, -12.6, 4.5]).format()
            '3.521 + 9.0x + -12.6x^2 + 4.5x^3'
        """
        if not self.coefficients:
            return "0"
        return " + ".join(
            f"{c}{_format_power(variable, power)}"
            for power, c in enumerate(self.coefficients)
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Polynomial({list(self.coefficients)!r})"


def _format_power(variable: str, power: int) -> str:
    if power == 0:
        return ""
    if power == 1:
        return variable
    return f"{variable}^{power}"


def _coerce(value: Any) -> Any:
    """Promote scalars to constant polynomials for mixed arithmetic."""
    if isinstance(value, Polynomial):
        return value
    if isinstance(value, (list, tuple, np.ndarray)):
        return NotImplemented
    return Polynomial([value])
