"""
Prime Field Coefficients.

Integers modulo a prime p form a field, so every non-zero element has an
inverse. That makes them a natural coefficient type for quotient rings:
reducing modulo an irreducible polynomial of degree n over Z_p yields the
finite field GF(p^n).

Key Concepts:
    - Addition: (a + b) mod p
    - Multiplication: (a * b) mod p
    - Division: a * b^(-1) mod p
    - Inversion: extended Euclidean algorithm

Example:
    >>> field = PrimeField(7)
    >>> a = field.element(3)
    >>> b = field.element(5)
    >>> print(a * b)
    1
    >>> a / b == a * b.inverse()
    True
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class FieldElement:
    """
    An element of the prime field Z_p.

    Plain ints mix freely with field elements and are reduced modulo p.
    Elements of two different fields refuse to mix.

    Attributes:
        value: The representative in [0, p-1]
        field: The PrimeField this element belongs to
    """
    value: int
    field: PrimeField

    def __post_init__(self):
        """Reduce the value modulo p."""
        object.__setattr__(self, "value", self.value % self.field.prime)

    def __repr__(self) -> str:
        return f"FieldElement({self.value}, mod {self.field.prime})"

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.value == other.value and self.field.prime == other.field.prime
        if isinstance(other, int):
            return self.value == other % self.field.prime
        return NotImplemented

    def __hash__(self) -> int:
        # Must agree with the int this element compares equal to
        return hash(self.value)

    def _value_of(self, other: object) -> Optional[int]:
        """Integer value of a compatible operand, None for foreign types."""
        if isinstance(other, FieldElement):
            if other.field.prime != self.field.prime:
                raise TypeError(
                    f"cannot mix elements of Z_{self.field.prime} and Z_{other.field.prime}")
            return other.value
        if isinstance(other, int):
            return other
        return None

    # Arithmetic Operations

    def __add__(self, other: Union[FieldElement, int]) -> FieldElement:
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return self.field.element(self.value + value)

    def __radd__(self, other: int) -> FieldElement:
        return self.__add__(other)

    def __sub__(self, other: Union[FieldElement, int]) -> FieldElement:
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return self.field.element(self.value - value)

    def __rsub__(self, other: int) -> FieldElement:
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return self.field.element(value - self.value)

    def __mul__(self, other: Union[FieldElement, int]) -> FieldElement:
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return self.field.element(self.value * value)

    def __rmul__(self, other: int) -> FieldElement:
        return self.__mul__(other)

    def __truediv__(self, other: Union[FieldElement, int]) -> FieldElement:
        """Division: a * b^(-1) mod p"""
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return self * self.field.element(value).inverse()

    def __rtruediv__(self, other: int) -> FieldElement:
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return self.field.element(value) * self.inverse()

    def __mod__(self, other: Union[FieldElement, int]) -> FieldElement:
        """Every non-zero element divides evenly in a field."""
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        if self.field.element(value).is_zero():
            raise ZeroDivisionError("modulo by zero field element")
        return self.field.zero()

    def __floordiv__(self, other: Union[FieldElement, int]) -> FieldElement:
        return self.__truediv__(other)

    def __neg__(self) -> FieldElement:
        return self.field.element(-self.value)

    def __pow__(self, exp: int) -> FieldElement:
        """Exponentiation; negative exponents go through the inverse."""
        if exp < 0:
            return self.inverse() ** (-exp)
        return self.field.element(pow(self.value, exp, self.field.prime))

    def inverse(self) -> FieldElement:
        """
        Compute the multiplicative inverse using the extended Euclidean algorithm.

        Finds b such that a * b = 1 (mod p).

        Raises:
            ZeroDivisionError: If the element is zero
            ValueError: If no inverse exists (p was not prime)
        """
        if self.value == 0:
            raise ZeroDivisionError("cannot invert zero")

        old_r, r = self.value, self.field.prime
        old_s, s = 1, 0
        while r != 0:
            quotient = old_r // r
            old_r, r = r, old_r - quotient * r
            old_s, s = s, old_s - quotient * s

        if old_r != 1:
            raise ValueError(f"no inverse exists (gcd = {old_r})")
        return self.field.element(old_s)

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1


class PrimeField:
    """
    The prime field Z_p, a factory for its elements.

    Attributes:
        prime: The prime modulus p (primality is not checked)

    Example:
        >>> field = PrimeField(5)
        >>> field.elements([1, 7, -1])
        [FieldElement(1, mod 5), FieldElement(2, mod 5), FieldElement(4, mod 5)]
    """

    def __init__(self, prime: int):
        if prime < 2:
            raise ValueError("prime must be at least 2")
        self.prime = prime

    def __repr__(self) -> str:
        return f"PrimeField({self.prime})"

    def __str__(self) -> str:
        return f"Z_{self.prime}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PrimeField) and other.prime == self.prime

    def __hash__(self) -> int:
        return hash(self.prime)

    def element(self, value: int) -> FieldElement:
        """Create a field element from an integer."""
        return FieldElement(value, self)

    def elements(self, values) -> list:
        """Create a list of field elements, e.g. polynomial coefficients."""
        return [self.element(v) for v in values]

    def zero(self) -> FieldElement:
        return FieldElement(0, self)

    def one(self) -> FieldElement:
        return FieldElement(1, self)
