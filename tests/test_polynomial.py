"""Tests for the Polynomial value type."""

import dataclasses
from fractions import Fraction

import numpy as np
import pytest
from numpy.polynomial import polynomial as P

from polyring import Polynomial


class TestConstruction:
    """Tests for building and normalizing polynomials."""

    def test_trailing_zeros_are_stripped(self):
        assert Polynomial([-7, 4, -100, 0, 0]) == Polynomial([-7, 4, -100])
        assert Polynomial([-7, 4, -100, 0, 0]).coefficients == (-7, 4, -100)

    def test_all_zero_is_zero_polynomial(self):
        assert Polynomial([0, 0, 0]) == Polynomial.zero()
        assert Polynomial([0.0, -0.0]).is_zero()

    def test_empty_is_zero_polynomial(self):
        assert Polynomial([]) == Polynomial.zero()
        assert Polynomial() == Polynomial.zero()

    def test_interior_zeros_are_kept(self):
        assert Polynomial([1, 0, 2]).coefficients == (1, 0, 2)

    def test_from_numpy_array(self):
        assert Polynomial(np.array([1, 2, 0])) == Polynomial([1, 2])

    def test_term(self):
        c = complex(3.1, -2.7)
        assert Polynomial.term(c, 4) == Polynomial([0j, 0j, 0j, 0j, c])
        assert Polynomial.term(5, 2) == Polynomial([0, 0, 5])

    def test_term_power_zero(self):
        assert Polynomial.term(5, 0) == Polynomial([5])

    def test_term_zero_coefficient(self):
        assert Polynomial.term(0, 6) == Polynomial.zero()

    def test_term_negative_power_raises(self):
        with pytest.raises(ValueError):
            Polynomial.term(1, -1)

    def test_immutable(self):
        p = Polynomial([1, 2])
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.coefficients = (3,)

    def test_hashable(self):
        assert len({Polynomial([1, 0]), Polynomial([1]), Polynomial([2])}) == 2


class TestIntrospection:
    """Tests for degree, leading coefficient and indexing."""

    def test_degree(self):
        assert Polynomial.zero().degree == -1
        assert Polynomial([7]).degree == 0
        assert Polynomial([5, 4, 3, 2, 1]).degree == 4

    def test_zero_degree_below_every_other(self):
        assert Polynomial.zero().degree < Polynomial([1]).degree

    def test_leading_coefficient(self):
        assert Polynomial([5, 4, 3]).leading_coefficient == 3
        assert Polynomial.zero().leading_coefficient is None

    def test_getitem(self):
        p = Polynomial([5, 4, 3])
        assert p[0] == 5
        assert p[2] == 3
        assert p[10] == 0

    def test_len_and_iter(self):
        p = Polynomial([5, 4, 3, 0])
        assert len(p) == 3
        assert list(p) == [5, 4, 3]


class TestAddition:
    """Tests for polynomial addition."""

    def test_example(self):
        p = Polynomial([3, 2, 1, 0])
        q = Polynomial([9, 5, 4, 2, 2])
        assert p + q == Polynomial([12, 7, 5, 2, 2])

    def test_commutative(self):
        p = Polynomial([3, 2, 1, 0])
        q = Polynomial([9, 5, 4, 2, 2])
        assert p + q == q + p

    def test_associative(self):
        p = Polynomial([1, -2, 3])
        q = Polynomial([0, 4])
        r = Polynomial([-1, 0, 0, 8])
        assert (p + q) + r == p + (q + r)

    def test_zero_is_identity(self):
        p = Polynomial([3, 2, 1])
        assert p + Polynomial.zero() == p
        assert Polynomial.zero() + p == p

    def test_cancellation_normalizes(self):
        p = Polynomial([1, 2, 3])
        q = Polynomial([0, 0, -3])
        result = p + q
        assert result == Polynomial([1, 2])
        assert result.degree == 1

    def test_scalar_operands(self):
        assert Polynomial([1, 2]) + 3 == Polynomial([4, 2])
        assert 3 + Polynomial([1, 2]) == Polynomial([4, 2])

    def test_subtraction(self):
        p = Polynomial([1, 2, 3])
        assert p - p == Polynomial.zero()
        assert p - Polynomial([1]) == Polynomial([0, 2, 3])
        assert 3 - Polynomial([1, 2]) == Polynomial([2, -2])

    def test_negation(self):
        assert -Polynomial([1, -2]) == Polynomial([-1, 2])


class TestMultiplication:
    """Tests for polynomial multiplication."""

    def test_example(self):
        p = Polynomial([9, 3, 1])  # x^2 + 3x + 9
        q = Polynomial([5, 1])     # x + 5
        assert p * q == Polynomial([45, 24, 8, 1])

    def test_commutative(self):
        p = Polynomial([9, 3, 1])
        q = Polynomial([5, 1])
        assert p * q == q * p

    def test_zero(self):
        p = Polynomial([9, 3, 1])
        assert p * Polynomial.zero() == Polynomial.zero()
        assert Polynomial.zero() * p == Polynomial.zero()
        assert Polynomial.zero() * Polynomial.zero() == Polynomial.zero()

    def test_distributes_over_addition(self):
        p = Polynomial([1, -1, 2])
        q = Polynomial([3, 0, 0, 1])
        r = Polynomial([-2, 5])
        assert p * (q + r) == p * q + p * r

    def test_scalar(self):
        assert 2 * Polynomial([1, 2]) == Polynomial([2, 4])
        assert Polynomial([1, 2]) * 2 == Polynomial([2, 4])
        assert Polynomial([1, 2]) * 0 == Polynomial.zero()

    def test_matches_numpy(self):
        a = [1.5, -2.0, 0.25]
        b = [3.0, 0.5, -1.0, 2.0]
        product = Polynomial(a) * Polynomial(b)
        np.testing.assert_allclose(product.as_array(dtype=float), P.polymul(a, b))

    def test_fractions(self):
        p = Polynomial([Fraction(1, 2), Fraction(1, 3)])
        assert p * p == Polynomial([Fraction(1, 4), Fraction(1, 3), Fraction(1, 9)])

    def test_power(self):
        assert Polynomial([1, 1]) ** 3 == Polynomial([1, 3, 3, 1])
        assert Polynomial([4, 1]) ** 0 == Polynomial.one()

    def test_negative_power_raises(self):
        with pytest.raises(ValueError):
            Polynomial([1, 1]) ** -1


class TestEvaluate:
    """Tests for Horner evaluation."""

    def test_scalar(self):
        assert Polynomial([1, 2, 3]).evaluate(2) == 17

    def test_zero_polynomial(self):
        assert Polynomial.zero().evaluate(5) == 0

    def test_numpy_points(self):
        values = Polynomial([1, 2, 3]).evaluate(np.array([0, 1, 2]))
        np.testing.assert_array_equal(values, [1, 6, 17])


class TestRendering:
    """Tests for the canonical string form."""

    def test_reals(self):
        p = Polynomial([3.521, 9.0, -12.6, 4.5])
        assert str(p) == "3.521 + 9.0x + -12.6x^2 + 4.5x^3"

    def test_integers(self):
        assert str(Polynomial([-7, 4, -100])) == "-7 + 4x + -100x^2"

    def test_complex(self):
        p = Polynomial([complex(2.0, 3.0), complex(-6.5, 2.1)])
        assert str(p) == "(2+3j) + (-6.5+2.1j)x"

    def test_zero(self):
        assert str(Polynomial.zero()) == "0"

    def test_interior_zero_rendered(self):
        assert str(Polynomial([1, 0, 2])) == "1 + 0x + 2x^2"

    def test_custom_variable(self):
        assert Polynomial([1, 2, 3]).format("t") == "1 + 2t + 3t^2"

    def test_repr(self):
        assert repr(Polynomial([1, 2, 0])) == "Polynomial([1, 2])"
