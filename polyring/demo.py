"""
Quotient Ring Demonstration.

Walks through polynomial arithmetic and quotient ring reduction over the
integers, the reals, the complex numbers and a prime field.

Run with:
    polyring-demo            # or: python -m polyring.demo
    polyring-demo -v         # also show each elimination step
"""

import argparse
import logging

from .coefficients import Division
from .field import PrimeField
from .polynomial import Polynomial
from .quotient import QuotientRing


def demo_arithmetic():
    """Addition, multiplication and normalization."""
    print("\n" + "=" * 70)
    print("POLYNOMIAL ARITHMETIC")
    print("=" * 70)

    p = Polynomial([9, 3, 1])
    q = Polynomial([5, 1])
    print(f"\np     = {p}")
    print(f"q     = {q}")
    print(f"p + q = {p + q}")
    print(f"p * q = {p * q}")

    padded = Polynomial([-7, 4, -100, 0, 0])
    print(f"\n[-7, 4, -100, 0, 0] normalizes to {padded} (degree {padded.degree})")
    print(f"zero polynomial: {Polynomial.zero()} (degree {Polynomial.zero().degree})")

    print(f"\nOver R: {Polynomial([3.521, 9.0, -12.6, 4.5])}")
    print(f"Over C: {Polynomial([2 + 3j, -6.5 + 2.1j])}")


def demo_integer_ring():
    """Reduction in Z[x]/(x^2 - 2)."""
    print("\n" + "=" * 70)
    print("QUOTIENT RING Z[x]/(x^2 - 2)")
    print("=" * 70)

    ring = QuotientRing(Polynomial([-2, 0, 1]))
    p = Polynomial([-5, -1, 1, 3])
    quotient, remainder = ring.divmod(p)
    print(f"\n{p}")
    print(f"  = ({quotient}) * ({ring.modulus}) + ({remainder})")
    print(f"representative: {ring.get_representative(p)}")

    sqrt2 = Polynomial([0, 1])
    print(f"\nx stands for sqrt(2): x^2 = {ring.power(sqrt2, 2)}, x^5 = {ring.power(sqrt2, 5)}")


def demo_complex_numbers():
    """R[x]/(x^2 + 1) behaves like the complex numbers."""
    print("\n" + "=" * 70)
    print("QUOTIENT RING R[x]/(x^2 + 1)")
    print("=" * 70)

    ring = QuotientRing(Polynomial([1.0, 0.0, 1.0]), division=Division.TRUE)
    a = Polynomial([1.0, 2.0])   # 1 + 2i
    b = Polynomial([3.0, -1.0])  # 3 - i
    print(f"\n({a}) * ({b}) = {ring.multiply(a, b)}")
    print(f"compare: (1+2j) * (3-1j) = {(1 + 2j) * (3 - 1j)}")


def demo_finite_field():
    """GF(2^3) built as Z_2[x]/(x^3 + x + 1)."""
    print("\n" + "=" * 70)
    print("FINITE FIELD GF(8) = Z_2[x]/(x^3 + x + 1)")
    print("=" * 70)

    field = PrimeField(2)
    ring = QuotientRing(Polynomial(field.elements([1, 1, 0, 1])))
    generator = Polynomial(field.elements([0, 1]))

    print("\nPowers of x:")
    for k in range(8):
        print(f"  x^{k} = {ring.power(generator, k)}")


def main(argv=None):
    """Run all demos."""
    parser = argparse.ArgumentParser(description="polyring demonstration")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log every elimination step")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(name)s: %(message)s")

    demos = [
        demo_arithmetic,
        demo_integer_ring,
        demo_complex_numbers,
        demo_finite_field,
    ]
    for demo_func in demos:
        demo_func()

    print("\n" + "═" * 70)
    print("DEMOS COMPLETE")
    print("═" * 70)


if __name__ == "__main__":
    main()
