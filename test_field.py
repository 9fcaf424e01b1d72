#!/usr/bin/env python3
"""
Test suite for prime field arithmetic.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest

from ecgroups import (
    PrimeField, GF, DomainError, InvalidParameterError, UnsupportedFieldError
)
from test_drng import TestDRNG


P256K1 = 0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f

# Squares of 1..11 modulo 23.
RESIDUES_23 = {1, 2, 3, 4, 6, 8, 9, 12, 13, 16, 18}


def test_reduce():
    """Reduction lands in [0, p-1] and is idempotent."""
    field = PrimeField(23)
    for x in (-1000, -24, -23, -1, 0, 1, 22, 23, 24, 10**30):
        r = field.reduce(x)
        assert 0 <= r < 23
        assert field.reduce(r) == r
        assert (r - x) % 23 == 0

    big = PrimeField(P256K1)
    assert big.reduce(-1) == P256K1 - 1
    assert big.reduce(P256K1) == 0


def test_basic_operations():
    field = GF(23)
    assert field.add(20, 5) == 2
    assert field.subtract(3, 5) == 21
    assert field.multiply(7, 10) == 1
    assert field.negate(0) == 0
    assert field.negate(5) == 18
    assert field.square(10) == 8
    assert field.power(2, 11) == 1
    assert field.power(3, -1) == 8
    assert field.power(5, 0) == 1


def test_inverse():
    """x * inverse(x) == 1 for every non-zero element."""
    field = PrimeField(23)
    for x in range(1, 23):
        assert field.multiply(x, field.inverse(x)) == 1
    assert field.inverse(-1) == 22

    big = PrimeField(P256K1)
    rng = TestDRNG(b"field_inverse_seed")
    for x in rng.scalars(20, P256K1):
        assert big.multiply(x, big.inverse(x)) == 1


def test_inverse_of_zero():
    field = PrimeField(23)
    for x in (0, 23, -46):
        with pytest.raises(DomainError):
            field.inverse(x)
    with pytest.raises(DomainError):
        field.power(0, -1)
    # DomainError is still an ordinary division by zero to callers.
    with pytest.raises(ZeroDivisionError):
        field.inverse(0)


def test_square_roots_small_field():
    field = PrimeField(23)
    for x in range(23):
        roots = field.square_roots(x)
        for y in roots:
            assert field.square(y) == x
        if x == 0:
            assert roots == {0}
        elif x in RESIDUES_23:
            assert len(roots) == 2
            assert sum(roots) == 23
        else:
            assert roots == frozenset()

    assert field.square_roots(8) == {10, 13}
    assert field.square_roots(8 + 23) == {10, 13}
    assert field.square_roots(5) == set()


def test_square_roots_large_field():
    field = PrimeField(P256K1)
    rng = TestDRNG(b"field_sqrt_seed")
    for y in rng.scalars(20, P256K1):
        x = field.square(y)
        roots = field.square_roots(x)
        assert roots == {y, P256K1 - y}
        assert field.is_square(x)


def test_square_roots_unsupported_prime():
    for p in (13, 17, 0xffffffffffffffffffffffffffffffff000000000000000000000001):
        field = PrimeField(p)
        with pytest.raises(UnsupportedFieldError):
            field.square_roots(4)
        with pytest.raises(NotImplementedError):
            field.square_roots(0)


def test_is_square():
    field = PrimeField(23)
    assert field.is_square(0)
    for x in range(1, 23):
        assert field.is_square(x) == (x in RESIDUES_23)


def test_includes():
    field = PrimeField(23)
    assert field.includes(0)
    assert field.includes(22)
    assert not field.includes(23)
    assert not field.includes(-1)
    assert not field.includes(1.0)
    assert not field.includes(True)


def test_invalid_prime():
    for p in (None, "23", 23.0, True, 1, 0, -7, 2, 4, 24):
        with pytest.raises(InvalidParameterError):
            PrimeField(p)


def test_equality_and_repr():
    assert GF(23) == PrimeField(23)
    assert GF(23) != PrimeField(29)
    assert hash(GF(23)) == hash(PrimeField(23))
    assert repr(GF(23)) == "GF(23)"
    assert PrimeField(23).prime == 23


def main():
    """Run all field tests."""
    print("Running field tests...")

    test_reduce()
    test_basic_operations()
    test_inverse()
    test_inverse_of_zero()
    test_square_roots_small_field()
    test_square_roots_large_field()
    test_square_roots_unsupported_prime()
    test_is_square()
    test_includes()
    test_invalid_prime()
    test_equality_and_repr()

    print("✓ All field tests passed!")


if __name__ == "__main__":
    main()
