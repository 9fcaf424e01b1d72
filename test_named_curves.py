#!/usr/bin/env python3
"""
Test suite for the standard curve tables.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest

from ecgroups import get_group, available_curves, UnknownCurveError
from ecgroups import named_curves
from ecgroups.named_curves import CURVE_PARAMETERS


def test_generators_have_the_stated_order():
    """n * G is infinity for every standard curve."""
    for name in CURVE_PARAMETERS:
        group = get_group(name)
        g = group.generator
        assert group.includes(g), name
        assert g.multiply_by_scalar(group.order) == group.infinity, name
        assert g.multiply_by_scalar(group.order - 1) == g.negate(), name
        assert group.is_valid_public_key(g), name


def test_parameters_match_table():
    for name, params in CURVE_PARAMETERS.items():
        group = get_group(name)
        assert group.name == name
        assert group.prime == params.p
        assert group.param_a == params.a
        assert group.param_b == params.b
        assert group.generator.coords == params.g
        assert group.order == params.n
        assert group.cofactor == params.h
        assert group.bit_length == params.p.bit_length()


def test_solve_for_y_recovers_generator():
    for name in CURVE_PARAMETERS:
        group = get_group(name)
        if group.prime % 4 != 3:
            continue
        g = group.generator
        assert group.solve_for_y(g.x) == {g.y, group.prime - g.y}, name


def test_groups_are_shared():
    assert get_group("secp256k1") is get_group("secp256k1")
    assert get_group("SECP256K1") is get_group("secp256k1")
    assert get_group("nistp256") is get_group("secp256r1")
    assert get_group("P-384") is get_group("secp384r1")
    assert named_curves.Secp256k1 is get_group("secp256k1")
    assert named_curves.Nistp521 is get_group("secp521r1")

    p = get_group("secp256k1").generator
    q = get_group("Secp256k1").new_point(1)
    assert p + q == p.double()


def test_field_sizes():
    """The bit length of p matches the size in the curve name."""
    assert CURVE_PARAMETERS["secp521r1"].p == 2**521 - 1
    for name, params in CURVE_PARAMETERS.items():
        size = int(name[4:-2])
        assert params.p.bit_length() == size, name
        assert get_group(name).bit_length == size, name
        assert params.p % 2 == 1, name


def test_random_curves_use_a_equal_minus_3():
    for name, params in CURVE_PARAMETERS.items():
        if name.endswith(("r1", "r2")):
            assert params.a == params.p - 3, name


def test_unknown_curves():
    for name in ("secp999k1", "", "nistp", None):
        with pytest.raises(UnknownCurveError):
            get_group(name)
    with pytest.raises(KeyError):
        get_group("curve25519")
    with pytest.raises(AttributeError):
        named_curves.Curve25519


def test_available_curves():
    names = available_curves()
    assert names == sorted(names)
    for name in ("secp256k1", "secp256r1", "nistp256", "secp521r1", "p-224"):
        assert name in names
    for name in names:
        assert get_group(name) is not None


def main():
    """Run all named curve tests."""
    print("Running named curve tests...")

    test_generators_have_the_stated_order()
    test_parameters_match_table()
    test_solve_for_y_recovers_generator()
    test_groups_are_shared()
    test_field_sizes()
    test_random_curves_use_a_equal_minus_3()
    test_unknown_curves()
    test_available_curves()

    print("✓ All named curve tests passed!")


if __name__ == "__main__":
    main()
