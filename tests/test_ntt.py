"""Tests for the Cooley-Tukey transform and the convolution pipeline."""

import random

import numpy as np
import pytest

from nttint.biguint import apply_carries
from nttint.ntt import (convolve, cooley_tukey, forward_transform, inverse_transform,
                        is_power_of_two, next_power_of_two)
from nttint.modular import pow_mod
from nttint.roots import MAX_MODULUS, TransformContext

SMALL = TransformContext(n=4, modulus=5, omega=2)


def test_power_of_two_helpers():
    assert [is_power_of_two(k) for k in range(9)] == [False, True, True, False, True, False, False, False, True]
    assert next_power_of_two(1) == 1
    assert next_power_of_two(3) == 4
    assert next_power_of_two(4) == 4
    assert next_power_of_two(5) == 8
    assert next_power_of_two(1000) == 1024


def test_forward_transform_impulse():
    assert forward_transform([1, 0, 0, 0], SMALL) == [1, 1, 1, 1]


def test_forward_transform_shifted_impulse():
    # [1, w, w^2, w^3] with w = 2 mod 5
    assert forward_transform([0, 1, 0, 0], SMALL) == [1, 2, 4, 3]


def test_inverse_transform_known_values():
    assert inverse_transform([1, 2, 4, 3], SMALL) == [0, 1, 0, 0]
    assert inverse_transform([1, 1, 1, 1], SMALL) == [1, 0, 0, 0]


def test_transform_length_one():
    context = TransformContext(n=1, modulus=2, omega=1)
    assert forward_transform([1], context) == [1]
    assert inverse_transform([1], context) == [1]


@pytest.mark.parametrize("n", [2, 4, 8, 16, 64, 256])
def test_roundtrip_random_vectors(n):
    rng = random.Random(n)
    context = TransformContext.select(n, 99)
    for _ in range(5):
        vec = [rng.randint(0, 99) for _ in range(n)]
        assert inverse_transform(forward_transform(vec, context), context) == vec


@pytest.mark.parametrize("n", [2, 4, 8, 16, 32])
def test_cooley_tukey_matches_direct(n):
    rng = random.Random(100 + n)
    context = TransformContext.select(n, 99)
    vec = [rng.randint(0, context.modulus - 1) for _ in range(n)]
    assert forward_transform(vec, context) == forward_transform(vec, context, method="direct")
    assert inverse_transform(vec, context) == inverse_transform(vec, context, method="direct")


def test_forward_transform_is_evaluation():
    n = 8
    context = TransformContext.select(n, 9)
    vec = [3, 1, 4, 1, 5, 9, 2, 6]
    expected = [
        sum(x * pow_mod(context.omega, j * k, context.modulus) for j, x in enumerate(vec)) % context.modulus
        for k in range(n)
    ]
    assert forward_transform(vec, context) == expected


def test_cooley_tukey_does_not_mutate_input():
    values = np.array([1, 2, 3, 4], dtype=np.int64)
    cooley_tukey(values, 4, 2, 5, pow_mod)
    assert values.tolist() == [1, 2, 3, 4]


def test_transform_rejects_wrong_length():
    with pytest.raises(ValueError):
        forward_transform([1, 2, 3], SMALL)


def test_transform_rejects_non_power_of_two():
    context = TransformContext(n=3, modulus=7, omega=2)
    with pytest.raises(ValueError):
        forward_transform([1, 2, 3], context)


def test_transform_rejects_oversized_modulus():
    context = TransformContext(n=2, modulus=MAX_MODULUS + 2, omega=1)
    with pytest.raises(ValueError):
        forward_transform([0, 1], context)


def test_transform_rejects_unreduced_elements():
    with pytest.raises(ValueError):
        forward_transform([5, 0, 0, 0], SMALL)
    with pytest.raises(ValueError):
        inverse_transform([-1, 0, 0, 0], SMALL)


def test_transform_unknown_method():
    with pytest.raises(ValueError):
        forward_transform([1, 0, 0, 0], SMALL, method="bluestein")
    with pytest.raises(ValueError):
        inverse_transform([1, 0, 0, 0], SMALL, method="bluestein")


def test_transform_verbose(capsys):
    forward_transform([1, 2, 3, 4], SMALL, verbose=True)
    out = capsys.readouterr().out
    assert "NTT-4" in out
    assert "BASE CASE" in out


def test_convolve_digit_vectors():
    # 375 * 859 with least significant digit first
    coefficients = convolve([5, 7, 3], [9, 5, 8])
    assert coefficients == [45, 88, 102, 71, 24]
    digits = apply_carries(coefficients, base=10)
    assert digits == [5, 2, 1, 2, 2, 3]
    assert int("".join(str(d) for d in reversed(digits))) == 375 * 859 == 322125


def test_convolve_matches_numpy():
    rng = random.Random(7)
    for len_a, len_b in [(1, 1), (1, 7), (5, 3), (16, 16), (33, 70)]:
        a = [rng.randint(0, 99) for _ in range(len_a)]
        b = [rng.randint(0, 99) for _ in range(len_b)]
        assert convolve(a, b) == np.convolve(a, b).tolist()


def test_convolve_zeros():
    assert convolve([0, 0], [0]) == [0, 0]


def test_convolve_rejects_empty():
    with pytest.raises(ValueError):
        convolve([], [1, 2])
