"""Tests for the matrix form of the transform."""

import numpy as np
import pytest

from nttint.roots import TransformContext
from nttint.tables import direct_transform, exponent_matrix, format_table, transform_matrix

SMALL = TransformContext(n=4, modulus=5, omega=2)


def test_exponent_matrix():
    expected = np.array([
        [0, 0, 0, 0],
        [0, 1, 2, 3],
        [0, 2, 0, 2],
        [0, 3, 2, 1],
    ])
    assert np.array_equal(exponent_matrix(4), expected)


def test_transform_matrix():
    expected = [
        [1, 1, 1, 1],
        [1, 2, 4, 3],
        [1, 4, 1, 4],
        [1, 3, 4, 2],
    ]
    assert transform_matrix(SMALL).tolist() == expected


def test_inverse_matrix_undoes_forward():
    context = TransformContext.select(8, 99)
    forward = transform_matrix(context).tolist()
    inverse = transform_matrix(context, inverse=True).tolist()
    n, modulus = context.n, context.modulus
    for i in range(n):
        for j in range(n):
            entry = sum(forward[i][k] * inverse[k][j] for k in range(n)) % modulus
            assert entry == (n % modulus if i == j else 0)


def test_direct_transform_roundtrip():
    context = TransformContext.select(16, 99)
    vec = list(range(16))
    assert direct_transform(direct_transform(vec, context), context, inverse=True) == vec


def test_direct_transform_rejects_wrong_length():
    with pytest.raises(ValueError):
        direct_transform([1, 2], SMALL)


def test_format_table():
    text = format_table(transform_matrix(SMALL), "NTT")
    lines = text.splitlines()
    assert lines[0] == "{NTT} table for n = 4"
    assert len(lines) == 3 + 4
    assert lines[3].startswith("    0|")
    assert lines[4].split("|")[1].split() == ["1", "2", "4", "3"]
