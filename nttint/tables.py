"""
Matrix form of the transform: exponent tables, transform matrices and the
O(n^2) direct transform used to cross-check the Cooley-Tukey recursion.
"""

from typing import List, Sequence

import numpy as np

from nttint.modular import inv_pow_mod, pow_mod


def exponent_matrix(n: int) -> np.ndarray:
    """Exponent table E[i, j] = i*j mod n of the length-n DFT."""
    index = np.arange(n, dtype=np.int64)
    return np.outer(index, index) % n


def transform_matrix(context, inverse: bool = False) -> np.ndarray:
    """Matrix of omega^(i*j) mod M (omega^-(i*j) for the inverse)."""
    n, modulus, omega = context.n, context.modulus, context.omega
    exp_fn = inv_pow_mod if inverse else pow_mod
    powers = np.array([exp_fn(omega, k, modulus) for k in range(n)], dtype=np.int64)
    return powers[exponent_matrix(n)]


def direct_transform(elements: Sequence[int], context, inverse: bool = False) -> List[int]:
    """
    Evaluate the transform as a matrix-vector product in O(n^2).

    Row sums are taken with Python integers so nothing overflows.
    """
    if len(elements) != context.n:
        raise ValueError(f"Input must have length {context.n}, got {len(elements)}")

    modulus = context.modulus
    matrix = transform_matrix(context, inverse=inverse)
    values = [int(x) % modulus for x in elements]

    result = []
    for row in matrix.tolist():
        total = sum(w * x for w, x in zip(row, values))
        result.append(total % modulus)

    if inverse:
        n_inv = inv_pow_mod(context.n, 1, modulus)
        result = [(x * n_inv) % modulus for x in result]

    return result


def format_table(matrix: np.ndarray, title: str) -> str:
    """Render a square matrix as a fixed-width table with row and column indices."""
    rows, cols = matrix.shape
    width = max(5, max(len(str(v)) for v in matrix.flat) + 1) if matrix.size else 5

    lines = [f"{{{title}}} table for n = {rows}"]
    lines.append(f"{'':5}|" + "".join(f"{col:>{width}}" for col in range(cols)))
    lines.append("-----|" + "-" * (width * cols))
    for i in range(rows):
        lines.append(f"{i:5}|" + "".join(f"{int(v):>{width}}" for v in matrix[i]))
    return "\n".join(lines)
