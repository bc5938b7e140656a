"""
Radix-2 Number-Theoretic Transform (Cooley-Tukey, decimation in time) and
the convolution pipeline built on it.
"""

from typing import Callable, List, Sequence

import numpy as np

from nttint.modular import inv_pow_mod, pow_mod
from nttint.roots import MAX_MODULUS, TransformContext
from nttint.tables import direct_transform


def is_power_of_two(k: int) -> bool:
    return k > 0 and k & (k - 1) == 0


def next_power_of_two(k: int) -> int:
    """Smallest power of two >= k."""
    n = 1
    while n < k:
        n <<= 1
    return n


def cooley_tukey(elements, n: int, omega: int, modulus: int,
                 mod_exp_fn: Callable[[int, int, int], int],
                 verbose: bool = False, level: int = 0) -> np.ndarray:
    """
    Recursive radix-2 Cooley-Tukey transform over Z_modulus.

    Every level works against the same omega; a sub-transform of length len
    raises it to multiples of n // len, which is a root of order len.
    mod_exp_fn is pow_mod for the forward transform and inv_pow_mod for the
    inverse one. The input is left untouched and a new array is returned.
    """
    values = np.asarray(elements, dtype=np.int64)
    length = len(values)
    indent = "  " * level

    if length == 1:
        if verbose:
            print(f"{indent}── NTT-1 (BASE CASE): {values.tolist()}")
        return values.copy()

    if verbose:
        print(f"{indent}┌─ NTT-{length} (Level {level})")
        print(f"{indent}│  Input: {values.tolist()}")

    even = cooley_tukey(values[0::2], n, omega, modulus, mod_exp_fn, verbose, level + 1)
    odd = cooley_tukey(values[1::2], n, omega, modulus, mod_exp_fn, verbose, level + 1)

    half = length // 2
    multiplier = n // length
    twiddles = np.array([mod_exp_fn(omega, multiplier * i, modulus) for i in range(half)], dtype=np.int64)
    t = (twiddles * odd) % modulus

    result = np.empty(length, dtype=np.int64)
    result[:half] = (even + t) % modulus
    result[half:] = (even - t + modulus) % modulus

    if verbose:
        print(f"{indent}│  Twiddles: {twiddles.tolist()}")
        print(f"{indent}└─ NTT-{length} Result: {result.tolist()}")

    return result


def _check_elements(elements: Sequence[int], context: TransformContext) -> None:
    if len(elements) != context.n:
        raise ValueError(f"Input must have length {context.n}, got {len(elements)}")
    if not is_power_of_two(context.n):
        raise ValueError(f"Transform size must be a power of two, got {context.n}")
    if context.modulus > MAX_MODULUS:
        raise ValueError(f"Modulus {context.modulus} exceeds the largest usable modulus {MAX_MODULUS}")
    for x in elements:
        if not 0 <= x < context.modulus:
            raise ValueError(f"Element {x} is outside [0, {context.modulus})")


def forward_transform(elements: Sequence[int], context: TransformContext,
                      method: str = "cooley_tukey", verbose: bool = False) -> List[int]:
    """
    Compute the forward NTT of elements under (n, modulus, omega).

    Args:
        elements: Exactly context.n residues in [0, modulus)
        context: Transform parameters
        method: "cooley_tukey" for the O(n log n) recursion, "direct" for the O(n^2) matrix product
        verbose: Print the recursion tree
    """
    _check_elements(elements, context)
    if method == "cooley_tukey":
        result = cooley_tukey(elements, context.n, context.omega, context.modulus, pow_mod, verbose)
        return result.tolist()
    elif method == "direct":
        return direct_transform(elements, context)
    else:
        raise ValueError(f"Unknown method: {method}. Use 'cooley_tukey' or 'direct'")


def inverse_transform(elements: Sequence[int], context: TransformContext,
                      method: str = "cooley_tukey", verbose: bool = False) -> List[int]:
    """
    Compute the inverse NTT of elements under (n, modulus, omega).

    The recursion runs on inverse twiddles and every output is scaled by n^-1,
    undoing the factor n the forward transform introduces. Trailing padding is
    left in place for the caller to drop.
    """
    _check_elements(elements, context)
    if method == "cooley_tukey":
        result = cooley_tukey(elements, context.n, context.omega, context.modulus, inv_pow_mod, verbose)
        n_inv = inv_pow_mod(context.n, 1, context.modulus)
        return ((result * n_inv) % context.modulus).tolist()
    elif method == "direct":
        return direct_transform(elements, context, inverse=True)
    else:
        raise ValueError(f"Unknown method: {method}. Use 'cooley_tukey' or 'direct'")


def convolve(lhs: Sequence[int], rhs: Sequence[int], verbose: bool = False) -> List[int]:
    """
    Acyclic convolution of two non-negative integer sequences through the NTT.

    The transform length is the smallest power of two >= len(lhs) + len(rhs)
    and the modulus is sized against the largest element of either operand,
    so the result is exact (not reduced).

    Returns:
        The len(lhs) + len(rhs) - 1 convolution coefficients
    """
    if len(lhs) == 0 or len(rhs) == 0:
        raise ValueError("Cannot convolve an empty sequence")

    n = next_power_of_two(len(lhs) + len(rhs))
    max_digit_value = max(max(lhs), max(rhs))
    context = TransformContext.select(n, max_digit_value, verbose=verbose)

    a = list(lhs) + [0] * (n - len(lhs))
    b = list(rhs) + [0] * (n - len(rhs))

    A = np.array(forward_transform(a, context, verbose=verbose), dtype=np.int64)
    B = np.array(forward_transform(b, context, verbose=verbose), dtype=np.int64)
    C = (A * B) % context.modulus
    result = inverse_transform(C.tolist(), context, verbose=verbose)

    return result[:len(lhs) + len(rhs) - 1]
