"""
Search for the prime modulus, generator and principal root of unity that a
length-n transform needs.
"""

import math
from dataclasses import dataclass

import numpy as np

from nttint.errors import TransformError
from nttint.modular import is_prime, pow_mod, prime_factors_of

# Residues live in int64 arrays; the product of two reduced residues must fit.
MAX_MODULUS = math.isqrt(int(np.iinfo(np.int64).max))


def find_modulus(n: int, max_digit_value: int, limit: int = MAX_MODULUS, verbose: bool = False) -> int:
    """
    Find the smallest prime M = k*n + 1 with M > n * max_digit_value^2.

    A convolution sum of n terms, each at most max_digit_value^2, then stays
    below M and never wraps.

    Args:
        n: Transform size
        max_digit_value: Largest element that will be transformed
        limit: Largest modulus the caller can work with
        verbose: Print the search

    Returns:
        Prime modulus M

    Raises:
        TransformError: If every candidate up to limit is composite
    """
    if n < 1:
        raise ValueError(f"Transform size must be positive, got {n}")

    minimum_modulus = n * max_digit_value ** 2
    # k*n + 1 > n*d^2 holds exactly when k >= d^2
    k = max(1, max_digit_value ** 2)

    if verbose:
        print(f"Searching for prime M = 1 (mod {n}) with M > {minimum_modulus}")
        print(f"Starting search from k = {k}")

    while True:
        candidate = k * n + 1
        if candidate > limit:
            raise TransformError(
                f"Could not find a prime modulus for n = {n} and max value {max_digit_value}: "
                f"candidates exceed {limit}"
            )
        if is_prime(candidate):
            if verbose:
                print(f"Found suitable prime: M = {candidate} (= 1 mod {n}, {candidate.bit_length()} bits)")
            return candidate
        k += 1


def find_generator(modulus: int) -> int:
    """Find the smallest primitive root modulo a prime."""
    phi = modulus - 1
    factors = prime_factors_of(phi)

    for g in range(1, modulus):
        if all(pow_mod(g, phi // factor, modulus) != 1 for factor in factors):
            return g

    raise TransformError(f"No generator exists under the modulus {modulus}")


def find_omega(n: int, modulus: int) -> int:
    """Find the principal n-th root of unity g^((M-1)/n) modulo M."""
    if (modulus - 1) % n != 0:
        raise TransformError(f"Transform size {n} does not divide {modulus} - 1")

    g = find_generator(modulus)
    return pow_mod(g, (modulus - 1) // n, modulus)


@dataclass(frozen=True)
class TransformContext:
    """Transform size, prime modulus and root of unity for a single transform."""

    n: int
    modulus: int
    omega: int

    @classmethod
    def select(cls, n: int, max_digit_value: int, verbose: bool = False) -> "TransformContext":
        modulus = find_modulus(n, max_digit_value, verbose=verbose)
        omega = find_omega(n, modulus)
        if verbose:
            print(f"Transform context: n={n}, modulus={modulus}, omega={omega}")
        return cls(n=n, modulus=modulus, omega=omega)
