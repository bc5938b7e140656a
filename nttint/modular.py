"""
Modular exponentiation, modular inverses and the trial-division prime helpers
used to pick transform parameters.
"""

import math
from typing import List


def pow_mod(base: int, exponent: int, modulus: int) -> int:
    """Compute (base^exponent) % modulus by square-and-multiply."""
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    if modulus < 1:
        raise ValueError(f"Modulus must be positive, got {modulus}")

    result = 1 % modulus
    base = base % modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def _inverse_naive(value: int, modulus: int) -> int:
    # Linear scan over every residue: O(modulus), only usable for small moduli.
    for candidate in range(modulus):
        if (value * candidate) % modulus == 1 % modulus:
            return candidate
    raise ValueError(f"{value} has no inverse modulo {modulus}")


def _inverse_euclid(value: int, modulus: int) -> int:
    old_r, r = value, modulus
    old_s, s = 1, 0
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
    if old_r != 1:
        raise ValueError(f"{value} has no inverse modulo {modulus}")
    return old_s % modulus


def inv_pow_mod(base: int, exponent: int, modulus: int, method: str = "euclid") -> int:
    """
    Compute the multiplicative inverse of (base^exponent) % modulus.

    Args:
        base: Base of the power
        exponent: Non-negative exponent
        modulus: Modulus of the ring
        method: "naive" scans every residue in [0, modulus) (O(modulus), too slow
            for the moduli picked for large products), "euclid" uses the extended
            Euclidean algorithm. Both return the same residue.

    Returns:
        The value v in [0, modulus) with pow_mod(base, exponent, modulus) * v = 1 (mod modulus)

    Raises:
        ValueError: If the power is not invertible or the method is unknown
    """
    value = pow_mod(base, exponent, modulus)
    if method == "euclid":
        return _inverse_euclid(value, modulus)
    elif method == "naive":
        return _inverse_naive(value, modulus)
    else:
        raise ValueError(f"Unknown method: {method}. Use 'euclid' or 'naive'")


def is_prime(n: int) -> bool:
    """Check if a number is prime by trial division."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for i in range(3, math.isqrt(n) + 2, 2):
        if n % i == 0:
            return False
    return True


def prime_factors_of(n: int) -> List[int]:
    """Return the distinct prime factors of n in ascending order."""
    if n < 1:
        raise ValueError(f"Cannot factor {n}: expected a positive integer")
    if is_prime(n):
        return [n]

    factors = []
    temp = n
    divisor = 2
    while divisor * divisor <= temp:
        if temp % divisor == 0:
            factors.append(divisor)
            while temp % divisor == 0:
                temp //= divisor
        divisor += 1 if divisor == 2 else 2

    if temp > 1:
        factors.append(temp)

    return factors
