"""Arbitrary-precision unsigned integers multiplied with the Number-Theoretic Transform."""

from nttint.biguint import BASE, DIGITS_PER_BUCKET, BigUint, apply_carries
from nttint.errors import ParseError, ParseErrorKind, TransformError
from nttint.modular import inv_pow_mod, is_prime, pow_mod, prime_factors_of
from nttint.ntt import convolve, forward_transform, inverse_transform
from nttint.roots import TransformContext, find_generator, find_modulus, find_omega

__version__ = "0.1.0"

__all__ = [
    "BASE",
    "DIGITS_PER_BUCKET",
    "BigUint",
    "ParseError",
    "ParseErrorKind",
    "TransformContext",
    "TransformError",
    "apply_carries",
    "convolve",
    "find_generator",
    "find_modulus",
    "find_omega",
    "forward_transform",
    "inv_pow_mod",
    "inverse_transform",
    "is_prime",
    "pow_mod",
    "prime_factors_of",
]
