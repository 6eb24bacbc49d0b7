"""
RNS (Residue Number System) module.

Provides:
1. Pure Python reference arithmetic (extended GCD, inverse, encode)
2. CrtContext: precomputed basis for repeated solves over fixed moduli
"""

from .reference import (
    extended_gcd, normalize, mod_inverse,
    is_prime, generate_primes, product, rns_encode,
)
from .context import CrtContext

__all__ = [
    "extended_gcd", "normalize", "mod_inverse",
    "is_prime", "generate_primes", "product", "rns_encode",
    "CrtContext",
]
