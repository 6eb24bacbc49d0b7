"""
CRT (Chinese Remainder Theorem) module.

Two reconstruction strategies with identical results:
1. solver: basis construction, sum of r_i * inv_i * p_i mod M
2. garner: iterative mixed-radix reconstruction
"""

from .solver import chinese_remainder, check_pairwise_coprime, validate_system
from .garner import crt_reconstruct, crt_reconstruct_signed, centered
from .verify import sympy_extended_gcd, sympy_crt, cross_check_solution
from .system import solve_system, resolve_egcd, CrtSolution

__all__ = [
    "chinese_remainder", "check_pairwise_coprime", "validate_system",
    "crt_reconstruct", "crt_reconstruct_signed", "centered",
    "sympy_extended_gcd", "sympy_crt", "cross_check_solution",
    "solve_system", "resolve_egcd", "CrtSolution",
]
