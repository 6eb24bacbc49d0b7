"""
rns_crt: Chinese Remainder Theorem solving and modular inversion
over arbitrary-precision integers.

  M = m_0 * m_1 * ... * m_{n-1}           moduli pairwise coprime
  x = sum_i r_i * inv(M/m_i, m_i) * (M/m_i)   (mod M)
  0 <= x < M,  x = r_i (mod m_i) for all i

Pure-Python core; sympy is used for cross-checks and as an alternative
extended-GCD provider, numpy for batched residue arrays.
"""

__version__ = "0.1.0"

from .errors import (
    CrtError, EmptyInputError, LengthMismatchError,
    InverseDoesNotExistError, NotPairwiseCoprimeError,
)
from .rns.reference import (
    extended_gcd, normalize, mod_inverse,
    generate_primes, is_prime, product, rns_encode,
)
from .crt import (
    chinese_remainder, check_pairwise_coprime,
    crt_reconstruct, crt_reconstruct_signed, centered,
    solve_system, CrtSolution,
    sympy_extended_gcd, sympy_crt, cross_check_solution,
)
from .rns.context import CrtContext
from .config import SolverConfig, CongruenceSystem, load_config
from .logging import RunLogger, RunManifest, create_manifest

__all__ = [
    "CrtError", "EmptyInputError", "LengthMismatchError",
    "InverseDoesNotExistError", "NotPairwiseCoprimeError",
    "extended_gcd", "normalize", "mod_inverse",
    "generate_primes", "is_prime", "product", "rns_encode",
    "chinese_remainder", "check_pairwise_coprime",
    "crt_reconstruct", "crt_reconstruct_signed", "centered",
    "solve_system", "CrtSolution",
    "sympy_extended_gcd", "sympy_crt", "cross_check_solution",
    "CrtContext",
    "SolverConfig", "CongruenceSystem", "load_config",
    "RunLogger", "RunManifest", "create_manifest",
]
