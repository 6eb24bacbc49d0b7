"""
Iterative (Garner-style) CRT reconstruction.

Builds the solution one modulus at a time in mixed-radix form:

    x_1 = r_0
    x_{k+1} = x_k + M_k * ((r_k - x_k) * M_k^{-1} mod m_k),  M_{k+1} = M_k * m_k

Each step inverts the running product modulo the next modulus, so the
big-int work per step is one multiply instead of a full division by M.
Results are identical to the basis solver in solver.py.
"""

from typing import Optional, Sequence

from rns_crt.rns.reference import ExtendedGcd, mod_inverse, normalize, product
from .solver import validate_system


def crt_reconstruct(
    residues: Sequence[int],
    moduli: Sequence[int],
    egcd: Optional[ExtendedGcd] = None,
) -> int:
    """Reconstruct x in [0, M) from residues via Garner's algorithm.

    Moduli need only be pairwise coprime, not prime.

    Raises:
        EmptyInputError, LengthMismatchError: Malformed input.
        InverseDoesNotExistError: The running product of the earlier
            moduli shares a factor with the next modulus.
    """
    residues, moduli = validate_system(residues, moduli)

    x = normalize(residues[0], moduli[0])
    M = moduli[0]

    for a_i, m_i in zip(residues[1:], moduli[1:]):
        M_inv = mod_inverse(M, m_i, egcd=egcd)
        t = normalize((a_i - x) * M_inv, m_i)
        x = x + M * t
        M = M * m_i

    return x


def centered(x: int, M: int) -> int:
    """Map x in [0, M) to the symmetric range [-(M // 2), M - M // 2)."""
    if x >= M - M // 2:
        return x - M
    return x


def crt_reconstruct_signed(
    residues: Sequence[int],
    moduli: Sequence[int],
    egcd: Optional[ExtendedGcd] = None,
) -> int:
    """Reconstruct a signed integer, assuming |x| < M/2."""
    residues, moduli = validate_system(residues, moduli)
    return centered(crt_reconstruct(residues, moduli, egcd=egcd), product(moduli))
