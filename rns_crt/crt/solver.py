"""
Chinese Remainder Theorem solver (basis construction).

For moduli m_0..m_{n-1} with product M, the solution is

    x = sum_i r_i * inv(M/m_i mod m_i) * (M/m_i)   (mod M)

which is unique in [0, M) when the moduli are pairwise coprime.
Pairwise coprimality is not checked unless asked for; a shared factor
surfaces as an InverseDoesNotExistError from the offending term.
"""

from typing import List, Optional, Sequence, Tuple
import math
import operator

from rns_crt.errors import (
    EmptyInputError, InverseDoesNotExistError, LengthMismatchError,
    NotPairwiseCoprimeError,
)
from rns_crt.rns.reference import (
    ExtendedGcd, mod_inverse, normalize, product,
)


def validate_system(
    remainders: Sequence[int],
    moduli: Sequence[int],
) -> Tuple[List[int], List[int]]:
    """Check shape of a congruence system and coerce entries to int.

    Entries must be integral (int, numpy integer); floats are rejected
    with TypeError rather than truncated.

    Raises:
        EmptyInputError: Either sequence is empty.
        LengthMismatchError: Sequences differ in length.
        InverseDoesNotExistError: A modulus is not positive.
        TypeError: An entry is not an integer (e.g. a float).
    """
    remainders = [operator.index(r) for r in remainders]
    moduli = [operator.index(m) for m in moduli]
    if len(remainders) == 0 or len(moduli) == 0:
        raise EmptyInputError(len(remainders), len(moduli))
    if len(remainders) != len(moduli):
        raise LengthMismatchError(len(remainders), len(moduli))
    for i, m in enumerate(moduli):
        if m < 1:
            others = product(moduli[:i] + moduli[i + 1:])
            raise InverseDoesNotExistError(others, m, math.gcd(others, m))
    return remainders, moduli


def check_pairwise_coprime(moduli: Sequence[int]) -> None:
    """O(n^2) pairwise gcd check.

    Raises:
        NotPairwiseCoprimeError: For the first pair (i, j), i < j, whose
            gcd is not 1.
    """
    moduli = [operator.index(m) for m in moduli]
    for i in range(len(moduli)):
        for j in range(i + 1, len(moduli)):
            g = math.gcd(moduli[i], moduli[j])
            if g != 1:
                raise NotPairwiseCoprimeError(i, j, moduli[i], moduli[j], g)


def chinese_remainder(
    remainders: Sequence[int],
    moduli: Sequence[int],
    egcd: Optional[ExtendedGcd] = None,
    require_coprime: bool = False,
) -> int:
    """Solve x = remainders[i] (mod moduli[i]) for all i.

    Args:
        remainders: Remainders r_i; any sign, any size.
        moduli: Positive, pairwise-coprime moduli m_i.
        egcd: Extended-GCD provider passed through to mod_inverse.
        require_coprime: Run check_pairwise_coprime first for a precise
            diagnostic.  Does not change results for valid input.

    Returns:
        The unique x in [0, M), M = prod(moduli).

    Raises:
        EmptyInputError, LengthMismatchError: Malformed input.
        InverseDoesNotExistError: Some modulus shares a factor with the
            product of the others (or is not positive).
        NotPairwiseCoprimeError: Only with require_coprime=True.
    """
    remainders, moduli = validate_system(remainders, moduli)
    if require_coprime:
        check_pairwise_coprime(moduli)

    M = product(moduli)
    total = 0
    for r_i, m_i in zip(remainders, moduli):
        p_i = M // m_i
        inv_i = mod_inverse(p_i, m_i, egcd=egcd)
        total += r_i * inv_i * p_i

    return normalize(total, M)
