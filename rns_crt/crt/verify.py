"""
Independent cross-checks against sympy's number-theory routines.

Used by the solver front-end when ``cross_check`` is enabled, and by the
tests as ground truth.  sympy also serves as an alternative extended-GCD
provider.
"""

from typing import List, Optional, Sequence, Tuple

from sympy.core.intfunc import igcdex
from sympy.ntheory.modular import crt as _sympy_crt

from rns_crt.rns.reference import normalize, product


def sympy_extended_gcd(a: int, m: int) -> Tuple[int, int, int]:
    """Extended GCD via sympy, reordered to (g, x, y)."""
    x, y, g = igcdex(int(a), int(m))
    return int(g), int(x), int(y)


def sympy_crt(remainders: Sequence[int], moduli: Sequence[int]) -> Optional[int]:
    """sympy's CRT solution in [0, M), or None if sympy finds none."""
    moduli = [int(m) for m in moduli]
    remainders = [int(r) for r in remainders]
    res = _sympy_crt(moduli, remainders)
    if res is None:
        return None
    return normalize(int(res[0]), product(moduli))


def cross_check_solution(
    remainders: Sequence[int],
    moduli: Sequence[int],
    value: int,
) -> bool:
    """True if value matches sympy and satisfies every congruence."""
    moduli: List[int] = [int(m) for m in moduli]
    remainders = [int(r) for r in remainders]
    M = product(moduli)
    if not 0 <= value < M:
        return False
    for r, m in zip(remainders, moduli):
        if (value - r) % m != 0:
            return False
    return sympy_crt(remainders, moduli) == value
