"""
Pure-Python modular arithmetic reference implementations.

These are the building blocks for every CRT routine in the package:
the extended Euclidean algorithm, modular inversion on top of it, and
a few residue helpers.

All operations are exact (Python int arithmetic, no floating-point, no
size ceiling).
"""

from typing import Callable, Iterable, List, Optional, Sequence, Tuple
import math

from rns_crt.errors import InverseDoesNotExistError

# (a, m) -> (gcd, x, y) with a*x + m*y == gcd
ExtendedGcd = Callable[[int, int], Tuple[int, int, int]]


# ---------------------------------------------------------------------------
# Extended GCD / modular inverse
# ---------------------------------------------------------------------------

def extended_gcd(a: int, m: int) -> Tuple[int, int, int]:
    """Extended Euclidean algorithm.

    Returns:
        (g, x, y) with a*x + m*y == g and g >= 0.  Works for negative and
        zero inputs; extended_gcd(0, 0) == (0, 1, 0).
    """
    old_r, r = int(a), int(m)
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    if old_r < 0:
        old_r, old_x, old_y = -old_r, -old_x, -old_y
    return old_r, old_x, old_y


def normalize(x: int, m: int) -> int:
    """Canonical residue of x modulo m, in [0, m) for m >= 1."""
    return ((x % m) + m) % m


def mod_inverse(a: int, m: int, egcd: Optional[ExtendedGcd] = None) -> int:
    """Modular inverse a^{-1} mod m for any modulus coprime to a.

    Args:
        a: Value to invert; may be negative or exceed m.
        m: Positive modulus.
        egcd: Extended-GCD provider, defaults to :func:`extended_gcd`.

    Returns:
        x in [0, m) with (a * x) % m == 1 (or 0 when m == 1).

    Raises:
        InverseDoesNotExistError: gcd(a, m) != 1, or m < 1.
    """
    if egcd is None:
        egcd = extended_gcd
    if m < 1:
        raise InverseDoesNotExistError(a, m, math.gcd(a, m))

    g, x, _ = egcd(a, m)
    if g != 1:
        raise InverseDoesNotExistError(a, m, g)
    return normalize(x, m)


# ---------------------------------------------------------------------------
# Prime generation
# ---------------------------------------------------------------------------

def is_prime(n: int) -> bool:
    """Trial division; fine for the 31-bit moduli generate_primes targets."""
    if n < 2:
        return False
    if n == 2 or n == 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def generate_primes(K: int, bits: int = 31) -> List[int]:
    """Generate K distinct odd primes just below 2^bits (bits >= 3).

    Distinct primes are pairwise coprime, so the result is always a valid
    modulus set for CRT.

    Returns:
        Sorted list of K primes, each in [2^(bits-1), 2^bits).
    """
    prime_max = (1 << bits) - 1
    prime_min = 1 << (bits - 1)

    primes: List[int] = []
    candidate = prime_max
    while len(primes) < K and candidate >= prime_min:
        if is_prime(candidate):
            primes.append(candidate)
        candidate -= 2  # only odd candidates
    if len(primes) < K:
        raise RuntimeError(
            f"Could not find {K} primes in [{prime_min}, {prime_max}]"
        )
    return sorted(primes)


# ---------------------------------------------------------------------------
# Residue helpers
# ---------------------------------------------------------------------------

def product(values: Iterable[int]) -> int:
    """Exact product of ints; the empty product is 1."""
    M = 1
    for v in values:
        M *= int(v)
    return M


def rns_encode(x: int, moduli: Sequence[int]) -> List[int]:
    """Encode x into residues.  Negative x encodes as its class mod M."""
    return [normalize(int(x), int(m)) for m in moduli]
