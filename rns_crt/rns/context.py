"""
Precomputed CRT basis for a fixed set of moduli.

Repeated solves over the same moduli (RSA-CRT with fixed p and q, or an
RNS pipeline with a fixed prime set) only need the per-modulus basis
terms inv(M/m_i) * (M/m_i) once; each solve is then a dot product.
"""

from typing import List, Optional, Sequence
import operator

import numpy as np

from rns_crt.crt.garner import centered
from rns_crt.crt.solver import check_pairwise_coprime, validate_system
from rns_crt.errors import LengthMismatchError
from .reference import ExtendedGcd, mod_inverse, normalize, product

_INT64_MAX = np.iinfo(np.int64).max


class CrtContext:
    """CRT basis for fixed moduli.

    Usage:
        ctx = CrtContext([3, 5, 7])
        ctx.solve([2, 3, 2])        # 23
        ctx.encode_batch([23, 100]) # ndarray, shape (2, 3)
    """

    def __init__(self, moduli: Sequence[int],
                 egcd: Optional[ExtendedGcd] = None,
                 require_coprime: bool = False):
        """
        Args:
            moduli: Positive, pairwise-coprime moduli.
            egcd: Extended-GCD provider for the basis inverses.
            require_coprime: Run the explicit pairwise check first.

        Raises:
            Same errors as chinese_remainder on these moduli.
        """
        _, moduli = validate_system(moduli, moduli)
        if require_coprime:
            check_pairwise_coprime(moduli)

        self.moduli: List[int] = moduli
        self.K = len(moduli)
        self.M = product(moduli)
        self.partials: List[int] = [self.M // m for m in moduli]
        self.basis: List[int] = [
            mod_inverse(p, m, egcd=egcd) * p
            for p, m in zip(self.partials, moduli)
        ]
        self._dtype = object if max(moduli) > _INT64_MAX else np.int64

    def __repr__(self) -> str:
        return f"CrtContext(moduli={self.moduli!r})"

    def _check_length(self, residues: Sequence[int]) -> List[int]:
        residues = [operator.index(r) for r in residues]
        if len(residues) != self.K:
            raise LengthMismatchError(len(residues), self.K)
        return residues

    # -- solve ----------------------------------------------------------------

    def solve(self, remainders: Sequence[int]) -> int:
        """Same value as chinese_remainder(remainders, self.moduli)."""
        remainders = self._check_length(remainders)
        total = 0
        for r, b in zip(remainders, self.basis):
            total += r * b
        return normalize(total, self.M)

    def solve_signed(self, remainders: Sequence[int]) -> int:
        return centered(self.solve(remainders), self.M)

    # -- encode / decode ----------------------------------------------------

    def encode(self, x: int) -> List[int]:
        return [normalize(operator.index(x), m) for m in self.moduli]

    def encode_batch(self, values: Sequence[int]) -> np.ndarray:
        """Residues of each value, shape (N, K).

        dtype is int64 when every modulus fits, else object (Python ints).
        """
        rows = [self.encode(v) for v in values]
        out = np.empty((len(rows), self.K), dtype=self._dtype)
        for i, row in enumerate(rows):
            out[i, :] = row
        return out

    def decode_batch(self, residues) -> List[int]:
        """Solve each row of an (N, K) array-like of residues.

        An empty batch ([] or a (0, K) array) decodes to [].
        """
        arr = np.asarray(residues, dtype=object)
        if arr.size == 0 and arr.ndim == 1:
            return []
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2-D residue array, got ndim={arr.ndim}")
        if arr.shape[1] != self.K:
            raise LengthMismatchError(arr.shape[1], self.K)
        return [self.solve(row) for row in arr]
