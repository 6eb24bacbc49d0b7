"""
Error types for CRT solving and modular inversion.

Every error carries the offending values as attributes so callers can
build their own diagnostics; ``str(err)`` gives a readable default.
"""


class CrtError(ValueError):
    """Base class for all congruence-system precondition violations."""


class EmptyInputError(CrtError):
    """One or both input sequences have zero length."""

    def __init__(self, n_remainders: int, n_moduli: int):
        self.n_remainders = n_remainders
        self.n_moduli = n_moduli
        super().__init__(
            f"Empty congruence system: got {n_remainders} remainders "
            f"and {n_moduli} moduli"
        )


class LengthMismatchError(CrtError):
    """Remainder and modulus sequences differ in length."""

    def __init__(self, n_remainders: int, n_moduli: int):
        self.n_remainders = n_remainders
        self.n_moduli = n_moduli
        super().__init__(
            f"Length mismatch: {n_remainders} remainders vs "
            f"{n_moduli} moduli"
        )


class InverseDoesNotExistError(CrtError):
    """``a`` has no multiplicative inverse modulo ``m``."""

    def __init__(self, a: int, m: int, gcd: int):
        self.a = a
        self.m = m
        self.gcd = gcd
        super().__init__(self._message())

    def _message(self) -> str:
        if self.m < 1:
            return f"No modular inverse of {self.a} mod {self.m}: modulus must be positive"
        return f"No modular inverse of {self.a} mod {self.m}: gcd = {self.gcd}"


class NotPairwiseCoprimeError(InverseDoesNotExistError):
    """Two moduli of a system share a common factor.

    Raised only by the explicit pairwise pre-check; the plain solver
    reports the same condition as an :class:`InverseDoesNotExistError`.
    """

    def __init__(self, i: int, j: int, modulus_i: int, modulus_j: int,
                 gcd: int):
        self.i = i
        self.j = j
        self.modulus_i = modulus_i
        self.modulus_j = modulus_j
        super().__init__(modulus_i, modulus_j, gcd)

    def _message(self) -> str:
        return (
            f"Moduli not pairwise coprime: moduli[{self.i}] = {self.modulus_i} "
            f"and moduli[{self.j}] = {self.modulus_j} share gcd {self.gcd}"
        )
