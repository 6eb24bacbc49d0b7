"""
Solver front-end: picks the reconstruction method and extended-GCD
provider from a SolverConfig and packages the result.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from rns_crt.config import SolverConfig
from rns_crt.rns.reference import ExtendedGcd, extended_gcd, product
from .garner import centered, crt_reconstruct
from .solver import chinese_remainder, check_pairwise_coprime, validate_system
from .verify import cross_check_solution, sympy_extended_gcd

_EGCD_PROVIDERS = {
    "reference": extended_gcd,
    "sympy": sympy_extended_gcd,
}


def resolve_egcd(name: str) -> ExtendedGcd:
    """Look up an extended-GCD provider by config name."""
    try:
        return _EGCD_PROVIDERS[name]
    except KeyError:
        raise ValueError(f"Unknown egcd provider {name!r}") from None


@dataclass
class CrtSolution:
    """Result of solving one congruence system."""
    value: int
    modulus: int
    method: str
    signed_value: Optional[int] = None
    cross_checked: bool = False

    def to_dict(self) -> Dict[str, Any]:
        # ints as strings: JSON consumers often truncate big numbers
        return {
            'value': str(self.value),
            'modulus': str(self.modulus),
            'method': self.method,
            'signed_value': (None if self.signed_value is None
                             else str(self.signed_value)),
            'cross_checked': self.cross_checked,
        }


def solve_system(
    remainders: Sequence[int],
    moduli: Sequence[int],
    config: Optional[SolverConfig] = None,
) -> CrtSolution:
    """Solve one system according to config.

    Raises:
        CrtError subclasses from the underlying solver.
        AssertionError: cross_check is on and sympy disagrees.
    """
    config = config or SolverConfig()
    egcd = resolve_egcd(config.egcd)
    remainders, moduli = validate_system(remainders, moduli)

    if config.method == "garner":
        if config.require_coprime:
            check_pairwise_coprime(moduli)
        value = crt_reconstruct(remainders, moduli, egcd=egcd)
    else:
        value = chinese_remainder(remainders, moduli, egcd=egcd,
                                  require_coprime=config.require_coprime)

    M = product(moduli)
    solution = CrtSolution(value=value, modulus=M, method=config.method)
    if config.signed:
        solution.signed_value = centered(value, M)

    if config.cross_check:
        if not cross_check_solution(remainders, moduli, value):
            raise AssertionError(
                f"Cross-check failed: {config.method} solver gave {value}, "
                f"sympy disagrees for moduli {moduli}"
            )
        solution.cross_checked = True

    return solution
