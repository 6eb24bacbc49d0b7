"""
Solver configuration and YAML system files.

A config file looks like::

    solver:
      method: basis          # or garner
      egcd: reference        # or sympy
      require_coprime: false
      signed: false
      cross_check: true
      output_dir: outputs/example

    systems:
      - name: textbook
        remainders: [2, 3, 2]
        moduli: [3, 5, 7]
      - name: big
        remainders: ["0x1f", "12345678901234567890"]
        moduli: ["2305843009213693951", 1000003]

Integers may be YAML ints or strings (decimal, or 0x/0o/0b prefixed).
"""

import hashlib
import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

METHODS = ("basis", "garner")
EGCD_PROVIDERS = ("reference", "sympy")


@dataclass
class SolverConfig:
    """Options for solve_system and the solve_crt script."""
    method: str = "basis"           # basis | garner
    egcd: str = "reference"         # reference | sympy
    require_coprime: bool = False   # O(n^2) pairwise gcd pre-check
    signed: bool = False            # also report centered value
    cross_check: bool = False       # verify against sympy
    output_dir: Optional[str] = None

    def __post_init__(self):
        if self.method not in METHODS:
            raise ValueError(
                f"Unknown method {self.method!r}; expected one of {METHODS}"
            )
        if self.egcd not in EGCD_PROVIDERS:
            raise ValueError(
                f"Unknown egcd provider {self.egcd!r}; "
                f"expected one of {EGCD_PROVIDERS}"
            )

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> "SolverConfig":
        d = dict(d or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown solver option(s): {', '.join(unknown)}")
        return cls(**d)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CongruenceSystem:
    """One named system x = remainders[i] (mod moduli[i])."""
    name: str
    remainders: List[int]
    moduli: List[int]


def parse_int(value: Union[int, str]) -> int:
    """Accept a YAML int or an int literal string ("123", "0xff")."""
    if isinstance(value, bool):
        raise ValueError(f"Expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 0)
        except ValueError:
            raise ValueError(f"Not an integer literal: {value!r}") from None
    raise ValueError(f"Expected an integer, got {type(value).__name__}")


def parse_systems(raw: Optional[List[Dict[str, Any]]]) -> List[CongruenceSystem]:
    if raw is not None and not isinstance(raw, list):
        raise ValueError("systems must be a list")
    systems = []
    for idx, entry in enumerate(raw or []):
        if not isinstance(entry, dict):
            raise ValueError(f"systems[{idx}] must be a mapping")
        for key in ("remainders", "moduli"):
            if not isinstance(entry.get(key), list):
                raise ValueError(f"systems[{idx}].{key} must be a list")
        systems.append(CongruenceSystem(
            name=str(entry.get("name", f"system_{idx}")),
            remainders=[parse_int(v) for v in entry["remainders"]],
            moduli=[parse_int(v) for v in entry["moduli"]],
        ))
    return systems


def config_from_dict(
    raw: Optional[Dict[str, Any]],
) -> Tuple[SolverConfig, List[CongruenceSystem]]:
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ValueError("Config root must be a mapping")
    solver = raw.get("solver")
    if solver is not None and not isinstance(solver, dict):
        raise ValueError("solver must be a mapping")
    return SolverConfig.from_dict(solver), parse_systems(raw.get("systems"))


def load_config(
    config_path: Union[str, Path],
) -> Tuple[SolverConfig, List[CongruenceSystem]]:
    """Load YAML configuration."""
    with open(config_path, 'r') as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {config_path}: {e}") from e
    return config_from_dict(raw)


def config_hash(config: Dict[str, Any]) -> str:
    """Deterministic hash of config dict."""
    s = json.dumps(config, sort_keys=True, default=str)
    return hashlib.sha256(s.encode()).hexdigest()[:16]
