#!/usr/bin/env python3
"""
Validation script for rns_crt.

Runs a sequence of checks:
1. Modular inverse (known values, negative inputs, failure)
2. CRT concrete scenarios and input validation
3. Random round trips: encode -> solve for basis, Garner and CrtContext
4. Cross-check against sympy

Usage:
    python scripts/validate_crt.py
"""

import os
import random
import sys
import traceback
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


def section(name: str):
    print(f"\n{'='*60}")
    print(f"  {name}")
    print(f"{'='*60}")


def check(name: str, passed: bool, detail: str = ""):
    status = "PASS" if passed else "FAIL"
    mark = "✓" if passed else "✗"
    print(f"  [{status}] {mark} {name}" + (f" -- {detail}" if detail else ""))
    return passed


def raises(exc_type, fn, *args) -> bool:
    try:
        fn(*args)
    except exc_type:
        return True
    return False


def main():
    print("rns_crt Validation Suite")
    print(f"Python: {sys.version}")
    print(f"CWD: {os.getcwd()}")

    results = []

    from rns_crt.errors import (
        EmptyInputError, LengthMismatchError, InverseDoesNotExistError,
    )
    from rns_crt.rns.reference import (
        mod_inverse, generate_primes, rns_encode, product,
    )
    from rns_crt.rns.context import CrtContext
    from rns_crt.crt.solver import chinese_remainder
    from rns_crt.crt.garner import crt_reconstruct

    # ---------------------------------------------------------------
    # 1. Modular inverse
    # ---------------------------------------------------------------
    section("1. Modular Inverse")

    try:
        results.append(check("mod_inverse(3, 11) == 4", mod_inverse(3, 11) == 4))
        results.append(check("mod_inverse(7, 26) == 15", mod_inverse(7, 26) == 15))
        results.append(check("mod_inverse(-3, 11) == mod_inverse(8, 11)",
                             mod_inverse(-3, 11) == mod_inverse(8, 11)))
        results.append(check("mod_inverse(4, 6) raises",
                             raises(InverseDoesNotExistError, mod_inverse, 4, 6)))
    except Exception as e:
        results.append(check("Modular inverse", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 2. CRT scenarios
    # ---------------------------------------------------------------
    section("2. CRT Scenarios")

    try:
        x = chinese_remainder([2, 3, 2], [3, 5, 7])
        results.append(check("[2,3,2] mod [3,5,7] == 23", x == 23, f"got {x}"))
        results.append(check("empty input raises",
                             raises(EmptyInputError, chinese_remainder, [], [])))
        results.append(check("length mismatch raises",
                             raises(LengthMismatchError, chinese_remainder,
                                    [1], [2, 3])))
        results.append(check("non-coprime moduli raise",
                             raises(InverseDoesNotExistError, chinese_remainder,
                                    [2, 3], [4, 6])))
        x = chinese_remainder([-1, -1, -1], [3, 5, 7])
        results.append(check("negative remainders normalize", x == 104,
                             f"got {x}"))
    except Exception as e:
        results.append(check("CRT scenarios", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 3. Round trips
    # ---------------------------------------------------------------
    section("3. Encode -> Solve Roundtrip")

    try:
        rng = random.Random(42)
        primes = generate_primes(16)
        M = product(primes)
        ctx = CrtContext(primes)
        all_ok = True
        for _ in range(50):
            x = rng.randint(0, M - 1)
            residues = rns_encode(x, primes)
            got = (chinese_remainder(residues, primes),
                   crt_reconstruct(residues, primes),
                   ctx.solve(residues))
            if got != (x, x, x):
                all_ok = False
                print(f"    FAIL: x={x}, got {got}")
        results.append(check("Roundtrip (50 values, 16 primes)", all_ok))
    except Exception as e:
        results.append(check("Roundtrip", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 4. sympy cross-check
    # ---------------------------------------------------------------
    section("4. sympy Cross-Check")

    try:
        from rns_crt.crt.verify import sympy_crt

        rng = random.Random(7)
        moduli = [3, 5, 7, 11, 13, 17, 19, 23]
        all_ok = True
        for _ in range(50):
            rems = [rng.randint(-1000, 1000) for _ in moduli]
            if chinese_remainder(rems, moduli) != sympy_crt(rems, moduli):
                all_ok = False
        results.append(check("Agrees with sympy.ntheory.modular.crt", all_ok))
    except Exception as e:
        results.append(check("sympy cross-check", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # Summary
    # ---------------------------------------------------------------
    n_pass = sum(1 for r in results if r)
    n_total = len(results)
    section(f"Summary: {n_pass}/{n_total} checks passed")

    return 0 if n_pass == n_total else 1


if __name__ == "__main__":
    sys.exit(main())
