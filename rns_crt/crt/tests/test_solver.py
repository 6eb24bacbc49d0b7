"""
Unit tests for the basis-construction CRT solver.

Concrete scenarios, input validation, and randomized checks of the
congruence, range and canonical-residue properties.
"""

import math
import random
import unittest
import sys
import os

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from rns_crt.crt.solver import (
    chinese_remainder, check_pairwise_coprime, validate_system,
)
from rns_crt.crt.verify import sympy_crt, sympy_extended_gcd
from rns_crt.errors import (
    EmptyInputError, LengthMismatchError, InverseDoesNotExistError,
    NotPairwiseCoprimeError,
)
from rns_crt.rns.reference import generate_primes, normalize, product


def random_coprime_moduli(rng, n, hi=10**9):
    moduli = []
    while len(moduli) < n:
        m = rng.randint(2, hi)
        if all(math.gcd(m, other) == 1 for other in moduli):
            moduli.append(m)
    return moduli


class TestScenarios(unittest.TestCase):

    def test_textbook(self):
        self.assertEqual(chinese_remainder([2, 3, 2], [3, 5, 7]), 23)

    def test_empty(self):
        with self.assertRaises(EmptyInputError):
            chinese_remainder([], [])

    def test_one_side_empty(self):
        with self.assertRaises(EmptyInputError) as cm:
            chinese_remainder([], [3])
        self.assertEqual((cm.exception.n_remainders, cm.exception.n_moduli),
                         (0, 1))

    def test_length_mismatch(self):
        with self.assertRaises(LengthMismatchError) as cm:
            chinese_remainder([1], [2, 3])
        self.assertEqual(cm.exception.n_remainders, 1)
        self.assertEqual(cm.exception.n_moduli, 2)

    def test_not_coprime(self):
        with self.assertRaises(InverseDoesNotExistError) as cm:
            chinese_remainder([2, 3], [4, 6])
        # first term: p_0 = 24 / 4 = 6, no inverse mod 4
        self.assertEqual((cm.exception.a, cm.exception.m, cm.exception.gcd),
                         (6, 4, 2))

    def test_non_positive_modulus(self):
        for moduli in ([3, 0, 7], [3, -5, 7]):
            with self.assertRaises(InverseDoesNotExistError) as cm:
                chinese_remainder([1, 1, 1], moduli)
            self.assertEqual(cm.exception.m, moduli[1])
            self.assertEqual(cm.exception.a, 21)

    def test_all_negative(self):
        x = chinese_remainder([-1, -2, -3], [3, 5, 7])
        self.assertTrue(0 <= x < 105)
        for r, m in zip([-1, -2, -3], [3, 5, 7]):
            self.assertEqual((x - r) % m, 0)

    def test_single_congruence(self):
        for r, m in [(5, 7), (-5, 7), (0, 1), (123, 1), (10**40, 97)]:
            self.assertEqual(chinese_remainder([r], [m]), normalize(r, m))

    def test_accepts_generators_and_tuples(self):
        self.assertEqual(chinese_remainder((r for r in [2, 3, 2]), (3, 5, 7)), 23)

    def test_rsa_style_recombination(self):
        p, q = 2**61 - 1, 2**31 - 1
        n = p * q
        x = 0xDEADBEEFCAFEBABE1234567
        self.assertEqual(chinese_remainder([x % p, x % q], [p, q]), x % n)


class TestProperties(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(42)

    def test_correctness_and_range(self):
        for _ in range(200):
            n = self.rng.randint(1, 8)
            moduli = random_coprime_moduli(self.rng, n)
            rems = [self.rng.randint(-10**15, 10**15) for _ in moduli]
            x = chinese_remainder(rems, moduli)
            self.assertTrue(0 <= x < product(moduli))
            for r, m in zip(rems, moduli):
                self.assertEqual((x - r) % m, 0)

    def test_invariant_under_canonical_residues(self):
        for _ in range(100):
            moduli = random_coprime_moduli(self.rng, 5)
            rems = [self.rng.randint(-10**20, 10**20) for _ in moduli]
            canon = [r % m for r, m in zip(rems, moduli)]
            self.assertEqual(chinese_remainder(rems, moduli),
                             chinese_remainder(canon, moduli))

    def test_large_prime_system(self):
        primes = generate_primes(64)
        M = product(primes)
        x = self.rng.randint(0, M - 1)
        self.assertEqual(chinese_remainder([x % p for p in primes], primes), x)

    def test_agrees_with_sympy(self):
        for _ in range(100):
            moduli = random_coprime_moduli(self.rng, 4, hi=10**6)
            rems = [self.rng.randint(-10**6, 10**6) for _ in moduli]
            self.assertEqual(chinese_remainder(rems, moduli),
                             sympy_crt(rems, moduli))

    def test_sympy_provider_same_result(self):
        for _ in range(50):
            moduli = random_coprime_moduli(self.rng, 4)
            rems = [self.rng.randint(0, 10**9) for _ in moduli]
            self.assertEqual(
                chinese_remainder(rems, moduli, egcd=sympy_extended_gcd),
                chinese_remainder(rems, moduli),
            )

    def test_deterministic(self):
        moduli = random_coprime_moduli(self.rng, 6)
        rems = [self.rng.randint(0, 10**9) for _ in moduli]
        self.assertEqual(chinese_remainder(rems, moduli),
                         chinese_remainder(list(rems), list(moduli)))


class TestPairwiseCheck(unittest.TestCase):

    def test_reports_first_bad_pair(self):
        with self.assertRaises(NotPairwiseCoprimeError) as cm:
            check_pairwise_coprime([7, 10, 11, 15])
        err = cm.exception
        self.assertEqual((err.i, err.j), (1, 3))
        self.assertEqual((err.modulus_i, err.modulus_j, err.gcd), (10, 15, 5))
        self.assertIn("moduli[1] = 10", str(err))

    def test_is_inverse_error(self):
        with self.assertRaises(InverseDoesNotExistError):
            chinese_remainder([2, 3], [4, 6], require_coprime=True)

    def test_same_result_when_coprime(self):
        rng = random.Random(3)
        for _ in range(50):
            moduli = random_coprime_moduli(rng, 5)
            rems = [rng.randint(-10**9, 10**9) for _ in moduli]
            self.assertEqual(
                chinese_remainder(rems, moduli, require_coprime=True),
                chinese_remainder(rems, moduli),
            )

    def test_validate_system_coerces(self):
        rems, mods = validate_system((1, 2), [3, 5])
        self.assertEqual((rems, mods), ([1, 2], [3, 5]))

    def test_rejects_float_entries(self):
        # 2.9 must not be truncated to 2
        with self.assertRaises(TypeError):
            chinese_remainder([2.9], [3])
        with self.assertRaises(TypeError):
            chinese_remainder([2], [3.0])

    def test_accepts_numpy_integers(self):
        rems = np.array([2, 3, 2], dtype=np.int64)
        mods = np.array([3, 5, 7], dtype=np.int64)
        self.assertEqual(chinese_remainder(rems, mods), 23)
        self.assertEqual(validate_system(rems, mods), ([2, 3, 2], [3, 5, 7]))


if __name__ == "__main__":
    unittest.main()
