"""
Unit tests for Garner-style reconstruction and signed decoding.
"""

import random
import unittest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from rns_crt.crt.garner import centered, crt_reconstruct, crt_reconstruct_signed
from rns_crt.crt.solver import chinese_remainder
from rns_crt.errors import (
    EmptyInputError, LengthMismatchError, InverseDoesNotExistError,
)
from rns_crt.rns.reference import generate_primes, product, rns_encode


class TestCrtReconstruct(unittest.TestCase):

    def setUp(self):
        self.primes = generate_primes(16)
        self.M = product(self.primes)
        self.rng = random.Random(123)

    def test_textbook(self):
        self.assertEqual(crt_reconstruct([2, 3, 2], [3, 5, 7]), 23)

    def test_round_trip(self):
        for _ in range(50):
            x = self.rng.randint(0, self.M - 1)
            self.assertEqual(crt_reconstruct(rns_encode(x, self.primes),
                                             self.primes), x)

    def test_edge_values(self):
        for x in [0, 1, self.M - 1]:
            self.assertEqual(crt_reconstruct(rns_encode(x, self.primes),
                                             self.primes), x)

    def test_wraps_mod_M(self):
        residues = rns_encode(self.M + 42, self.primes)
        self.assertEqual(crt_reconstruct(residues, self.primes), 42)

    def test_composite_moduli(self):
        moduli = [8, 9, 25, 49, 11]
        for _ in range(50):
            rems = [self.rng.randint(-1000, 1000) for _ in moduli]
            self.assertEqual(crt_reconstruct(rems, moduli),
                             chinese_remainder(rems, moduli))

    def test_unnormalized_first_residue(self):
        self.assertEqual(crt_reconstruct([-1, 3, 2], [3, 5, 7]), 23)

    def test_errors(self):
        with self.assertRaises(EmptyInputError):
            crt_reconstruct([], [])
        with self.assertRaises(LengthMismatchError):
            crt_reconstruct([1], [2, 3])
        with self.assertRaises(InverseDoesNotExistError) as cm:
            crt_reconstruct([1, 1, 1], [3, 5, 9])
        # running product 15 has no inverse mod 9
        self.assertEqual((cm.exception.a, cm.exception.m, cm.exception.gcd),
                         (15, 9, 3))


class TestSigned(unittest.TestCase):

    def test_centered_odd(self):
        self.assertEqual([centered(x, 7) for x in range(7)],
                         [0, 1, 2, 3, -3, -2, -1])

    def test_centered_even(self):
        self.assertEqual([centered(x, 4) for x in range(4)], [0, 1, -2, -1])

    def test_signed_round_trip(self):
        primes = generate_primes(8)
        half = product(primes) // 2
        rng = random.Random(456)
        for x in [-1, -100, -999999] + [rng.randint(-half, half - 1)
                                        for _ in range(20)]:
            residues = rns_encode(x, primes)
            self.assertEqual(crt_reconstruct_signed(residues, primes), x,
                             f"signed round-trip failed for x={x}")


if __name__ == "__main__":
    unittest.main()
