"""
Unit tests for the weight enumerator
"""

import unittest
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hlcd.field import hamming_weight, scalar_multiply, vector_from_digits as vec
from hlcd.weights import (
    codewords,
    coset_words,
    extend_span,
    minimum_distance,
    weight_distribution,
    weight_enumerator,
)


class TestWeightEnumerator(unittest.TestCase):
    """Test cases for the exhaustive evaluator"""

    def test_repetition_code(self):
        """Test the [3, 1, 3] repetition code over GF(4)"""
        enumerator = weight_enumerator([vec([1, 1, 1])], 3)
        self.assertEqual(enumerator, (1, 0, 0, 3))
        self.assertEqual(minimum_distance(enumerator), 3)

    def test_binary_repetition_code(self):
        """Test the binary [3, 1, 3] code"""
        self.assertEqual(weight_enumerator([vec([1, 1, 1])], 3, base=2), (1, 0, 0, 1))

    def test_mds_code(self):
        """Test a [4, 2, 3] MDS code: A3 = 12, A4 = 3"""
        rows = [vec([1, 0, 1, 1]), vec([0, 1, 1, 2])]
        enumerator = weight_enumerator(rows, 4)
        self.assertEqual(enumerator, (1, 0, 0, 12, 3))
        self.assertEqual(minimum_distance(enumerator), 3)

    def test_counts_sum_to_size(self):
        """Test that the counts sum to base^k with a single zero word"""
        rows = [vec([1, 0, 0, 2, 3]), vec([0, 1, 0, 1, 1]), vec([0, 0, 1, 3, 2])]
        enumerator = weight_enumerator(rows, 5)
        self.assertEqual(sum(enumerator), 4 ** 3)
        self.assertEqual(enumerator[0], 1)
        binary = weight_enumerator([vec([1, 0, 1]), vec([0, 1, 1])], 3, base=2)
        self.assertEqual(binary, (1, 0, 3, 0))

    def test_dependent_rows(self):
        """Test that a vanishing combination is visible in the enumerator"""
        rows = [vec([1, 1, 0]), vec([2, 2, 0])]
        enumerator = weight_enumerator(rows, 3)
        self.assertEqual(enumerator[0], 4)
        self.assertEqual(minimum_distance(enumerator), 0)

    def test_codeword_order(self):
        """Test that index sum(c_i * 4^i) holds sum(c_i * g_i)"""
        r0, r1 = vec([1, 0, 2]), vec([0, 1, 3])
        words = codewords([r0, r1])
        self.assertEqual(len(words), 16)
        self.assertEqual(int(words[1]), r0)
        self.assertEqual(int(words[2]), scalar_multiply(r0, 2))
        self.assertEqual(int(words[4]), r1)
        self.assertEqual(int(words[3 + 4 * 2]), scalar_multiply(r0, 3) ^ scalar_multiply(r1, 2))

    def test_coset_words(self):
        """Test the words gained by adding one row"""
        span = codewords([vec([1, 0, 0])])
        coset = coset_words(span, vec([0, 1, 1]))
        self.assertEqual(len(coset), 12)
        self.assertTrue(coset.all())
        extended = extend_span(span, vec([0, 1, 1]))
        np.testing.assert_array_equal(extended, codewords([vec([1, 0, 0]), vec([0, 1, 1])]))

    def test_weight_distribution(self):
        """Test the histogram of an explicit word list"""
        words = np.array([0, vec([1, 0, 0]), vec([1, 1, 0]), vec([3, 2, 1])], dtype=np.uint64)
        self.assertEqual(list(weight_distribution(words, 3)), [1, 1, 1, 1])
        self.assertEqual([int(w) for w in hamming_weight(words)], [0, 1, 2, 3])

    def test_minimum_distance_without_codewords(self):
        """Test an enumerator with only the zero word"""
        self.assertEqual(minimum_distance((1, 0, 0)), 0)


if __name__ == "__main__":
    unittest.main()
