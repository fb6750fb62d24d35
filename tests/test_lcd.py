"""
Unit tests for the Hermitian LCD validator
"""

import unittest
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hlcd.field import hermitian_inner_product, vector_from_digits as vec
from hlcd.lcd import can_reach_full_rank, determinant, gram_matrix, is_hermitian_lcd, rank


class TestGaussianElimination(unittest.TestCase):
    """Test cases for rank and determinant over GF(4)"""

    def test_rank(self):
        """Test full, deficient and zero ranks"""
        self.assertEqual(rank(np.eye(3, dtype=np.uint8)), 3)
        # second row is w times the first
        self.assertEqual(rank([[1, 2], [2, 3]]), 1)
        self.assertEqual(rank(np.zeros((2, 2), dtype=np.uint8)), 0)
        self.assertEqual(rank([[0, 1], [1, 0]]), 2)

    def test_determinant(self):
        """Test determinants against the 2x2 formula ad + bc"""
        self.assertEqual(determinant([[2, 0], [0, 3]]), 1)
        self.assertEqual(determinant([[0, 1], [1, 0]]), 1)
        # 1*1 + 2*3 = 1 + 1 = 0
        self.assertEqual(determinant([[1, 2], [3, 1]]), 0)
        self.assertEqual(determinant([[2, 1], [1, 1]]), 3)

    def test_determinant_requires_square(self):
        """Test that a non-square matrix is refused"""
        with self.assertRaises(ValueError):
            determinant([[1, 0, 0], [0, 1, 0]])


class TestHermitianLCD(unittest.TestCase):
    """Test cases for the Gram matrix test"""

    def test_gram_matrix_entries(self):
        """Test M[i][j] = <g_i, g_j>_H"""
        rows = [vec([1, 2, 0]), vec([0, 3, 1]), vec([1, 1, 1])]
        gram = gram_matrix(rows)
        self.assertEqual(gram.shape, (3, 3))
        for i in range(3):
            for j in range(3):
                self.assertEqual(gram[i, j], hermitian_inner_product(rows[i], rows[j]))

    def test_identity_gram_is_lcd(self):
        """Test that rows with an identity Gram matrix are accepted"""
        rows = [vec([1, 0, 0]), vec([0, 1, 0])]
        np.testing.assert_array_equal(gram_matrix(rows), np.eye(2, dtype=np.uint8))
        self.assertTrue(is_hermitian_lcd(rows, 3))

    def test_orthogonal_rows_rejected(self):
        """Test a row that is Hermitian orthogonal to every row"""
        # weight 2: self-orthogonal, and orthogonal to the second row
        rows = [vec([1, 1, 0]), vec([0, 0, 1])]
        self.assertEqual(rank(gram_matrix(rows)), 1)
        self.assertFalse(is_hermitian_lcd(rows, 3))

    def test_single_row(self):
        """Test that <g, g>_H is the parity of the weight of g"""
        self.assertTrue(is_hermitian_lcd([vec([1, 2, 3])], 3))
        self.assertFalse(is_hermitian_lcd([vec([1, 2, 0])], 3))

    def test_off_diagonal_gram(self):
        """Test self-orthogonal rows with a nonsingular Gram matrix"""
        rows = [vec([1, 0, 1]), vec([0, 1, 2])]
        gram = gram_matrix(rows)
        self.assertEqual(gram[0, 0], 0)
        self.assertEqual(gram[1, 1], 0)
        self.assertTrue(is_hermitian_lcd(rows, 3))

    def test_numpy_rows(self):
        """Test rows given as numpy integers, e.g. taken from a codeword array"""
        rows = np.array([vec([1, 0, 1]), vec([0, 1, 2])], dtype=np.uint64)
        self.assertTrue(is_hermitian_lcd(rows, 3))
        self.assertTrue(is_hermitian_lcd(list(rows), 3))
        self.assertFalse(is_hermitian_lcd(np.array([vec([1, 1, 0])], dtype=np.uint64), 3))

    def test_fails_closed(self):
        """Test that malformed input is reported as not LCD"""
        self.assertFalse(is_hermitian_lcd([], 3))
        self.assertFalse(is_hermitian_lcd([vec([1, 0, 0, 1])], 3))
        self.assertFalse(is_hermitian_lcd(["1 0 0"], 3))
        self.assertFalse(is_hermitian_lcd([-5], 3))
        self.assertFalse(is_hermitian_lcd([vec([1, 2, 0])], 3, base=2))

    def test_can_reach_full_rank(self):
        """Test the rank bound used to prune partial matrices"""
        self_orthogonal = [vec([1, 1, 0])]
        self.assertFalse(can_reach_full_rank(self_orthogonal, 1))
        self.assertTrue(can_reach_full_rank(self_orthogonal, 2))
        both_orthogonal = [vec([1, 1, 0, 0]), vec([0, 0, 1, 1])]
        self.assertFalse(can_reach_full_rank(both_orthogonal, 3))
        self.assertTrue(can_reach_full_rank(both_orthogonal, 4))


if __name__ == "__main__":
    unittest.main()
