"""
Hermitian LCD Validation

A code with generator matrix G is Hermitian LCD (its hull with the Hermitian
dual is trivial) iff the Gram matrix M[i][j] = <g_i, g_j>_H is nonsingular.
Rank and determinant are computed by Gaussian elimination over GF(4) on
small numpy matrices of field elements.
"""

from typing import Sequence, Tuple

import numpy as np

from .field import (
    CAPACITY,
    MUL_TABLE,
    field_inverse,
    field_multiply,
    hermitian_inner_product,
    is_well_formed,
)

_MUL = np.array(MUL_TABLE, dtype=np.uint8)


def gram_matrix(rows: Sequence[int]) -> np.ndarray:
    """
    Hermitian Gram matrix of a set of packed rows.

    Returns
    -------
    np.ndarray
        (k, k) uint8 array with entries in {0, 1, 2, 3}
    """
    k = len(rows)
    gram = np.zeros((k, k), dtype=np.uint8)
    for i in range(k):
        for j in range(k):
            gram[i, j] = hermitian_inner_product(rows[i], rows[j])
    return gram


def _eliminate(matrix) -> Tuple[int, int]:
    """Row-reduce a copy of ``matrix``; return (rank, product of pivots)."""
    a = np.array(matrix, dtype=np.uint8, copy=True)
    if a.ndim != 2 or a.size == 0:
        return 0, 0
    n_rows, n_cols = a.shape
    rank = 0
    pivot_product = 1
    for col in range(n_cols):
        candidates = np.nonzero(a[rank:, col])[0]
        if len(candidates) == 0:
            continue
        p = rank + int(candidates[0])
        if p != rank:
            a[[rank, p]] = a[[p, rank]]
        pivot = int(a[rank, col])
        pivot_product = field_multiply(pivot_product, pivot)
        a[rank] = _MUL[field_inverse(pivot)][a[rank]]
        for r in range(rank + 1, n_rows):
            factor = a[r, col]
            if factor:
                a[r] ^= _MUL[factor][a[rank]]
        rank += 1
        if rank == n_rows:
            break
    return rank, pivot_product


def rank(matrix) -> int:
    """Rank of a matrix of GF(4) elements."""
    return _eliminate(matrix)[0]


def determinant(matrix) -> int:
    """
    Determinant of a square matrix of GF(4) elements.

    Row swaps do not change the sign in characteristic 2, so the determinant
    is the product of the pivots, or 0 when the matrix is singular.
    """
    a = np.asarray(matrix)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"determinant needs a square matrix, got shape {a.shape}")
    r, pivots = _eliminate(a)
    return pivots if r == a.shape[0] else 0


def is_hermitian_lcd(rows: Sequence[int], length: int = CAPACITY, base: int = 4) -> bool:
    """
    Whether the rows generate a Hermitian LCD code.

    Malformed input (a row that is not a vector of ``length`` elements over
    the base, or no rows at all) is reported as not LCD.
    """
    rows = list(rows)
    if not rows:
        return False
    if not all(is_well_formed(row, length, base) for row in rows):
        return False
    rows = [int(row) for row in rows]
    return rank(gram_matrix(rows)) == len(rows)


def can_reach_full_rank(rows: Sequence[int], k: int) -> bool:
    """
    Whether a partial matrix can still be completed to a nonsingular Gram matrix.

    Appending one row (and so one row and one column of the Gram matrix)
    raises the rank by at most 2, so ``len(rows)`` rows whose Gram matrix has
    rank r can only reach rank k if ``r + 2 * (k - len(rows)) >= k``.
    """
    missing = k - len(rows)
    return rank(gram_matrix(rows)) + 2 * missing >= k
