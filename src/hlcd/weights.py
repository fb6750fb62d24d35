"""
Weight Enumerator Module

Exhaustive evaluation of the code spanned by a generator matrix. All
base^k codewords are held in one ``numpy.uint64`` array and their Hamming
weights are computed in bulk with the packed field arithmetic.

Codeword ordering: after adding row i, the array is
``[S, S + 1*g_i, S + w*g_i, S + w^2*g_i]`` where S is the span of the
previous rows, so the codeword at index ``sum(c_i * base^i)`` is
``sum(c_i * g_i)``.
"""

from typing import Sequence, Tuple

import numpy as np

from .field import hamming_weight, scalar_multiples


def coset_words(words: np.ndarray, row: int, base: int = 4) -> np.ndarray:
    """
    The codewords gained by adding ``row`` to a span.

    Parameters
    ----------
    words : np.ndarray
        uint64 array holding every codeword of the current span
    row : int
        Packed row to add
    base : int, default=4
        2 or 4

    Returns
    -------
    np.ndarray
        ``words + c * row`` for every nonzero scalar c, concatenated by c
    """
    multiples = scalar_multiples(row, base)[1:]
    return np.concatenate([words ^ np.uint64(m) for m in multiples])


def extend_span(words: np.ndarray, row: int, base: int = 4) -> np.ndarray:
    """All codewords of the span of the current rows plus ``row``."""
    return np.concatenate([words, coset_words(words, row, base)])


def codewords(rows: Sequence[int], base: int = 4) -> np.ndarray:
    """All base^k linear combinations of ``rows``, including the zero word."""
    words = np.zeros(1, dtype=np.uint64)
    for row in rows:
        words = extend_span(words, row, base)
    return words


def word_weights(words: np.ndarray) -> np.ndarray:
    """Hamming weight of every word."""
    return hamming_weight(words).astype(np.int64)


def weight_distribution(words: np.ndarray, n: int) -> np.ndarray:
    """Histogram of weights 0..n over ``words``."""
    return np.bincount(word_weights(words), minlength=n + 1)


def weight_enumerator(rows: Sequence[int], n: int, base: int = 4) -> Tuple[int, ...]:
    """
    Weight enumerator of the code spanned by ``rows``.

    Returns
    -------
    tuple of int
        Entry w is the number of codewords of weight w (w = 0..n); the
        counts sum to base^k
    """
    return tuple(int(c) for c in weight_distribution(codewords(rows, base), n))


def minimum_distance(enumerator: Sequence[int]) -> int:
    """
    Smallest positive weight with a nonzero count.

    The zero word is not considered. Returns 0 when the enumerator records
    no nonzero codeword, or when a nonzero combination of the rows vanished
    (more than one word of weight 0, i.e. dependent rows).
    """
    if enumerator[0] != 1:
        return 0
    for weight in range(1, len(enumerator)):
        if enumerator[weight]:
            return weight
    return 0
