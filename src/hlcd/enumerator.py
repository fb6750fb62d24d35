"""
Row Enumerator Module

Produces candidate rows of a fixed length in ascending packed order. The
enumeration is lazy and can be resumed from any emitted candidate, which is
how the search backtracks to "the next untried row after X" at a depth.
"""

from typing import Iterator, Optional

from .field import check_base, hamming_weight


def _spread(index: int) -> int:
    """Place bit j of ``index`` on bit 2j (binary digits in GF(4) packing)."""
    v = 0
    bit = 0
    while index:
        if index & 1:
            v |= 1 << (2 * bit)
        index >>= 1
        bit += 1
    return v


def _compact(vector: int) -> int:
    """Inverse of ``_spread`` for vectors with binary digits."""
    index = 0
    bit = 0
    while vector:
        if vector & 1:
            index |= 1 << bit
        vector >>= 2
        bit += 1
    return index


class RowEnumerator:
    """
    Enumerates vectors of ``length`` elements over GF(``base``).

    Parameters
    ----------
    length : int
        Number of elements per candidate (may be 0)
    base : int, default=4
        2 or 4
    restrict : bool, default=False
        Only emit normalized vectors, i.e. vectors whose leftmost nonzero
        element is 1. Each nonzero vector is a scalar multiple of exactly one
        normalized vector, so scalar multiples are never proposed twice.
    min_weight : int, default=0
        Skip candidates of smaller Hamming weight

    Candidates are emitted in strictly ascending order of their packed value.
    """

    def __init__(self, length: int, base: int = 4, restrict: bool = False,
                 min_weight: int = 0):
        self.length = length
        self.base = check_base(base)
        self.restrict = restrict
        self.min_weight = min_weight
        # Size of the index space: the vector with index i is the i-th legal
        # digit string in lexicographic order
        self.size = base ** length

    def _to_vector(self, index: int) -> int:
        return index if self.base == 4 else _spread(index)

    def _to_index(self, vector: int) -> int:
        return vector if self.base == 4 else _compact(vector)

    def _first_legal_index(self, index: int) -> Optional[int]:
        """Smallest index >= ``index`` allowed by the normalization rule."""
        if self.restrict and self.base == 4 and index > 0:
            lead_position = (index.bit_length() - 1) // 2
            if index >> (2 * lead_position) != 1:
                # leading digit is w or w^2: jump to the next leading 1
                index = 1 << (2 * (lead_position + 1))
        if index >= self.size:
            return None
        return index

    def next_candidate(self, cursor: Optional[int] = None,
                       inclusive: bool = False) -> Optional[int]:
        """
        Return the first candidate after ``cursor``.

        Parameters
        ----------
        cursor : int, optional
            A previously emitted candidate. ``None`` starts from the beginning.
        inclusive : bool, default=False
            Return ``cursor`` itself when it is a candidate.

        Returns
        -------
        int or None
            The next candidate, or ``None`` when the enumeration is exhausted
        """
        if cursor is None:
            index = 0
        else:
            index = self._to_index(cursor) + (0 if inclusive else 1)

        while True:
            index = self._first_legal_index(index)
            if index is None:
                return None
            vector = self._to_vector(index)
            if hamming_weight(vector) >= self.min_weight:
                return vector
            index += 1

    def iter_from(self, cursor: Optional[int] = None,
                  inclusive: bool = False) -> Iterator[int]:
        """Lazily yield every candidate after (or at) ``cursor``."""
        candidate = self.next_candidate(cursor, inclusive)
        while candidate is not None:
            yield candidate
            candidate = self.next_candidate(candidate)

    def __iter__(self) -> Iterator[int]:
        return self.iter_from()

    def count(self) -> int:
        """Total number of candidates."""
        return sum(1 for _ in self)

    def __repr__(self):
        return (f"RowEnumerator(length={self.length}, base={self.base}, "
                f"restrict={self.restrict}, min_weight={self.min_weight})")
