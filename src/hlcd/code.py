"""
Code Module

Parameters and the immutable result aggregate of a successful search.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .errors import ComputationOverflowError, InvalidBaseError, InvalidParametersError
from .field import CAPACITY, digits_of, is_valid_base, is_well_formed
from .lcd import gram_matrix, is_hermitian_lcd
from .weights import minimum_distance, weight_enumerator


@dataclass(frozen=True)
class CodeParameters:
    """
    Target parameters of a linear code.

    Parameters
    ----------
    n : int
        Block length, at most ``CAPACITY`` (32)
    k : int
        Dimension, 1 <= k <= n
    d : int
        Target minimum distance, d >= 1
    base : int, default=4
        Size of the field, 2 or 4

    Raises
    ------
    InvalidBaseError, InvalidParametersError, ComputationOverflowError
    """
    n: int
    k: int
    d: int
    base: int = 4

    def __post_init__(self):
        if not is_valid_base(self.base):
            raise InvalidBaseError(self.base)
        args = dict(n=self.n, k=self.k, d=self.d, base=self.base)
        if self.n > CAPACITY:
            raise ComputationOverflowError(
                f"n exceeds the packed vector capacity of {CAPACITY}", **args
            )
        if self.k < 1:
            raise InvalidParametersError("k must be at least 1", **args)
        if self.n < self.k:
            raise InvalidParametersError("n must be at least k", **args)
        if self.d < 1:
            raise InvalidParametersError("d must be at least 1", **args)

    def label(self, hermitian: bool = False) -> str:
        """File-friendly name, e.g. ``05_02_03H_4``."""
        h = "H" if hermitian else ""
        return f"{self.n:02d}_{self.k:02d}_{self.d:02d}{h}_{self.base}"

    def __str__(self):
        return f"({self.n}, {self.k}, {self.d})_{self.base}"


@dataclass(frozen=True)
class SearchStatistics:
    """Counters collected by one search run."""
    nodes_visited: int = 0
    candidates_examined: int = 0
    full_evaluations: int = 0
    seconds: float = 0.0
    worker: Optional[int] = None


@dataclass(frozen=True)
class Code:
    """
    A generator matrix found by the search, with its weight enumerator.

    Attributes
    ----------
    parameters : CodeParameters
        The parameters the search was run with
    generator_matrix : tuple of int
        k packed rows of length n
    weight_enumerator : tuple of int
        Number of codewords of each weight 0..n
    is_hermitian_lcd : bool
        Whether the Hermitian Gram matrix of the rows is nonsingular
    statistics : SearchStatistics, optional
        Counters of the run that produced the code (ignored by equality)
    """
    parameters: CodeParameters
    generator_matrix: Tuple[int, ...]
    weight_enumerator: Tuple[int, ...]
    is_hermitian_lcd: bool
    statistics: Optional[SearchStatistics] = field(default=None, compare=False)

    @classmethod
    def from_rows(cls, parameters: CodeParameters, rows,
                  statistics: Optional[SearchStatistics] = None) -> "Code":
        """Evaluate ``rows`` and build the aggregate."""
        rows = tuple(int(r) for r in rows)
        return cls(
            parameters=parameters,
            generator_matrix=rows,
            weight_enumerator=weight_enumerator(rows, parameters.n, parameters.base),
            is_hermitian_lcd=is_hermitian_lcd(rows, parameters.n, parameters.base),
            statistics=statistics,
        )

    @property
    def n(self) -> int:
        return self.parameters.n

    @property
    def k(self) -> int:
        return self.parameters.k

    @property
    def base(self) -> int:
        return self.parameters.base

    @property
    def minimum_distance(self) -> int:
        """Achieved minimum distance (may exceed the target d)."""
        return minimum_distance(self.weight_enumerator)

    def digits(self) -> List[List[int]]:
        """Rows of the generator matrix as digit lists."""
        return [digits_of(row, self.n) for row in self.generator_matrix]

    def gram_matrix(self) -> np.ndarray:
        return gram_matrix(self.generator_matrix)

    def verify(self) -> bool:
        """
        Re-check the code from scratch.

        Checks the shape of the matrix, that the enumerator matches the rows
        and sums to base^k with a single zero word, that the minimum distance
        reaches the target, and that the LCD flag is accurate.
        """
        p = self.parameters
        rows = self.generator_matrix
        if len(rows) != p.k:
            return False
        if not all(is_well_formed(row, p.n, p.base) for row in rows):
            return False
        enumerator = weight_enumerator(rows, p.n, p.base)
        if enumerator != tuple(self.weight_enumerator):
            return False
        if sum(enumerator) != p.base ** p.k or enumerator[0] != 1:
            return False
        if minimum_distance(enumerator) < p.d:
            return False
        return is_hermitian_lcd(rows, p.n, p.base) == self.is_hermitian_lcd
