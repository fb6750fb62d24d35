"""
HLCD: Hermitian LCD Code Search over GF(4)

A backtracking search for generator matrices of linear codes over GF(4)
(and GF(2)) with prescribed length, dimension and minimum distance,
optionally requiring the code to be Hermitian linear complementary dual.
"""

__version__ = "0.1.0"

from .code import Code, CodeParameters, SearchStatistics
from .search import CodeSearch, ValidatorConfig, find_code
from .enumerator import RowEnumerator
from .errors import (
    ComputationOverflowError,
    HLCDError,
    InvalidBaseError,
    InvalidConfigurationError,
    InvalidDigitError,
    InvalidParametersError,
    ParameterFileError,
    SearchExhausted,
)

__all__ = [
    "Code",
    "CodeParameters",
    "SearchStatistics",
    "CodeSearch",
    "ValidatorConfig",
    "find_code",
    "RowEnumerator",
    "HLCDError",
    "InvalidBaseError",
    "InvalidDigitError",
    "InvalidConfigurationError",
    "InvalidParametersError",
    "ComputationOverflowError",
    "ParameterFileError",
    "SearchExhausted",
]
