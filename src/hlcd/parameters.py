"""
Parameter List Loader

Reads lists of code parameters, one ``n, k, d`` record per line:

    // comment lines start with two slashes
    5, 2, 3
    7, 3, 4 /from the table in chapter 4

Anything after a ``/`` in a field is a note and is ignored. The base is 4
unless specified otherwise.
"""

from pathlib import Path
from typing import Iterable, List, Union

from .code import CodeParameters
from .errors import HLCDError, ParameterFileError


def _parse_field(text: str) -> int:
    value = text.strip()
    slash = value.find("/")
    if slash != -1:
        value = value[:slash].strip()
    return int(value)


def parse_parameters(lines: Iterable[str], offset: int = 0, base: int = 4,
                     source: str = "<string>") -> List[CodeParameters]:
    """
    Parse parameter records from an iterable of lines.

    Parameters
    ----------
    lines : iterable of str
        Lines of a parameter list
    offset : int, default=0
        Added to every d (e.g. 1 to look for codes one better than listed)
    base : int, default=4
        Base of every code
    source : str
        Name used in error messages

    Raises
    ------
    ParameterFileError
        On the first malformed line
    """
    parameters = []
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("//"):
            continue
        fields = stripped.split(",")
        if len(fields) != 3:
            raise ParameterFileError(source, line_number, line.rstrip("\n"),
                                     f"expected 3 comma-separated fields, got {len(fields)}")
        try:
            n, k, d = (_parse_field(f) for f in fields)
            parameters.append(CodeParameters(n, k, d + offset, base))
        except HLCDError as e:
            raise ParameterFileError(source, line_number, line.rstrip("\n"), str(e)) from e
        except ValueError as e:
            raise ParameterFileError(source, line_number, line.rstrip("\n"),
                                     "fields must be integers") from e
    return parameters


def load_parameters(path: Union[str, Path], offset: int = 0, base: int = 4) -> List[CodeParameters]:
    """Read a parameter list file."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        return parse_parameters(f, offset=offset, base=base, source=str(path))
