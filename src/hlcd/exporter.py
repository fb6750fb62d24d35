"""
Code Exporter Module

Formats generator matrices and writes the artifacts of a found code:

- ``CodeObject_<label>.bin``: the pickled ``Code``
- ``GeneratorMatrix_*.tex``: the matrix in an ``optimalCodeMatrix`` environment
- ``WeightEnumerator_*.tex``: the weight enumerator polynomial
- ``Matlab_*.m``: a script rebuilding G, its Hermitian transpose and their
  product in GF(4), and cross-checking the determinant in Matlab
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
import pickle
from typing import Sequence, Union

import numpy as np

from .code import Code
from .field import conjugate, digits_of, hermitian, inner_product
from .lcd import determinant

PathLike = Union[str, Path]


class Style(Enum):
    """How field elements are rendered."""
    DECIMAL = "decimal"
    BINARY = "binary"
    QUATERNARY = "quaternary"
    LATEX = "latex"


_SYMBOLS = {
    Style.DECIMAL: ("0", "1", "2", "3"),
    Style.BINARY: ("00", "01", "10", "11"),
    Style.QUATERNARY: ("0", "1", "ω", "ω\u0304"),
    Style.LATEX: ("0", "1", r"\omega", r"\bar{\omega}"),
}


def format_vector(v: int, n: int, style: Style = Style.DECIMAL,
                  delimiter: str = " ", base: int = 4) -> str:
    """
    Render a packed vector, e.g. ``"1 0 2 3"`` or ``"1 & 0 & \\omega"``.

    Binary digits of a base-2 vector are rendered with one character in
    ``Style.BINARY``.
    """
    symbols = _SYMBOLS[style]
    if style is Style.BINARY and base == 2:
        symbols = ("0", "1")
    return delimiter.join(symbols[digit] for digit in digits_of(v, n))


def format_matrix(rows: Sequence[int], n: int, style: Style = Style.DECIMAL,
                  delimiter: str = " ", brackets: bool = True, base: int = 4) -> str:
    """Render a matrix one row per line, optionally with bracket glyphs."""
    lines = [format_vector(row, n, style, delimiter, base) for row in rows]
    if not brackets:
        return "\n".join(lines)
    if len(lines) == 1:
        return f"[{lines[0]}]"
    out = []
    for i, line in enumerate(lines):
        if i == 0:
            left, right = "⎡", "⎤"
        elif i == len(lines) - 1:
            left, right = "⎣", "⎦"
        else:
            left, right = "⎢", "⎥"
        out.append(f"{left}{line}{right}")
    return "\n".join(out)


@dataclass(frozen=True)
class ExportConfig:
    """
    Which artifacts ``export_code`` writes.

    Parameters
    ----------
    code_object : bool, default=True
        Pickled ``Code``
    latex_matrix : bool, default=True
        LaTeX generator matrix
    latex_weight_enumerator : bool, default=True
        LaTeX weight enumerator
    matlab : bool, default=True
        Matlab verification script
    matrix_label : str, default="G"
        Name of the matrix in the LaTeX environment
    variable : str, default="x"
        Variable of the weight enumerator polynomial
    code_id : str, default=""
        Appended to file names as ``_ID_<code_id>`` when not empty
    """
    code_object: bool = True
    latex_matrix: bool = True
    latex_weight_enumerator: bool = True
    matlab: bool = True
    matrix_label: str = "G"
    variable: str = "x"
    code_id: str = ""


def _file_stem(prefix: str, code: Code, code_id: str = "") -> str:
    p = code.parameters
    h = "H" if code.is_hermitian_lcd else ""
    stem = f"{prefix}_{p.n:02d}_{p.k:02d}_{p.d:02d}_{h}_{p.base}"
    if code_id:
        stem = f"{stem}_ID_{code_id}"
    return stem


def _timestamp() -> str:
    return datetime.now().strftime("%b %d, %Y %I:%M:%S %p")


def _header(what: str, code: Code, code_id: str) -> str:
    label = code.parameters.label(code.is_hermitian_lcd)
    if code_id:
        return f"% {what} {label} with id {code_id} is created at: {_timestamp()}"
    return f"% {what} {label} created at: {_timestamp()}"


def write_code_object(code: Code, directory: PathLike, code_id: str = "") -> Path:
    """Pickle ``code`` into ``directory``; returns the file path."""
    label = code.parameters.label(code.is_hermitian_lcd)
    name = f"CodeObject_{label}" + (f"_ID_{code_id}" if code_id else "")
    path = Path(directory) / f"{name}.bin"
    with open(path, "wb") as f:
        pickle.dump(code, f)
    return path


def read_code_object(path: PathLike) -> Code:
    """Load a code written by ``write_code_object``."""
    with open(path, "rb") as f:
        code = pickle.load(f)
    if not isinstance(code, Code):
        raise TypeError(f"{path} does not contain a Code object")
    return code


def latex_matrix(code: Code, matrix_label: str = "G", code_id: str = "") -> str:
    """Body of the ``optimalCodeMatrix`` environment."""
    p = code.parameters
    optional = f"[{code_id}]"
    lines = [
        _header("The code", code, code_id),
        rf"\begin{{optimalCodeMatrix}}{optional}{{{matrix_label}}}{{{p.n}}}{{{p.k}}}{{{p.d}}}",
    ]
    for row in code.generator_matrix:
        lines.append("\t" + format_vector(row, p.n, Style.LATEX, " & ", p.base) + r" \\")
    lines.append(r"\end{optimalCodeMatrix}")
    return "\n".join(lines) + "\n"


def latex_weight_enumerator(code: Code, variable: str = "x", code_id: str = "") -> str:
    """Weight enumerator as ``1\\,+\\, \\numprint{c}x^{w}\\,+\\,...``."""
    p = code.parameters
    terms = []
    for weight, count in enumerate(code.weight_enumerator):
        if count == 0:
            continue
        if weight == 0:
            terms.append(str(count))
        else:
            terms.append(rf" \numprint{{{count}}}{variable}^{{{weight}}}")
    lines = [
        _header("The weight enumerator of", code, code_id),
        rf"\begin{{weightEnumerator}}[{code_id}]{{{p.n}}}{{{p.k}}}{{{p.d}}}",
        "\t" + r"\,+\,".join(terms),
        r"\end{weightEnumerator}",
    ]
    return "\n".join(lines) + "\n"


def write_latex_matrix(code: Code, directory: PathLike, matrix_label: str = "G",
                       code_id: str = "") -> Path:
    path = Path(directory) / (_file_stem("GeneratorMatrix", code, code_id) + ".tex")
    path.write_text(latex_matrix(code, matrix_label, code_id), encoding="utf-8")
    return path


def write_latex_weight_enumerator(code: Code, directory: PathLike, variable: str = "x",
                                  code_id: str = "") -> Path:
    path = Path(directory) / (_file_stem("WeightEnumerator", code, code_id) + ".tex")
    path.write_text(latex_weight_enumerator(code, variable, code_id), encoding="utf-8")
    return path


def hermitian_transpose(rows: Sequence[int], n: int) -> np.ndarray:
    """Conjugate transpose of a packed matrix as an (n, k) array of digits."""
    conjugated = np.array([[conjugate(x) for x in digits_of(row, n)] for row in rows],
                          dtype=np.uint8)
    return conjugated.T.copy()


def gram_product(rows: Sequence[int]) -> np.ndarray:
    """G times its Hermitian transpose: entry (i, j) is sum(g_il * conj(g_jl))."""
    k = len(rows)
    product = np.zeros((k, k), dtype=np.uint8)
    for i in range(k):
        for j in range(k):
            product[i, j] = inner_product(rows[i], hermitian(rows[j]))
    return product


def _matlab_matrix(label: str, matrix: np.ndarray, m: int) -> str:
    body = ";\n".join(" ".join(str(int(x)) for x in row) for row in matrix)
    return f"{label} = gf([\n{body}\n], m);"


def matlab_script(code: Code, code_id: str = "") -> str:
    """Matlab source rebuilding the matrix and checking GPrime = G * G^H."""
    p = code.parameters
    g = np.array(code.digits(), dtype=np.uint8)
    ght = hermitian_transpose(code.generator_matrix, p.n)
    gprime = gram_product(code.generator_matrix)
    det = determinant(gprime)
    m = 1 if p.base == 2 else 2
    version = f" Version {code_id}" if code_id else ""

    lines = [
        f"% The code {p}{version} created at: {datetime.now().strftime('%Y-%m-%d_%I-%M-%S%p')}",
        "% It will test the validity of the code found.",
        f"% N    = {p.n}",
        f"% K    = {p.k}",
        f"% D    = {p.d}",
        f"% BASE = {p.base}",
        "",
        "clc",
        "tic",
        "fprintf(\"Run started %s\\n\\n\", datestr(now,'mmmm dd, yyyy HH:MM:SS.FFF AM'))",
        f"m = {m};",
        "",
        _matlab_matrix("G", g, m),
        "",
        _matlab_matrix("GHT", ght, m),
        "",
        _matlab_matrix("GPrime", gprime, m),
        "",
        "%" * 80,
        "GMatlab = G;",
        "GHTMatlab = transpose(GMatlab).^2;",
        "GPrimeMatlab = GMatlab * GHTMatlab;",
        f"detComputed = {det};",
        "detMatlab = det(GPrimeMatlab);",
        "if ~isequal(GPrime, GPrimeMatlab)",
        "\tdisp(\"Matlab Hermitian transpose product didn't match.\")",
        "end",
        "if ~isequal(detComputed, detMatlab.x)",
        "\tdisp(\"Determinant didn't match.\")",
        "end",
        "if isequal(detMatlab.x, 0)",
        "\tdisp(\"GPrime is singular: the code is not Hermitian LCD.\")",
        "end",
        "if ~isequal(rank(G), size(G, 1))",
        "\tdisp(\"The rank of G is not full.\")",
        "end",
        "",
        "totalTime = seconds(toc);",
        "totalTime.Format = 'hh:mm:ss.SSS';",
        "fprintf('Total time elapsed: %s\\n', char(totalTime));",
    ]
    return "\n".join(lines) + "\n"


def write_matlab_script(code: Code, directory: PathLike, code_id: str = "") -> Path:
    path = Path(directory) / (_file_stem("Matlab", code, code_id) + ".m")
    path.write_text(matlab_script(code, code_id), encoding="utf-8")
    return path


def export_code(code: Code, root: PathLike, config: ExportConfig = None,
                verbose: bool = False) -> Path:
    """
    Write the enabled artifacts into ``root/<label>/``.

    Returns
    -------
    Path
        The per-code directory
    """
    config = config or ExportConfig()
    directory = Path(root) / code.parameters.label(code.is_hermitian_lcd)
    directory.mkdir(parents=True, exist_ok=True)

    written = []
    if config.code_object:
        written.append(write_code_object(code, directory, config.code_id))
    if config.latex_matrix:
        written.append(write_latex_matrix(code, directory, config.matrix_label, config.code_id))
    if config.latex_weight_enumerator:
        written.append(write_latex_weight_enumerator(code, directory, config.variable, config.code_id))
    if config.matlab:
        written.append(write_matlab_script(code, directory, config.code_id))

    if verbose:
        for path in written:
            print(path)
    return directory
