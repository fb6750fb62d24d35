"""
Parameter List Runner

Searches every parameter set of a list file, exports the codes found and
keeps a summary file with one line per parameter set.
"""

from datetime import datetime
from pathlib import Path
import time
from typing import Any, Dict, List, Optional, Sequence, Union

from .code import Code, CodeParameters
from .exporter import ExportConfig, export_code, format_matrix
from .parameters import load_parameters
from .search import ValidatorConfig, find_code


def summarize(code: Optional[Code]) -> str:
    """Summary verdict of one search: Valid, INVALID! or EXHAUSTED."""
    if code is None:
        return "EXHAUSTED"
    return "Valid" if code.verify() else "INVALID!"


def run_parameters(
    parameters: Sequence[CodeParameters],
    output_dir: Union[str, Path],
    config: ValidatorConfig = None,
    export: Optional[ExportConfig] = None,
    verbose: bool = True,
) -> List[Dict[str, Any]]:
    """
    Search each parameter set in turn.

    Parameters
    ----------
    parameters : sequence of CodeParameters
        Codes to look for
    output_dir : str or Path
        Directory receiving the summary file and one directory per code found
    config : ValidatorConfig, optional
        Search policy. If None, uses the defaults.
    export : ExportConfig, optional
        Artifacts to write for each code found. If None, uses the defaults.
    verbose : bool, default=True
        Whether to print progress information

    Returns
    -------
    list of dict
        One ``{"parameters", "status", "code", "seconds"}`` entry per set
    """
    config = config or ValidatorConfig()
    export = export or ExportConfig()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d_%I-%M-%S-%f%p")
    summary_path = output_dir / f"summary{timestamp}.txt"

    if verbose:
        print(f"{'Parameters':<16} | {'Status':<10} | {'Min dist':<8} | {'Time (s)':<10}")
        print("-" * 55)

    results = []
    with open(summary_path, "w", encoding="utf-8") as summary:
        for p in parameters:
            start_time = time.time()
            code = find_code(p, config)
            elapsed = time.time() - start_time
            status = summarize(code)

            if code is not None:
                export_code(code, output_dir, export)

            label = p.label(config.require_hermitian_lcd)
            summary.write(f"{label} //{status}\n")
            summary.flush()

            if verbose:
                achieved = code.minimum_distance if code is not None else "-"
                print(f"{str(p):<16} | {status:<10} | {achieved!s:<8} | {elapsed:<10.2f}")
                if code is not None:
                    print(format_matrix(code.generator_matrix, p.n, base=p.base))

            results.append({
                "parameters": p,
                "status": status,
                "code": code,
                "seconds": float(elapsed),
            })

    if verbose:
        print(f"\nSummary written to {summary_path}")
    return results


def run_parameter_list(
    path: Union[str, Path],
    output_dir: Union[str, Path],
    config: ValidatorConfig = None,
    offset: int = 0,
    export: Optional[ExportConfig] = None,
    verbose: bool = True,
) -> List[Dict[str, Any]]:
    """Load a parameter list file and run ``run_parameters`` on it."""
    parameters = load_parameters(path, offset=offset)
    if verbose:
        print(f"Loaded {len(parameters)} parameter sets from {path}")
    return run_parameters(parameters, output_dir, config=config, export=export, verbose=verbose)
