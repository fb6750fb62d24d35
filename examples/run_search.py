#!/usr/bin/env python3
"""
Example script: search for one code

Looks for a generator matrix with the given (n, k, d) over GF(4) (or GF(2)),
prints it with its weight enumerator and optionally exports it.
"""

import sys
import argparse
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hlcd import CodeParameters, ValidatorConfig, find_code
from hlcd.exporter import ExportConfig, Style, export_code, format_matrix


def main():
    """Run a single search."""
    parser = argparse.ArgumentParser(
        description="Search for a (Hermitian LCD) linear code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_search.py 5 2 3                  # Hermitian LCD [5, 2, 3] over GF(4)
  python run_search.py 7 4 3 --base 2 --no-lcd
  python run_search.py 8 3 5 --workers 4      # split the search over 4 processes
  python run_search.py 6 3 3 --export results
        """
    )
    parser.add_argument("n", type=int, help="Block length")
    parser.add_argument("k", type=int, help="Dimension")
    parser.add_argument("d", type=int, help="Target minimum distance")
    parser.add_argument(
        "--base",
        type=int,
        default=4,
        choices=(2, 4),
        help="Field size (default: 4)"
    )
    parser.add_argument(
        "--no-lcd",
        action="store_true",
        help="Accept codes that are not Hermitian LCD"
    )
    parser.add_argument(
        "--no-identity",
        action="store_true",
        help="Search every column instead of fixing the identity on the first k"
    )
    parser.add_argument(
        "--unrestricted",
        action="store_true",
        help="Also try rows that are scalar multiples of each other"
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=None,
        help="Number of worker processes (default: sequential search)"
    )
    parser.add_argument(
        "--export",
        type=Path,
        default=None,
        help="Directory to write the pickled code, LaTeX and Matlab files to"
    )

    args = parser.parse_args()

    parameters = CodeParameters(args.n, args.k, args.d, base=args.base)
    config = ValidatorConfig(
        append_identity=not args.no_identity,
        restrict_generation=not args.unrestricted,
        require_hermitian_lcd=not args.no_lcd,
        multithreaded=args.workers is not None,
        num_workers=args.workers,
    )

    print(f"Searching {parameters} ...")
    code = find_code(parameters, config)
    if code is None:
        print("Search exhausted: no such code exists under this policy.")
        return None

    style = Style.QUATERNARY if parameters.base == 4 else Style.BINARY
    delimiter = " " if parameters.base == 4 else ""
    print(format_matrix(code.generator_matrix, parameters.n, style, delimiter, base=parameters.base))
    print(f"Weight enumerator: {list(code.weight_enumerator)}")
    print(f"Minimum distance:  {code.minimum_distance}")
    print(f"Hermitian LCD:     {code.is_hermitian_lcd}")
    if code.statistics is not None:
        stats = code.statistics
        print(f"Nodes: {stats.nodes_visited}, candidates: {stats.candidates_examined}, "
              f"evaluations: {stats.full_evaluations}, time: {stats.seconds:.2f}s")

    if args.export is not None:
        directory = export_code(code, args.export, ExportConfig(), verbose=True)
        print(f"Exported to {directory}")

    return code


if __name__ == "__main__":
    main()
