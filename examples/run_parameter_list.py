#!/usr/bin/env python3
"""
Example script: search every code of a parameter list

Each line of the list holds ``n, k, d``; lines starting with ``//`` are
comments. A summary file and one directory per code found are written to
the output directory.
"""

import sys
import argparse
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hlcd import ValidatorConfig
from hlcd.exporter import ExportConfig
from hlcd.runner import run_parameter_list


def main():
    """Run the searches of a parameter list."""
    parser = argparse.ArgumentParser(
        description="Search the codes of a parameter list file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_parameter_list.py parameters.txt
  python run_parameter_list.py parameters.txt --offset 1 -o results/plus_one
  python run_parameter_list.py parameters.txt --workers 8 --no-matlab
        """
    )
    parser.add_argument("path", type=Path, help="Parameter list file")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("results"),
        help="Output directory (default: results)"
    )
    parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Added to every d of the list (default: 0)"
    )
    parser.add_argument(
        "--no-lcd",
        action="store_true",
        help="Accept codes that are not Hermitian LCD"
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=None,
        help="Number of worker processes (default: sequential search)"
    )
    parser.add_argument(
        "--no-matlab",
        action="store_true",
        help="Do not write the Matlab verification scripts"
    )
    parser.add_argument(
        "--code-id",
        type=str,
        default="",
        help="Identifier appended to every exported file name"
    )

    args = parser.parse_args()

    config = ValidatorConfig(
        require_hermitian_lcd=not args.no_lcd,
        multithreaded=args.workers is not None,
        num_workers=args.workers,
    )
    export = ExportConfig(matlab=not args.no_matlab, code_id=args.code_id)

    results = run_parameter_list(
        args.path,
        args.output,
        config=config,
        offset=args.offset,
        export=export,
        verbose=True,
    )

    found = sum(1 for r in results if r["code"] is not None)
    print(f"\n=== {found} of {len(results)} codes found ===")
    return results


if __name__ == "__main__":
    main()
