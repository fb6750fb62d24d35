#!/usr/bin/env python3
"""
Plot the weight distribution of exported codes.

Reads one or many CodeObject_*.bin files written by the exporter and draws
the number of codewords of each weight as a bar chart (log scale).

Examples:
  python examples/plot_weight_enumerator.py results/05_02_03H_4/CodeObject_05_02_03H_4.bin
  python examples/plot_weight_enumerator.py --all results
"""

import argparse
import sys
from pathlib import Path
from typing import List

import matplotlib.pyplot as plt
import numpy as np

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hlcd.exporter import read_code_object


def find_code_objects(root: Path) -> List[Path]:
    return sorted(root.rglob("CodeObject_*.bin"))


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("paths", nargs="*", type=Path, help="CodeObject_*.bin files")
    ap.add_argument("--all", type=Path, default=None,
                    help="Plot every code object found below this directory")
    ap.add_argument("--out", type=Path, default=Path("weight_enumerators.png"),
                    help="Output image (default: weight_enumerators.png)")
    ap.add_argument("--dpi", type=int, default=200)
    args = ap.parse_args()

    paths = list(args.paths)
    if args.all is not None:
        paths.extend(find_code_objects(args.all))
    if not paths:
        print("No code objects given.")
        return 1

    codes = [read_code_object(p) for p in paths]
    width = 0.8 / len(codes)

    plt.figure(figsize=(7.0, 4.0))
    for i, code in enumerate(codes):
        counts = np.array(code.weight_enumerator, dtype=float)
        weights = np.arange(len(counts))
        label = f"{code.parameters}" + (" H-LCD" if code.is_hermitian_lcd else "")
        plt.bar(weights + i * width, counts, width=width, label=label)
    plt.yscale("log")
    plt.title("Weight distribution")
    plt.xlabel("Weight w")
    plt.ylabel("Codewords of weight w (log scale)")
    plt.grid(True, axis="y", alpha=0.3)
    plt.legend(fontsize=8)
    plt.tight_layout()
    plt.savefig(args.out, dpi=args.dpi)
    plt.close()
    print(f"Saved {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
