"""Print step-count convergence tables for a few employee stock option cases.

Run from the repository root:

    PYTHONPATH=src python scripts/eso_convergence_tables.py
    PYTHONPATH=src python scripts/eso_convergence_tables.py --steps 25 50 100 200 400
    PYTHONPATH=src python scripts/eso_convergence_tables.py --cdf
"""

from __future__ import annotations

import argparse
import logging

import pandas as pd

from eso_pricing import OptionParameters
from eso_pricing.diagnostics import (
    convergence_table,
    european_check_table,
    normal_cdf_error_table,
)

CASES: list[tuple[str, OptionParameters]] = [
    (
        "ATM 5y, 2y cliff",
        OptionParameters.new(100.0, 100.0, 5.0, 2.0, 0.05, 0.3, 0.02, 0.1, 0.05, 2.5, 100),
    ),
    (
        "ITM 1y, 3m cliff",
        OptionParameters.new(100.0, 90.0, 1.0, 0.25, 0.05, 0.3, 0.01, 0.1, 0.1, 2.0, 100),
    ),
    (
        "OTM 10y, 3y cliff",
        OptionParameters.new(80.0, 100.0, 10.0, 3.0, 0.04, 0.45, 0.01, 0.15, 0.08, 3.0, 100),
    ),
]


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--steps", type=int, nargs="+", default=[10, 25, 50, 100, 200, 400])
    ap.add_argument("--cdf", action="store_true", help="also print normal CDF errors")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    with pd.option_context("display.width", 120, "display.float_format", "{:.6f}".format):
        for name, p in CASES:
            print(f"\n== {name} ==")
            print(convergence_table(p, args.steps).to_string(index=False))

        print("\n== Vesting at maturity: lattice vs closed form ==")
        print(european_check_table(CASES).to_string(index=False))

        if args.cdf:
            print("\n== Normal CDF approximation vs scipy ==")
            print(normal_cdf_error_table().to_string(index=False))


if __name__ == "__main__":
    main()
