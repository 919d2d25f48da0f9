# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Command-line interface for Euler convergence sweeps."""

import argparse
import os

from odeuler.run import build_run_grid, observed_orders, run_sweep
from odeuler.run_utils import configure_logging, print_summary_table, save_sweep_results
from odeuler.systems.base import KINDS
from odeuler.systems.registry import SYSTEMS


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="odeuler-sweep",
        description="Integrate reference ODE systems with explicit Euler over a range of step sizes.",
    )
    parser.add_argument(
        "--system", nargs="+", required=True, choices=sorted(SYSTEMS),
        help="Reference systems to integrate",
    )
    parser.add_argument(
        "--dt", nargs="+", type=float, required=True,
        help="Step sizes",
    )
    parser.add_argument(
        "--t-end", type=float, default=1.0,
        help="Final time (default: 1.0)",
    )
    parser.add_argument(
        "--kind", type=str, default="float64", choices=KINDS,
        help="State buffer kind (default: float64)",
    )
    parser.add_argument(
        "--workers", type=int, default=None,
        help="Max parallel workers (default: cpu count)",
    )
    parser.add_argument(
        "--outdir", type=str, default="results",
        help="Output directory (default: results/)",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    args = parser.parse_args(argv)

    configure_logging(args.outdir, "sweep", level=args.log_level)

    param_list = build_run_grid(
        systems=args.system,
        dt_vals=args.dt,
        t_end=args.t_end,
        kind=args.kind,
    )

    n_cases = len(param_list)
    print(f"Running {n_cases} cases (system={args.system}, dt={args.dt})")
    print(f"t_end={args.t_end}, kind={args.kind}, Workers: {args.workers or 'auto'}")
    print()

    results = run_sweep(param_list, max_workers=args.workers)

    summary_rows = save_sweep_results(results, args.outdir)
    print_summary_table(summary_rows)

    orders = observed_orders(results)
    if any(orders.values()):
        print("\nObserved order of global error:")
        for key, vals in orders.items():
            print(f"  {key}: " + ", ".join(f"{v:.3f}" for v in vals))

    print(f"\nResults saved to {args.outdir}/")
    print(f"Summary: {os.path.join(args.outdir, 'summary.csv')}")
    return 0
