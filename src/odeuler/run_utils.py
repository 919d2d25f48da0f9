# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Shared utilities for sweeps: save/load results, logging, summary tables."""

import csv
import logging
import os

from odeuler.io import save_run


def save_sweep_results(results, outdir):
    """Save per-case JSON files and a summary CSV.

    Args:
        results: list of result dicts from single_run.
        outdir: output directory path.

    Returns:
        list of summary row dicts.
    """
    os.makedirs(outdir, exist_ok=True)
    summary_rows = []

    for r in results:
        p = r["params"]
        fname = f"{p['system']}_{p['kind']}_dt{p['dt']}.json"
        save_run(r, os.path.join(outdir, fname))

        summary_rows.append({
            "system": p["system"],
            "kind": p["kind"],
            "dt": p["dt"],
            "t_end": p["t_end"],
            "n_steps": r["n_steps"],
            "error": r["error"],
        })

    # Write summary CSV
    if summary_rows:
        csv_path = os.path.join(outdir, "summary.csv")
        with open(csv_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=summary_rows[0].keys())
            writer.writeheader()
            writer.writerows(summary_rows)

    return summary_rows


def load_summary(csv_path):
    """Read a summary CSV into a list of dicts with proper types.

    dt, t_end and error are converted to float, n_steps to int.
    """
    rows = []
    with open(csv_path, "r") as f:
        reader = csv.DictReader(f)
        for row in reader:
            typed = {}
            for k, v in row.items():
                if k in ("dt", "t_end", "error"):
                    typed[k] = float(v)
                elif k == "n_steps":
                    typed[k] = int(v)
                else:
                    typed[k] = v
            rows.append(typed)
    return rows


def configure_logging(outdir, run_name, level=logging.INFO):
    """Set up file + console logging on the 'odeuler' logger.

    Args:
        outdir: directory for the log file.
        run_name: used in the log filename.
        level: logging level for the logger and both handlers.

    Returns:
        the configured logger.
    """
    os.makedirs(outdir, exist_ok=True)
    logger = logging.getLogger("odeuler")
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    # File handler
    log_path = os.path.join(outdir, f"{run_name}.log")
    fh = logging.FileHandler(log_path)
    fh.setLevel(level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    # Console handler (only if none already exists)
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger


def print_summary_table(summary_rows):
    """Print a formatted summary table to stdout."""
    header = f"{'system':>10} {'kind':>8} {'dt':>10} {'steps':>8} {'error':>12}"
    print(header)
    print("-" * len(header))
    for row in summary_rows:
        print(
            f"{row['system']:>10} {row['kind']:>8} {row['dt']:>10.3g} "
            f"{row['n_steps']:>8d} {row['error']:>12.4e}"
        )
