# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# src/odeuler/run.py
import logging
import numpy as np
from itertools import product
from concurrent.futures import ProcessPoolExecutor, as_completed
from odeuler.integrator import Integrator
from odeuler.systems.registry import make_system

logger = logging.getLogger(__name__)


def single_run(params):
    """Integrate one reference system from t0 to t_end with a fixed dt.

    Args:
        params: dict with system, dt, t_end and optionally t0, kind,
            system_params, n_samples.

    Returns:
        dict with params, final state/time, step count, max-norm error
        against the exact solution and a sampled trajectory.
    """
    dt = params["dt"]
    t_end = params["t_end"]
    t0 = params.get("t0", 0.0)
    kind = params.get("kind", "float64")
    n_samples = params.get("n_samples", 20)

    if dt <= 0:
        raise ValueError(f"dt must be positive, got {dt}")
    if t_end < t0:
        raise ValueError(f"t_end must be >= t0, got t_end={t_end}, t0={t0}")
    if n_samples < 1:
        raise ValueError(f"n_samples must be positive, got {n_samples}")

    system = make_system(params["system"], **params.get("system_params", {}))
    y = system.initial_state(kind)
    y0 = np.array(y, dtype=float)

    integrator = Integrator(y, system, t0, dt)
    n_steps = int(round((t_end - t0) / dt))
    sample_interval = max(1, n_steps // n_samples)

    traj_t = [float(t0)]
    traj_y = [y0.tolist()]
    for step_i in range(1, n_steps + 1):
        integrator.step()
        if step_i % sample_interval == 0 or step_i == n_steps:
            traj_t.append(float(integrator.time))
            traj_y.append([float(v) for v in integrator.state])

    final_state = np.array(integrator.state, dtype=float)
    exact = system.exact(integrator.time, y0, t0)
    error = float(np.max(np.abs(final_state - exact)))

    return {
        "params": {"system": params["system"], "dt": dt, "t_end": t_end, "kind": kind},
        "final_state": final_state,
        "final_time": float(integrator.time),
        "n_steps": n_steps,
        "error": error,
        "trajectory": {"t": traj_t, "y": traj_y},
    }


def build_run_grid(systems, dt_vals, t_end=1.0, kind="float64", n_samples=20):
    """Build list of parameter dicts for every (system, dt) pair."""
    grid = []
    for system, dt in product(systems, dt_vals):
        grid.append(dict(
            system=system, dt=dt, t_end=t_end, kind=kind, n_samples=n_samples,
        ))
    return grid


def run_sweep(param_list, max_workers=None, progress=True):
    """Run a list of cases in parallel.

    Args:
        param_list: list of param dicts from build_run_grid.
        max_workers: number of parallel processes (None = cpu count).
        progress: show tqdm progress bar if available.

    Returns:
        list of result dicts, in the same order as param_list.
    """
    n = len(param_list)
    logger.info("Starting sweep: %d cases, max_workers=%s", n, max_workers)

    # Soft import of tqdm
    tqdm_bar = None
    if progress:
        try:
            from tqdm.auto import tqdm
            tqdm_bar = tqdm(total=n, desc="Sweep", unit="case")
        except ImportError:
            pass

    results = [None] * n

    with ProcessPoolExecutor(max_workers=max_workers) as pool:
        future_to_index = {}
        for i, params in enumerate(param_list):
            future = pool.submit(single_run, params)
            future_to_index[future] = i

        for future in as_completed(future_to_index):
            idx = future_to_index[future]
            results[idx] = future.result()
            p = results[idx]["params"]
            logger.debug(
                "Case %d/%d done: system=%s dt=%s -> error=%.3e",
                idx + 1, n, p["system"], p["dt"], results[idx]["error"],
            )
            if tqdm_bar is not None:
                tqdm_bar.update(1)

    if tqdm_bar is not None:
        tqdm_bar.close()

    logger.info("Sweep complete: %d cases finished", n)
    return results


def observed_orders(results):
    """Observed order of the global error between consecutive dt values.

    Results are grouped by (system, kind) and sorted by decreasing dt.
    Returns a dict mapping "system/kind" to a list of orders
    log(e_i / e_{i+1}) / log(dt_i / dt_{i+1}).
    """
    groups = {}
    for r in results:
        p = r["params"]
        groups.setdefault(f"{p['system']}/{p['kind']}", []).append((p["dt"], r["error"]))

    orders = {}
    for key, pairs in groups.items():
        pairs.sort(reverse=True)
        orders[key] = [
            float(np.log(e0 / e1) / np.log(h0 / h1))
            for (h0, e0), (h1, e1) in zip(pairs, pairs[1:])
            if h0 != h1 and e0 > 0 and e1 > 0
        ]
    return orders
