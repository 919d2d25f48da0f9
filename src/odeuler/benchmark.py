# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Benchmarking utilities for profiling the Euler step.

Provides micro-benchmarks of ``Integrator.step`` for each state buffer kind
and a macro-benchmark (full single_run integration) with timing and optional
cProfile output.
"""

import time
import cProfile
import pstats
import io
import numpy as np


def _time_fn(fn, args=(), kwargs=None, n_warmup=3, n_iter=100):
    """Time a function over n_iter calls, returning median and stats."""
    kwargs = kwargs or {}
    for _ in range(n_warmup):
        fn(*args, **kwargs)
    times = []
    for _ in range(n_iter):
        t0 = time.perf_counter_ns()
        fn(*args, **kwargs)
        t1 = time.perf_counter_ns()
        times.append((t1 - t0) * 1e-6)  # ms
    times = np.array(times)
    return {
        "median_ms": float(np.median(times)),
        "mean_ms": float(np.mean(times)),
        "std_ms": float(np.std(times)),
        "min_ms": float(np.min(times)),
        "max_ms": float(np.max(times)),
        "n_iter": n_iter,
    }


def _linear_decay(out, y, t):
    for i in range(len(y)):
        out[i] = -y[i]


def bench_step(kind="float64", N=128, n_iter=500):
    """Benchmark one Integrator.step() on an N-component decay system."""
    from odeuler.integrator import Integrator
    from odeuler.systems.base import make_buffer
    y = make_buffer(np.ones(N), kind)
    integrator = Integrator(y, _linear_decay, 0.0, 1e-6)
    return _time_fn(integrator.step, n_iter=n_iter)


def bench_single_run(dt=1e-4):
    """Time a full single_run (macro benchmark)."""
    from odeuler.run import single_run
    params = dict(system="rotation", dt=dt, t_end=1.0, kind="float64")
    t0 = time.perf_counter()
    result = single_run(params)
    elapsed = time.perf_counter() - t0
    return {
        "elapsed_s": elapsed,
        "n_steps": result["n_steps"],
        "error": result["error"],
    }


def profile_single_run(dt=1e-4):
    """Run cProfile on single_run, return stats as string."""
    from odeuler.run import single_run
    params = dict(system="rotation", dt=dt, t_end=1.0, kind="float64")
    pr = cProfile.Profile()
    pr.enable()
    single_run(params)
    pr.disable()
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
    ps.print_stats(30)
    return s.getvalue()


def run_all_benchmarks(N=128, verbose=True):
    """Run all micro and macro benchmarks. Returns dict of results."""
    results = {}

    for kind in ("float64", "float32", "list", "array"):
        name = f"step_{kind}"
        if verbose:
            print(f"  {name}...", end="", flush=True)
        r = bench_step(kind=kind, N=N)
        results[name] = r
        if verbose:
            print(f" {r['median_ms']:.3f} ms (median, n={r['n_iter']})")

    if verbose:
        print("  single_run (rotation, dt=1e-4)...", end="", flush=True)
    r = bench_single_run()
    results["single_run"] = r
    if verbose:
        print(f" {r['elapsed_s']:.2f} s")

    return results


if __name__ == "__main__":
    print("=" * 55)
    print("odeuler Benchmarks")
    print("=" * 55)
    print()

    print("cProfile of single_run (rotation, dt=1e-4):")
    print(profile_single_run())
