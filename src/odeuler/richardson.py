# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Observed convergence order by successive step halving.

For a quantity A(h) = A* + C h^p + O(h^{p+1}), halving h shrinks the error by
a factor 2^p, so

    p ~ log2(|A(h) - A*| / |A(h/2) - A*|)

when the limit A* is known. Without it, differences of consecutive values
cancel A*:

    p ~ log2(|A(h) - A(h/2)| / |A(h/2) - A(h/4)|)

Each extra halving gives a new estimate; the finest one is reported.
"""

from collections import namedtuple

import numpy as np

from odeuler.validation import InvalidArgument, is_integer_value, is_numeric_scalar

RichardsonResult = namedtuple("RichardsonResult", ["order", "estimates", "steps", "values"])


def estimate_order(fn, h0, limit=None, halvings=3):
    """Estimate the order p with which ``fn(h)`` approaches its limit.

    Args:
        fn: callable(h) -> float.
        h0: coarsest step, must be positive.
        limit: known limit of fn(h) as h -> 0, or None if unknown.
        halvings: number of times h0 is halved.

    Returns:
        RichardsonResult with the finest-pair ``order``, every pairwise
        estimate, and the steps/values sampled.
    """
    if not is_numeric_scalar(h0) or h0 <= 0:
        raise InvalidArgument(f"h0 must be a positive number, got {h0!r}")
    if not is_integer_value(halvings) or halvings < 1:
        raise InvalidArgument(f"halvings must be a positive integer, got {halvings!r}")
    if limit is not None and not is_numeric_scalar(limit):
        raise InvalidArgument(f"limit must be a number or None, got {limit!r}")

    n_points = int(halvings) + 1
    if limit is None:
        # Two differences are needed per estimate.
        n_points += 1

    steps = h0 / 2.0 ** np.arange(n_points)
    values = np.array([fn(h) for h in steps], dtype=float)

    if limit is None:
        errors = np.abs(np.diff(values))
    else:
        errors = np.abs(values - limit)

    with np.errstate(divide="ignore", invalid="ignore"):
        estimates = np.log2(errors[:-1] / errors[1:])

    return RichardsonResult(
        order=float(estimates[-1]),
        estimates=estimates.tolist(),
        steps=steps.tolist(),
        values=values.tolist(),
    )
