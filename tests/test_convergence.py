# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# tests/test_convergence.py
import math

import numpy as np
import pytest
from odeuler.integrator import Integrator
from odeuler.richardson import estimate_order

KINDS = {
    "float64": lambda v: np.array(v, dtype=np.float64),
    "list": lambda v: list(v),
}


@pytest.fixture(params=sorted(KINDS))
def make(request):
    return KINDS[request.param]


def decay(dydt, y, t):
    dydt[0] = -y[0]


def rotation(dydt, y, t):
    dydt[0] = -y[1]
    dydt[1] = y[0]


def test_local_error_decay_is_second_order(make):
    """One step of dy/dt=-y from y=1 misses exp(-h) by O(h^2)."""
    def one_step_error(h):
        return Integrator(make([1.0]), decay, 0, h).step().state[0] - math.exp(-h)

    result = estimate_order(one_step_error, 0.06, limit=0.0)
    assert abs(result.order - 2) < 1e-2, f"n ~ 2, got {result.order:.4f}"


def test_local_error_rotation_is_second_order(make):
    """One step along the unit circle misses (cos h, sin h) by O(h^2)."""
    def one_step_distance(h):
        y = Integrator(make([1.0, 0.0]), rotation, 0, h).step().state
        return math.hypot(y[0] - math.cos(h), y[1] - math.sin(h))

    result = estimate_order(one_step_distance, 2 * math.pi / 100, limit=0.0)
    assert abs(result.order - 2) < 1e-2, f"n ~ 2, got {result.order:.4f}"


def test_global_error_full_circle_is_first_order(make):
    """After one full period the endpoint misses (1, 0) by O(h)."""
    def closed_orbit_distance(h):
        n = math.floor(2 * math.pi / h + 0.5)
        y = Integrator(make([1.0, 0.0]), rotation, 0, h).steps(n).state
        return math.hypot(y[0] - 1, y[1])

    result = estimate_order(closed_orbit_distance, 2 * math.pi / 100, limit=0.0)
    assert abs(result.order - 1) < 1e-1, f"n ~ 1, got {result.order:.4f}"


def test_global_error_float32():
    """Single precision still shows first-order global convergence."""
    def decay_error(h):
        n = round(1 / h)
        y = Integrator(np.array([1.0], dtype=np.float32), decay, 0, h).steps(n).state
        return float(y[0]) - math.exp(-1)

    result = estimate_order(decay_error, 0.1, limit=0.0)
    assert abs(result.order - 1) < 1e-1, f"n ~ 1, got {result.order:.4f}"


def test_global_error_unknown_limit():
    """Without the exact answer, consecutive differences give the same order."""
    def endpoint(h):
        n = round(1 / h)
        return Integrator([1.0], decay, 0, h).steps(n).state[0]

    result = estimate_order(endpoint, 0.1)
    assert abs(result.order - 1) < 1e-1
    assert len(result.values) == 5
    assert len(result.estimates) == 3


def test_estimate_order_exact_power():
    result = estimate_order(lambda h: 3.0 + 0.5 * h**3, 1.0, limit=3.0, halvings=4)
    assert result.order == pytest.approx(3.0)
    assert np.allclose(result.estimates, 3.0)
    assert result.steps == [1.0, 0.5, 0.25, 0.125, 0.0625]


@pytest.mark.parametrize("h0", [0, -0.1, "x"])
def test_estimate_order_rejects_bad_h0(h0):
    from odeuler.validation import InvalidArgument
    with pytest.raises(InvalidArgument):
        estimate_order(lambda h: h, h0)


def test_estimate_order_rejects_bad_halvings():
    from odeuler.validation import InvalidArgument
    with pytest.raises(InvalidArgument):
        estimate_order(lambda h: h, 0.1, halvings=0)
