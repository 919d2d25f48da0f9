# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest
from odeuler.integrator import Integrator
from odeuler.validation import InvalidArgument, is_integer_value, is_numeric_scalar


def noop(dydt, y, t):
    pass


@pytest.mark.parametrize("state", ["invalid", 3.0, None, (1.0, 2.0), {"a": 1},
                                   np.zeros((2, 2)), np.array(["a", "b"])])
def test_rejects_non_buffer_state(state):
    with pytest.raises(InvalidArgument, match="state"):
        Integrator(state, noop, 0, 0)


def test_rejects_non_callable_derivative():
    with pytest.raises(InvalidArgument, match="derivative.*'invalid'"):
        Integrator([1, 2, 3], "invalid", 0, 0)


@pytest.mark.parametrize("t", ["invalid", None, True, float("nan"), [0.0]])
def test_rejects_non_numeric_time(t):
    with pytest.raises(InvalidArgument, match="time"):
        Integrator([1, 2, 3], noop, t, 0)


@pytest.mark.parametrize("dt", ["invalid", None, False, float("nan"), 1j])
def test_rejects_non_numeric_step_size(dt):
    with pytest.raises(InvalidArgument, match="step_size"):
        Integrator([1, 2, 3], noop, 0, dt)


def test_accepts_numpy_scalars():
    integrator = Integrator(np.zeros(3), noop, np.float64(0.5), np.float32(0.25))
    integrator.step()
    assert integrator.time == pytest.approx(0.75)


def test_invalid_argument_is_type_and_value_error():
    with pytest.raises(TypeError):
        Integrator("invalid", noop, 0, 0)
    with pytest.raises(ValueError):
        Integrator("invalid", noop, 0, 0)


def test_steps_rejects_fractional_count():
    integrator = Integrator([1, 2, 3], lambda dydt, y, t: [0, 0, 0], 1, 0)
    integrator.steps(1)
    with pytest.raises(InvalidArgument, match="1.5"):
        integrator.steps(1.5)


@pytest.mark.parametrize("n", ["2", None, True, float("inf"), float("nan")])
def test_steps_rejects_non_integer(n):
    integrator = Integrator([1.0], noop, 0, 0.1)
    with pytest.raises(InvalidArgument):
        integrator.steps(n)


def test_steps_rejects_negative_count():
    """Negative counts are rejected rather than treated as zero."""
    integrator = Integrator([1.0], noop, 0, 0.1)
    with pytest.raises(InvalidArgument, match="non-negative"):
        integrator.steps(-1)
    assert integrator.time == 0


def test_is_numeric_scalar():
    assert is_numeric_scalar(0)
    assert is_numeric_scalar(-2.5)
    assert is_numeric_scalar(np.float32(1.0))
    assert is_numeric_scalar(float("inf"))
    assert not is_numeric_scalar(float("nan"))
    assert not is_numeric_scalar(True)
    assert not is_numeric_scalar("1")


def test_is_integer_value():
    assert is_integer_value(3)
    assert is_integer_value(3.0)
    assert is_integer_value(np.int32(-4))
    assert not is_integer_value(3.5)
    assert not is_integer_value(False)
    assert not is_integer_value(float("inf"))
