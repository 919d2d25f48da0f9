# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import logging

import numpy as np
from numba import njit

from odeuler.buffers import allocate_like, fill_zero, is_state_buffer
from odeuler.validation import InvalidArgument, is_integer_value, is_numeric_scalar

logger = logging.getLogger(__name__)

_COMPILED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def _kernel_scalar(dt):
    """True if numba can type dt as a float64 or int64 argument."""
    if isinstance(dt, (float, np.float32, np.float64)):
        return True
    if isinstance(dt, (int, np.integer)):
        return -2**63 <= dt < 2**63
    return False


@njit(cache=True)
def euler_update(y, yp, dt):
    """In-place explicit Euler update y[i] += yp[i] * dt."""
    for i in range(y.shape[0]):
        y[i] += yp[i] * dt


class Integrator:
    """Explicit (forward) Euler integrator for a system of first-order ODEs.

        y(t + dt) = y(t) + dt * f(y(t), t)

    The state buffer is shared with the caller, not copied: every step writes
    into ``state`` in place, so any outside reference to the buffer sees the
    updated values. The caller must not modify it while a step is running.

    Parameters
    ----------
    state : list, array.array or 1-D numpy.ndarray
        Initial conditions. Overwritten with the solution as the
        integrator advances.
    derivative : callable(out, state, t) -> None
        Writes dy/dt for every component of ``state`` into ``out``.
        Context can be carried with a closure, bound method or
        ``functools.partial``.
    time : float
        Initial time t0.
    step_size : float
        Time step dt.
    clear_scratch : bool
        Zero the derivative buffer before each call, so components the
        derivative forgets to write read as zero instead of the value from
        the previous step.
    """

    def __init__(self, state, derivative, time, step_size, clear_scratch=False):
        if not is_state_buffer(state):
            raise InvalidArgument(
                f"state must be a list, array.array or 1-D numeric ndarray, got {state!r}"
            )
        if not callable(derivative):
            raise InvalidArgument(f"derivative must be callable, got {derivative!r}")
        if not is_numeric_scalar(time):
            raise InvalidArgument(f"time must be a number, got {time!r}")
        if not is_numeric_scalar(step_size):
            raise InvalidArgument(f"step_size must be a number, got {step_size!r}")

        self.state = state
        self.derivative = derivative
        self.time = time
        self.step_size = step_size
        self.clear_scratch = clear_scratch

        self.length = len(state)
        self._scratch = allocate_like(state, self.length)

        # The compiled kernel only handles plain native float32/float64
        # arrays; lists, array.array and other dtypes use the Python loop.
        self._compiled = type(state) is np.ndarray and state.dtype in _COMPILED_DTYPES

        logger.debug(
            "Integrator created: n=%d kind=%s t0=%s dt=%s",
            self.length, type(state).__name__, time, step_size,
        )

    def step(self):
        """Advance the state by one step of ``step_size``. Returns self."""
        yp = self._scratch
        if self.clear_scratch:
            fill_zero(yp)

        self.derivative(yp, self.state, self.time)

        dt = self.step_size
        if self._compiled and _kernel_scalar(dt):
            euler_update(self.state, yp, dt)
        else:
            y = self.state
            for i in range(self.length):
                y[i] += yp[i] * dt

        self.time += dt
        return self

    def steps(self, n):
        """Take ``n`` consecutive steps. Returns self."""
        if not is_integer_value(n):
            raise InvalidArgument(f"step count n must be an integer, got {n!r}")
        if n < 0:
            raise InvalidArgument(f"step count n must be non-negative, got {n!r}")

        for _ in range(int(n)):
            self.step()

        logger.debug("Took %d steps, t=%s", int(n), self.time)
        return self

    def __repr__(self):
        return (
            f"{type(self).__name__}(n={self.length}, time={self.time!r}, "
            f"step_size={self.step_size!r})"
        )
