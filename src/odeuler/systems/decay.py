# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


import numpy as np

from odeuler.systems.base import ODESystem


class ExponentialDecay(ODESystem):
    """dy/dt = -rate * y, with y(t) = y0 * exp(-rate * (t - t0))."""

    y0 = (1.0,)

    def __init__(self, rate=1.0):
        self.rate = rate

    def __call__(self, out, y, t):
        out[0] = -self.rate * y[0]

    def exact(self, t, y0, t0=0.0):
        return np.asarray(y0, dtype=float) * np.exp(-self.rate * (t - t0))
