# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


import numpy as np

from odeuler.systems.base import ODESystem


class Rotation(ODESystem):
    """Uniform rotation in the plane at angular rate ``scale``.

        dy0/dt = -scale * y1
        dy1/dt =  scale * y0

    Starting from (1, 0) the exact trajectory is the unit circle, so after
    one period 2*pi/scale it returns to (1, 0). Explicit Euler spirals
    outwards: each step multiplies the radius by sqrt(1 + (scale*dt)^2).
    """

    y0 = (1.0, 0.0)

    def __init__(self, scale=1.0):
        self.scale = scale

    def __call__(self, out, y, t):
        out[0] = -self.scale * y[1]
        out[1] = self.scale * y[0]

    def exact(self, t, y0, t0=0.0):
        theta = self.scale * (t - t0)
        c, s = np.cos(theta), np.sin(theta)
        return np.array([c * y0[0] - s * y0[1], s * y0[0] + c * y0[1]])

    def period(self):
        return 2 * np.pi / abs(self.scale)
