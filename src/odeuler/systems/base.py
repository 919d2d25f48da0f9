# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


import array
from abc import ABC, abstractmethod

import numpy as np

KINDS = ("float64", "float32", "list", "array")


def make_buffer(values, kind="float64"):
    """Build a state buffer of the given kind from a sequence of floats."""
    if kind == "float64":
        return np.array(values, dtype=np.float64)
    if kind == "float32":
        return np.array(values, dtype=np.float32)
    if kind == "list":
        return [float(v) for v in values]
    if kind == "array":
        return array.array("d", values)
    raise ValueError(f"Unknown buffer kind: {kind!r} (expected one of {KINDS})")


class ODESystem(ABC):
    """Right-hand side f(y, t) written in place: ``system(out, y, t)``."""

    y0 = ()

    @abstractmethod
    def __call__(self, out, y, t):
        pass

    @abstractmethod
    def exact(self, t, y0, t0=0.0):
        """Analytic solution at t starting from y0 at t0, as an ndarray."""

    def initial_state(self, kind="float64"):
        return make_buffer(self.y0, kind)
