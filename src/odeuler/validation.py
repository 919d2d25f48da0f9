# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Argument checks shared by the integrator and its helpers."""

import math
import numbers


class InvalidArgument(TypeError, ValueError):
    """Raised when an argument fails its type or value check.

    Subclasses both TypeError and ValueError so callers can catch it either way.
    """


def is_numeric_scalar(value):
    """True for a real, non-NaN number that is not a bool."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not math.isnan(value)


def is_integer_value(value):
    """True for an integer-valued number (``3`` or ``3.0``, not ``3.5``)."""
    if isinstance(value, numbers.Integral):
        return not isinstance(value, bool)
    if not is_numeric_scalar(value):
        return False
    return math.isfinite(value) and float(value).is_integer()
