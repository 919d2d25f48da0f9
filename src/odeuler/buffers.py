# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""State-buffer kinds accepted by the integrator.

A state buffer must support indexed read/write and ``len()``, and there must be
a way to allocate a zeroed buffer of the same concrete kind and length. Each
supported kind is registered here with its allocator:

    list          -> same list type, filled with 0.0
    array.array   -> same typecode, zero bytes
    numpy.ndarray -> same dtype and subclass (1-D only)

Other containers can be added with ``register_buffer_kind``.
"""

import array

import numpy as np


def _allocate_list(buf, n):
    return type(buf)([0.0] * n)


def _allocate_array(buf, n):
    return array.array(buf.typecode, bytes(buf.itemsize * n))


def _allocate_ndarray(buf, n):
    return np.zeros_like(buf, shape=(n,))


# Checked in order; subclasses resolve to their first matching base.
_KINDS = [
    (np.ndarray, _allocate_ndarray),
    (array.array, _allocate_array),
    (list, _allocate_list),
]


def register_buffer_kind(cls, allocate):
    """Register a container type and its ``allocate(buf, n)`` factory.

    Later registrations take precedence over the built-in kinds.
    """
    if not isinstance(cls, type):
        raise TypeError(f"cls must be a type, got {cls!r}")
    if not callable(allocate):
        raise TypeError(f"allocate must be callable, got {allocate!r}")
    _KINDS.insert(0, (cls, allocate))


def _find_allocator(buf):
    for cls, allocate in _KINDS:
        if isinstance(buf, cls):
            return allocate
    return None


def is_state_buffer(buf):
    """True if ``buf`` is a supported state container."""
    if _find_allocator(buf) is None:
        return False
    if isinstance(buf, np.ndarray):
        return buf.ndim == 1 and np.issubdtype(buf.dtype, np.number)
    return True


def allocate_like(buf, n=None):
    """Return a zeroed buffer of the same kind as ``buf`` with ``n`` entries."""
    allocate = _find_allocator(buf)
    if allocate is None:
        raise ValueError(f"unsupported buffer kind: {type(buf).__name__}")
    if n is None:
        n = len(buf)
    return allocate(buf, n)


def fill_zero(buf):
    """Zero every entry of ``buf`` in place."""
    if isinstance(buf, np.ndarray):
        buf.fill(0)
    else:
        for i in range(len(buf)):
            buf[i] = 0
