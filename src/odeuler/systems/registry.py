# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


from odeuler.systems.decay import ExponentialDecay
from odeuler.systems.rotation import Rotation

SYSTEMS = {
    "decay": ExponentialDecay,
    "rotation": Rotation,
}


def make_system(name, **kwargs):
    """Instantiate a reference system by name."""
    try:
        cls = SYSTEMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown system: {name!r} (expected one of {sorted(SYSTEMS)})"
        ) from None
    return cls(**kwargs)
