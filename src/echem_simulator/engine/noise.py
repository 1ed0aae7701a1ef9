"""Injectable measurement noise.

All randomness flows through a caller-supplied ``numpy.random.Generator`` so
a seeded run is reproducible.  Each draw is uniform on
``[−noise_level/2, +noise_level/2)``; models scale it to their own units.

A draw is consumed even when ``noise_level`` is 0 so that switching noise
off does not shift the sequence of later draws.
"""

from __future__ import annotations

import numpy as np


def draw_noise(rng: np.random.Generator, noise_level: float) -> float:
    """One centred uniform noise sample."""
    return (float(rng.random()) - 0.5) * noise_level


def make_rng(seed: int | None) -> np.random.Generator:
    """Seeded generator (or OS-entropy seeded when ``seed`` is None)."""
    return np.random.default_rng(seed)
