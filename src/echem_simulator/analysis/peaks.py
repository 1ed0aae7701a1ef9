"""Shared peak detection.

A sample ``i`` is a peak when it is strictly greater than every neighbour in
``i−window .. i+window`` and strictly greater than the amplitude threshold
(a fraction of the global maximum, or a fixed absolute value).  Candidates
are scanned left to right; one closer than ``min_separation`` samples to an
already-accepted peak is discarded.  Accepted peaks are returned sorted by
descending amplitude, ties keeping index order.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def find_peaks(
    values: Sequence[float] | np.ndarray,
    window: int = 2,
    relative_threshold: float = 0.1,
    absolute_threshold: float | None = None,
    min_separation: int = 5,
) -> list[int]:
    """Indices of distinct local maxima, largest first.

    Parameters
    ----------
    values : sequence of float
        Signal channel (e.g. current).
    window : int
        Neighbours on each side a peak must exceed.
    relative_threshold : float
        Threshold as a fraction of ``max(values)``.  Ignored when
        ``absolute_threshold`` is given.
    absolute_threshold : float | None
        Fixed amplitude threshold.
    min_separation : int
        Minimum index distance between accepted peaks.
    """
    y = np.asarray(values, dtype=np.float64)
    n = y.size
    if n < 2 * window + 1:
        return []

    threshold = (
        absolute_threshold if absolute_threshold is not None
        else float(y.max()) * relative_threshold
    )

    peaks: list[int] = []
    for i in range(window, n - window):
        value = y[i]
        if value <= threshold:
            continue
        neighbours = np.concatenate((y[i - window:i], y[i + 1:i + window + 1]))
        if not np.all(value > neighbours):
            continue
        if any(abs(i - p) < min_separation for p in peaks):
            continue
        peaks.append(i)

    return sorted(peaks, key=lambda idx: -y[idx])
