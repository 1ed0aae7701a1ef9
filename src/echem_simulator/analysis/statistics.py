"""Basic series statistics shown alongside every technique-specific result."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from echem_simulator.models.results import DataPoint, SeriesStatistics


def data_quality(count: int) -> str:
    if count > 100:
        return "excellent"
    if count > 50:
        return "good"
    return "limited"


def basic_statistics(points: Sequence[DataPoint]) -> SeriesStatistics | None:
    """Min / max / mean of the signal channel and the x-axis range.

    Returns ``None`` for an empty series.
    """
    if not points:
        return None

    x = np.fromiter((p.x for p in points), dtype=np.float64, count=len(points))
    y = np.fromiter((p.y for p in points), dtype=np.float64, count=len(points))

    return SeriesStatistics(
        data_points=len(points),
        max_current=float(y.max()),
        min_current=float(y.min()),
        average_current=float(y.mean()),
        current_range=float(y.max() - y.min()),
        x_min=float(x.min()),
        x_max=float(x.max()),
        data_quality=data_quality(len(points)),
    )
