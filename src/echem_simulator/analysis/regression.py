"""Shared ordinary least-squares regression.

  slope     = (n·Σxy − Σx·Σy) / (n·Σx² − (Σx)²)
  intercept = (Σy − slope·Σx) / n
  R²        = 1 − SS_res / SS_tot

Degenerate inputs never produce NaN:
  - fewer than two points or zero x-variance → no fit (``None``)
  - SS_tot = 0 (constant y) → R² = 1 when the residuals vanish too, else 0
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from echem_simulator.models.results import RegressionFit

_RESIDUAL_TOLERANCE = 1e-12


def linear_regression(
    x: Sequence[float] | np.ndarray,
    y: Sequence[float] | np.ndarray,
) -> RegressionFit | None:
    """Fit ``y = slope·x + intercept``.  Returns ``None`` when undefined."""
    xs = np.asarray(x, dtype=np.float64)
    ys = np.asarray(y, dtype=np.float64)
    if xs.shape != ys.shape:
        raise ValueError(f"x and y lengths differ: {xs.size} != {ys.size}")

    n = xs.size
    if n < 2:
        return None

    sum_x = xs.sum()
    sum_y = ys.sum()
    denominator = n * np.dot(xs, xs) - sum_x * sum_x
    # Relative guard: Σx² and (Σx)² are large and nearly equal for constant x.
    if abs(denominator) <= _RESIDUAL_TOLERANCE * max(1.0, n * np.dot(xs, xs)):
        return None

    slope = (n * np.dot(xs, ys) - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    residuals = ys - (slope * xs + intercept)
    ss_res = float(np.dot(residuals, residuals))
    deviations = ys - sum_y / n
    ss_tot = float(np.dot(deviations, deviations))

    if ss_tot == 0.0:
        r_squared = 1.0 if ss_res <= _RESIDUAL_TOLERANCE else 0.0
    else:
        r_squared = 1.0 - ss_res / ss_tot

    return RegressionFit(
        slope=float(slope),
        intercept=float(intercept),
        r_squared=float(r_squared),
        n=int(n),
    )
