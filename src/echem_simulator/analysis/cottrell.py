"""Chronoamperometry analysis — steady state, charge and Cottrell diffusion.

Cottrell: i(t) = n·F·A·C·√D / √(π·t), so current is linear in 1/√t with

  slope = n·F·A·C·√D / √π       →      D = (slope·√π / (n·F·A·C))²

The fit uses only points with t > ``cottrell_min_time`` to skip the initial
capacitive transient, and is reported only when R² clears the configured
floor.  The slope comes out in µA·s½ and is converted to A·s½ first.

Charge transferred (mC) is a trapezoidal integral of current over time.
``charge_integration="discrete_sum"`` instead sums currents without the
sample spacing (Σi × 0.001).
"""

from __future__ import annotations

import math
from typing import Literal, Mapping, Sequence

import numpy as np
from scipy.integrate import trapezoid

from echem_simulator.config.analysis import AnalysisConfig
from echem_simulator.constants import AMPS_TO_MICROAMPS, CONCENTRATION, ELECTRONS, FARADAY
from echem_simulator.analysis.regression import linear_regression
from echem_simulator.analysis.statistics import basic_statistics
from echem_simulator.models.results import (
    ChronoamperometryAnalysis,
    DataPoint,
    RegressionFit,
)

STEADY_STATE_MAX_POINTS = 10


def _times(points: Sequence[DataPoint]) -> np.ndarray:
    return np.array([p.time if p.time is not None else p.x for p in points], dtype=np.float64)


def _currents(points: Sequence[DataPoint]) -> np.ndarray:
    return np.array([p.y for p in points], dtype=np.float64)


def steady_state_current(currents: Sequence[float] | np.ndarray) -> float | None:
    """Mean of the last ``max(1, min(10, n // 4))`` samples."""
    y = np.asarray(currents, dtype=np.float64)
    if y.size == 0:
        return None
    window = max(1, min(STEADY_STATE_MAX_POINTS, y.size // 4))
    return float(y[-window:].mean())


def charge_transferred(
    times: Sequence[float] | np.ndarray,
    currents: Sequence[float] | np.ndarray,
    method: Literal["trapezoid", "discrete_sum"] = "trapezoid",
) -> float:
    """Charge in mC from currents in µA over times in s."""
    y = np.asarray(currents, dtype=np.float64)
    if method == "discrete_sum":
        return float(y.sum() * 0.001)
    if y.size < 2:
        return 0.0
    # µA·s = µC → mC
    return float(trapezoid(y, np.asarray(times, dtype=np.float64)) * 1e-3)


def cottrell_fit(
    points: Sequence[DataPoint],
    min_time: float = 1.0,
) -> RegressionFit | None:
    """Regress current on 1/√t over the points with t > ``min_time``."""
    t = _times(points)
    mask = t > min_time
    if np.count_nonzero(mask) < 2:
        return None
    return linear_regression(1.0 / np.sqrt(t[mask]), _currents(points)[mask])


def diffusion_coefficient_from_slope(slope: float, electrode_area: float = 1.0) -> float:
    """Invert the Cottrell slope (µA·s½) into D (cm²/s)."""
    slope_amps = slope / AMPS_TO_MICROAMPS
    return ((slope_amps * math.sqrt(math.pi)) / (ELECTRONS * FARADAY * electrode_area * CONCENTRATION)) ** 2


def analyze_chronoamperometry(
    technique_id: str,
    points: Sequence[DataPoint],
    params: Mapping[str, float] | None = None,
    config: AnalysisConfig | None = None,
) -> ChronoamperometryAnalysis:
    config = config or AnalysisConfig()
    params = params or {}

    result = ChronoamperometryAnalysis(technique_id=technique_id, point_count=len(points))
    if len(points) < 2:
        return result

    times = _times(points)
    currents = _currents(points)

    fit = cottrell_fit(points, config.cottrell_min_time)
    reported_fit = fit if fit is not None and fit.r_squared > config.min_r_squared else None
    diffusion = None
    if reported_fit is not None and reported_fit.slope > 0:
        diffusion = diffusion_coefficient_from_slope(
            reported_fit.slope, params.get("electrodeArea", 1.0),
        )

    return result.model_copy(update={
        "statistics": basic_statistics(points),
        "steady_state_current": steady_state_current(currents),
        "peak_current": float(currents.max()),
        "charge_transferred": charge_transferred(times, currents, config.charge_integration),
        "cottrell_fit": reported_fit,
        "diffusion_coefficient": diffusion,
    })
