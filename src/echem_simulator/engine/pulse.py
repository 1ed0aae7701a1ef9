"""Pulse voltammetry model — DPV and SWV.

The potential ramps linearly; the differential current is the sum of three
Gaussian peaks modelling a multi-analyte sample:

  peak   position    height (µA)
  ----   ---------   -----------
  1      E0          50
  2      E0 − 0.20   30
  3      E0 + 0.15   20

all with width σ = 0.05 V, plus 5·noise.
"""

from __future__ import annotations

import math

import numpy as np

from echem_simulator.engine.noise import draw_noise
from echem_simulator.engine.parameters import ParameterSet
from echem_simulator.engine.voltammetry import formal_potential, linear_potential
from echem_simulator.models.results import DataPoint

PEAK_WIDTH = 0.05
PEAKS: tuple[tuple[float, float], ...] = (
    (0.0, 50.0),
    (-0.2, 30.0),
    (0.15, 20.0),
)
"""(offset from E0 in V, height in µA) per analyte."""


def gaussian_peak(potential: float, center: float, height: float, width: float = PEAK_WIDTH) -> float:
    return height * math.exp(-((potential - center) ** 2) / (2 * width * width))


def pulse_current(potential: float, e0: float) -> float:
    """Noise-free differential current (µA) at ``potential``."""
    return sum(gaussian_peak(potential, e0 + offset, height) for offset, height in PEAKS)


def generate_pulse_point(
    progress: float,
    elapsed_time: float,
    params: ParameterSet,
    rng: np.random.Generator,
    noise_level: float,
) -> DataPoint:
    noise = draw_noise(rng, noise_level)
    potential = linear_potential(progress, params["startPotential"], params["endPotential"])
    current = pulse_current(potential, formal_potential(params))
    return DataPoint(x=potential, y=current + noise * 5, time=elapsed_time)
