"""Chronoamperometry model — current transient after a potential step.

  i_diff(t) = n·F·A·D·C / √(π·D·t)                 Cottrell, A → µA
  growth(t) = 1 + 0.1·ln(1 + t/100)                 biofilm growth
  i_cap(t)  = 100·exp(−t/10)                        double-layer charging, µA
  i(t)      = i_diff·growth + i_cap + noise·|0.1·i_diff|

At t → 0 the Cottrell term diverges, so t is floored at ``MIN_ELAPSED_S``
for the 1/√t evaluation only.
"""

from __future__ import annotations

import math

import numpy as np

from echem_simulator.constants import AMPS_TO_MICROAMPS, CONCENTRATION, ELECTRONS, FARADAY
from echem_simulator.engine.noise import draw_noise
from echem_simulator.engine.parameters import ParameterSet
from echem_simulator.models.results import DataPoint

DIFFUSION_COEFFICIENT = 1e-6    # cm²/s
CAPACITIVE_AMPLITUDE = 100.0    # µA
CAPACITIVE_TIME_CONSTANT = 10.0  # s
MIN_ELAPSED_S = 1e-3


def cottrell_current(
    t: float,
    diffusion_coefficient: float = DIFFUSION_COEFFICIENT,
    electrode_area: float = 1.0,
) -> float:
    """Diffusion-limited current (µA) at time ``t`` (s)."""
    t = max(t, MIN_ELAPSED_S)
    return (
        ELECTRONS * FARADAY * electrode_area * diffusion_coefficient * CONCENTRATION
        / math.sqrt(math.pi * diffusion_coefficient * t)
        * AMPS_TO_MICROAMPS
    )


def biofilm_growth_factor(t: float) -> float:
    return 1 + 0.1 * math.log(1 + t / 100)


def capacitive_current(t: float) -> float:
    return CAPACITIVE_AMPLITUDE * math.exp(-t / CAPACITIVE_TIME_CONSTANT)


def generate_ca_point(
    progress: float,
    elapsed_time: float,
    params: ParameterSet,
    rng: np.random.Generator,
    noise_level: float,
) -> DataPoint:
    noise = draw_noise(rng, noise_level)
    t = elapsed_time

    i_diff = cottrell_current(t, electrode_area=params.get("electrodeArea", 1.0))
    current = i_diff * biofilm_growth_factor(t) + capacitive_current(t) + noise * abs(i_diff * 0.1)

    return DataPoint(x=t, y=current, time=t)
