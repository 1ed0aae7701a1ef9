"""Voltammetric technique models — CV and LSV.

CV drives a triangular potential waveform: start → end over the first half
of progress, end → start over the second.  The current follows a
Butler–Volmer expression around the formal potential E0 = (start + end) / 2:

  i = n·F·A·k0·C · (exp(α·n·F·η / RT) − exp(−(1−α)·n·F·η / RT))   [A → µA]

multiplied by a biofilm factor 1 + 0.3·exp(−5|η|) that boosts the current
near E0, plus noise proportional to the signal.

LSV is a single monotonic sweep with a sigmoidal response
25·tanh(10·(E − E0)) µA.
"""

from __future__ import annotations

import math

import numpy as np

from echem_simulator.constants import (
    AMPS_TO_MICROAMPS,
    CONCENTRATION,
    ELECTRONS,
    FARADAY,
    GAS_CONSTANT,
)
from echem_simulator.engine.noise import draw_noise
from echem_simulator.engine.parameters import ParameterSet
from echem_simulator.models.results import DataPoint

TRANSFER_COEFFICIENT = 0.5  # α
RATE_CONSTANT = 1e-4        # k0 (cm/s)


def formal_potential(params: ParameterSet) -> float:
    return (params["startPotential"] + params["endPotential"]) / 2


def triangular_potential(progress: float, start: float, end: float) -> float:
    """Potential at ``progress`` of a start → end → start cycle."""
    if progress <= 0.5:
        return start + (end - start) * (progress / 0.5)
    return end - (end - start) * ((progress - 0.5) / 0.5)


def linear_potential(progress: float, start: float, end: float) -> float:
    return start + progress * (end - start)


def butler_volmer_current(
    overpotential: float,
    temperature_c: float = 25.0,
    electrode_area: float = 1.0,
) -> float:
    """Faradaic current (µA) at ``overpotential`` (V)."""
    f = ELECTRONS * FARADAY / (GAS_CONSTANT * (273.15 + temperature_c))
    alpha = TRANSFER_COEFFICIENT
    return (
        ELECTRONS * FARADAY * electrode_area * RATE_CONSTANT * CONCENTRATION
        * (math.exp(alpha * f * overpotential) - math.exp(-(1 - alpha) * f * overpotential))
        * AMPS_TO_MICROAMPS
    )


def biofilm_factor(overpotential: float) -> float:
    return 1 + 0.3 * math.exp(-abs(overpotential) * 5)


def generate_cv_point(
    progress: float,
    elapsed_time: float,
    params: ParameterSet,
    rng: np.random.Generator,
    noise_level: float,
) -> DataPoint:
    noise = draw_noise(rng, noise_level)
    potential = triangular_potential(progress, params["startPotential"], params["endPotential"])

    overpotential = potential - formal_potential(params)
    current = butler_volmer_current(
        overpotential,
        temperature_c=params.get("temperature", 25.0),
        electrode_area=params.get("electrodeArea", 1.0),
    )

    return DataPoint(
        x=potential,
        y=current * biofilm_factor(overpotential) + noise * abs(current * 0.1),
        time=elapsed_time,
    )


def generate_lsv_point(
    progress: float,
    elapsed_time: float,
    params: ParameterSet,
    rng: np.random.Generator,
    noise_level: float,
) -> DataPoint:
    noise = draw_noise(rng, noise_level)
    potential = linear_potential(progress, params["startPotential"], params["endPotential"])
    current = 25 * math.tanh((potential - formal_potential(params)) * 10)
    return DataPoint(x=potential, y=current + noise * 2, time=elapsed_time)
