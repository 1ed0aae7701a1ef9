"""Technique model dispatch — technique id → point generator.

Every generator has the signature::

    (progress, elapsed_time, params, rng, noise_level) -> DataPoint

and is pure given the same ``rng`` state.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from echem_simulator.config.technique import TechniqueDescriptor
from echem_simulator.engine.chronometric import generate_ca_point
from echem_simulator.engine.impedance import generate_eis_point
from echem_simulator.engine.parameters import ParameterSet
from echem_simulator.engine.pulse import generate_pulse_point
from echem_simulator.engine.voltammetry import generate_cv_point, generate_lsv_point
from echem_simulator.errors import UnknownTechniqueError
from echem_simulator.models.results import DataPoint

PointGenerator = Callable[[float, float, ParameterSet, np.random.Generator, float], DataPoint]

TECHNIQUE_MODELS: dict[str, PointGenerator] = {
    "cv": generate_cv_point,
    "lsv": generate_lsv_point,
    "dpv": generate_pulse_point,
    "swv": generate_pulse_point,
    "eis": generate_eis_point,
    "ca": generate_ca_point,
}


def get_model(technique: TechniqueDescriptor | str) -> PointGenerator:
    """Point generator for a technique.  No fallback for unknown ids."""
    technique_id = technique.id if isinstance(technique, TechniqueDescriptor) else technique
    try:
        return TECHNIQUE_MODELS[technique_id]
    except KeyError:
        raise UnknownTechniqueError(technique_id) from None


def generate_point(
    technique: TechniqueDescriptor | str,
    progress: float,
    elapsed_time: float,
    params: ParameterSet,
    rng: np.random.Generator,
    noise_level: float = 0.02,
) -> DataPoint:
    """Generate the sample at ``progress`` ∈ [0, 1] for ``technique``."""
    return get_model(technique)(progress, elapsed_time, params, rng, noise_level)
