"""Engine — parameter validation, technique models and the tick-driven controller."""

from echem_simulator.engine.parameters import ParameterSet, validate_parameters
from echem_simulator.engine.derived import compute_simulation_config
from echem_simulator.engine.noise import draw_noise, make_rng
from echem_simulator.engine.models import TECHNIQUE_MODELS, generate_point, get_model
from echem_simulator.engine.series import SeriesStore
from echem_simulator.engine.controller import (
    SimulationController,
    SimulationStatus,
)

__all__ = [
    "ParameterSet",
    "validate_parameters",
    "compute_simulation_config",
    "draw_noise",
    "make_rng",
    "TECHNIQUE_MODELS",
    "generate_point",
    "get_model",
    "SeriesStore",
    "SimulationController",
    "SimulationStatus",
]
