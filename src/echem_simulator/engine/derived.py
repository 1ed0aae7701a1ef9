"""Derived run parameters — technique + parameter set → SimulationConfig.

Pure arithmetic, computed once at run start:

  CV        T = |E_end − E_start| / scanRate × 2     (round trip)
  LSV       T = |E_end − E_start| / scanRate
  DPV/SWV   T = |E_end − E_start| / stepPotential × 0.1
  EIS       T = typical measurement time of the technique
  CA        T = stepDuration

Expected point count is T × sampling rate, except for EIS where the
sampling rate is points per decade: decades swept × pointsPerDecade.
"""

from __future__ import annotations

import math

from echem_simulator.config.run import RunConfig
from echem_simulator.config.technique import TechniqueDescriptor
from echem_simulator.engine.parameters import ParameterSet
from echem_simulator.errors import ConfigurationError, UnknownTechniqueError
from echem_simulator.models.results import SimulationConfig

VOLTAMMETRY_SAMPLING_HZ = 100.0
PULSE_TIME_PER_STEP_S = 0.1
"""Simulated seconds per pulse step."""


def compute_simulation_config(
    technique: TechniqueDescriptor,
    params: ParameterSet,
    run: RunConfig | None = None,
) -> SimulationConfig:
    """Compute total simulated time and sampling for one run.

    Raises
    ------
    ConfigurationError
        If the resulting duration is not a positive finite number.
    UnknownTechniqueError
        If the technique id has no timing rule.
    """
    run = run or RunConfig()
    span = abs(params.get("endPotential", 0.0) - params.get("startPotential", 0.0))

    # ── Duration & sampling per technique ──────────────────────────────
    if technique.id == "cv":
        total_time = span / params["scanRate"] * 2
        sampling_rate = VOLTAMMETRY_SAMPLING_HZ
    elif technique.id == "lsv":
        total_time = span / params["scanRate"]
        sampling_rate = VOLTAMMETRY_SAMPLING_HZ
    elif technique.id in ("dpv", "swv"):
        total_time = span / params["stepPotential"] * PULSE_TIME_PER_STEP_S
        sampling_rate = VOLTAMMETRY_SAMPLING_HZ
    elif technique.id == "eis":
        total_time = technique.time_range.typical
        sampling_rate = params.get("pointsPerDecade", 10.0)
        decades = abs(math.log10(params["startFrequency"]) - math.log10(params["endFrequency"]))
    elif technique.id == "ca":
        total_time = params.get("stepDuration", 300.0)
        sampling_rate = params.get("samplingRate", 10.0)
    else:
        raise UnknownTechniqueError(technique.id)

    if not math.isfinite(total_time) or total_time <= 0:
        raise ConfigurationError(
            f"{technique.abbreviation}: simulated duration must be positive, got {total_time}"
        )

    expected_points = (
        decades * sampling_rate if technique.id == "eis" else total_time * sampling_rate
    )

    return SimulationConfig(
        technique_id=technique.id,
        total_simulated_time=total_time,
        sampling_rate=sampling_rate,
        data_points=max(1, round(expected_points)),
        update_interval_ms=run.update_interval_ms,
        noise_level=run.noise_level,
    )
