"""Shared test fixtures — seeded generators, quiet run settings, sample parameter sets."""

from __future__ import annotations

import numpy as np
import pytest

from echem_simulator.config import AnalysisConfig, RunConfig, get_technique
from echem_simulator.engine.controller import SimulationController
from echem_simulator.models.results import DataPoint


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def quiet_run() -> RunConfig:
    """Seeded, noise-free run at 10× speed."""
    return RunConfig(noise_level=0.0, random_seed=7, speed=10.0)


@pytest.fixture
def seeded_run() -> RunConfig:
    return RunConfig(random_seed=1234, speed=10.0)


@pytest.fixture
def analysis_config() -> AnalysisConfig:
    return AnalysisConfig()


@pytest.fixture
def cv_params() -> dict[str, float]:
    """Symmetric ±0.5 V window at room temperature."""
    return {
        "startPotential": -0.5,
        "endPotential": 0.5,
        "scanRate": 0.1,
        "temperature": 25.0,
        "electrodeArea": 1.0,
    }


@pytest.fixture
def eis_params() -> dict[str, float]:
    return {"startFrequency": 1e5, "endFrequency": 0.1, "pointsPerDecade": 10}


@pytest.fixture
def ca_params() -> dict[str, float]:
    return {"stepDuration": 60, "samplingRate": 10, "electrodeArea": 1.0}


@pytest.fixture
def cv():
    return get_technique("cv")


@pytest.fixture
def eis():
    return get_technique("eis")


@pytest.fixture
def ca():
    return get_technique("ca")


@pytest.fixture
def cv_controller(cv_params, seeded_run) -> SimulationController:
    return SimulationController("cv", cv_params, run=seeded_run)


@pytest.fixture
def completed_cv(cv_controller) -> SimulationController:
    cv_controller.run_to_completion()
    return cv_controller


@pytest.fixture
def make_series():
    """Factory: build a snapshot from parallel x / y (/ time) sequences."""

    def _make(xs, ys, times=None) -> tuple[DataPoint, ...]:
        times = xs if times is None else times
        return tuple(
            DataPoint(x=float(x), y=float(y), time=float(t)) for x, y, t in zip(xs, ys, times)
        )

    return _make
