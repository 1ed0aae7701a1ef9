"""Configuration models and the technique registry."""

from echem_simulator.config.technique import (
    ParameterSpec,
    TechniqueDescriptor,
    TimeRange,
    VoltageRange,
)
from echem_simulator.config.catalog import (
    TECHNIQUE_CATALOG,
    find_technique,
    get_technique,
    get_techniques_by_application,
    get_techniques_by_category,
    resolve_technique,
)
from echem_simulator.config.run import RunConfig
from echem_simulator.config.analysis import AnalysisConfig
from echem_simulator.config.experiment import ExperimentConfig

__all__ = [
    "ParameterSpec",
    "TechniqueDescriptor",
    "TimeRange",
    "VoltageRange",
    "TECHNIQUE_CATALOG",
    "find_technique",
    "get_technique",
    "get_techniques_by_application",
    "get_techniques_by_category",
    "resolve_technique",
    "RunConfig",
    "AnalysisConfig",
    "ExperimentConfig",
]
