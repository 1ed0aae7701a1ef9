"""Result models — simulation and analysis output contracts."""

from echem_simulator.models.results import (
    AnalysisResult,
    ChronoamperometryAnalysis,
    DataPoint,
    ImpedanceAnalysis,
    Peak,
    PulseAnalysis,
    RegressionFit,
    SeriesStatistics,
    SimulationConfig,
    SweepAnalysis,
    VoltammetryAnalysis,
)

__all__ = [
    "AnalysisResult",
    "ChronoamperometryAnalysis",
    "DataPoint",
    "ImpedanceAnalysis",
    "Peak",
    "PulseAnalysis",
    "RegressionFit",
    "SeriesStatistics",
    "SimulationConfig",
    "SweepAnalysis",
    "VoltammetryAnalysis",
]
