"""Analysis engine — pure functions over immutable series snapshots."""

from echem_simulator.analysis.analyzer import analyze
from echem_simulator.analysis.cottrell import (
    analyze_chronoamperometry,
    charge_transferred,
    cottrell_fit,
    diffusion_coefficient_from_slope,
    steady_state_current,
)
from echem_simulator.analysis.impedance import analyze_impedance, impedance_magnitude
from echem_simulator.analysis.peaks import find_peaks
from echem_simulator.analysis.recommendations import generate_recommendations
from echem_simulator.analysis.regression import linear_regression
from echem_simulator.analysis.statistics import basic_statistics, data_quality
from echem_simulator.analysis.voltammetry import (
    analyze_cyclic,
    analyze_pulse,
    analyze_sweep,
    classify_reversibility,
    detect_peaks,
)

__all__ = [
    "analyze",
    "analyze_chronoamperometry",
    "analyze_cyclic",
    "analyze_impedance",
    "analyze_pulse",
    "analyze_sweep",
    "basic_statistics",
    "charge_transferred",
    "classify_reversibility",
    "cottrell_fit",
    "data_quality",
    "detect_peaks",
    "diffusion_coefficient_from_slope",
    "find_peaks",
    "generate_recommendations",
    "impedance_magnitude",
    "linear_regression",
    "steady_state_current",
]
