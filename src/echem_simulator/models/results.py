"""Result types — the contract between engine, analysis and collaborators.

Renderers consume ``DataPoint`` sequences; reporting and export consume the
``AnalysisResult`` family.  Every optional analysis field defaults to
``None`` so that an empty or single-point series yields a neutral result.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


# ═══════════════════════════════════════════════════════════════════════════
# Series
# ═══════════════════════════════════════════════════════════════════════════

class DataPoint(BaseModel):
    """One simulated sample.  Immutable once created.

    Axis meaning depends on the technique:

    ==============  =================  ==================
    technique       x                  y
    ==============  =================  ==================
    CV / LSV        potential (V)      current (µA)
    DPV / SWV       potential (V)      current (µA)
    EIS             Z′ (Ω)             −Z″ (Ω)
    CA              time (s)           current (µA)
    ==============  =================  ==================

    EIS points also carry ``z`` (frequency, Hz) and ``phase`` (degrees).
    """

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float | None = None
    phase: float | None = None
    time: float | None = None
    """Elapsed simulated time (s).  Set by every technique model."""


class SimulationConfig(BaseModel):
    """Derived once per (technique, parameter set) at run start."""

    model_config = ConfigDict(frozen=True)

    technique_id: str
    total_simulated_time: float
    """Simulated duration of a complete run (s)."""
    sampling_rate: float
    """Nominal instrument sampling rate (Hz, or points/decade for EIS)."""
    data_points: int
    """Samples a complete run would record at the sampling rate."""
    update_interval_ms: float
    noise_level: float


# ═══════════════════════════════════════════════════════════════════════════
# Shared analysis primitives
# ═══════════════════════════════════════════════════════════════════════════

class Peak(BaseModel):
    """One detected peak."""

    model_config = ConfigDict(frozen=True)

    index: int
    potential: float
    current: float


class RegressionFit(BaseModel):
    """Ordinary least-squares fit y = slope·x + intercept."""

    model_config = ConfigDict(frozen=True)

    slope: float
    intercept: float
    r_squared: float
    n: int


class SeriesStatistics(BaseModel):
    """Channel-agnostic summary of a series (x = abscissa, y = signal)."""

    data_points: int
    max_current: float
    min_current: float
    average_current: float
    current_range: float
    x_min: float
    x_max: float
    data_quality: Literal["excellent", "good", "limited"]


# ═══════════════════════════════════════════════════════════════════════════
# Analysis results
# ═══════════════════════════════════════════════════════════════════════════

class AnalysisResult(BaseModel):
    """Base record shared by every technique-specific result."""

    technique_id: str
    point_count: int = 0
    statistics: SeriesStatistics | None = None


class VoltammetryAnalysis(AnalysisResult):
    """Cyclic voltammetry: redox peaks and their separation."""

    peaks: list[Peak] | None = None
    peak_currents: list[float] | None = None
    peak_potentials: list[float] | None = None
    peak_separation: float | None = None
    """|E_p2 − E_p1| of the two largest peaks (V)."""
    reversibility: Literal["irreversible", "quasi-reversible"] | None = None


class PulseAnalysis(VoltammetryAnalysis):
    """DPV / SWV: multi-analyte peaks."""

    peak_ratio: float | None = None
    """Height of the largest peak over the second largest."""


class SweepAnalysis(AnalysisResult):
    """Linear sweep: current envelope."""

    max_current: float | None = None
    min_current: float | None = None
    average_current: float | None = None


class ImpedanceAnalysis(AnalysisResult):
    """EIS: simplified Randles-circuit parameters from the Nyquist arc."""

    solution_resistance: float | None = None
    """min Z′ (Ω)."""
    charge_transfer_resistance: float | None = None
    """max Z′ − min Z′ (Ω) — full real-axis span taken as the semicircle diameter."""
    characteristic_frequency: float | None = None
    """Frequency at max −Z″ (Hz)."""
    max_phase: float | None = None
    """Largest phase angle in the sweep (degrees)."""


class ChronoamperometryAnalysis(AnalysisResult):
    """CA: transient summary and Cottrell diffusion analysis."""

    steady_state_current: float | None = None
    peak_current: float | None = None
    diffusion_coefficient: float | None = None
    """cm²/s, reported only when the Cottrell fit is good enough."""
    charge_transferred: float | None = None
    """mC."""
    cottrell_fit: RegressionFit | None = None
    """Current vs 1/√t fit (slope in µA·s½), reported only above the R² floor."""
