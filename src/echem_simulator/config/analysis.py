"""Analysis settings — peak detection, regression and integration knobs."""

from typing import Literal

from pydantic import BaseModel, Field


class AnalysisConfig(BaseModel):
    """Tunables for the analysis engine."""

    # --- Peak detection ---
    peak_window: int = Field(
        default=2, ge=1,
        description="A peak must exceed every neighbour within ±window samples",
    )
    min_peak_separation: int = Field(
        default=5, ge=1,
        description="Candidates closer than this many samples to an accepted peak are dropped",
    )
    relative_peak_threshold: float = Field(
        default=0.1, ge=0, le=1.0,
        description="Amplitude threshold as a fraction of the global maximum",
    )
    absolute_peak_threshold: float | None = Field(
        default=None,
        description="Fixed amplitude threshold (µA).  Overrides the relative one when set.",
    )

    # --- Cottrell regression ---
    cottrell_min_time: float = Field(
        default=1.0, ge=0,
        description="Only points with t > this (s) enter the Cottrell fit, "
                    "skipping the capacitive transient",
    )
    min_r_squared: float = Field(
        default=0.8, ge=0, le=1.0,
        description="Fits at or below this R² are not reported",
    )

    # --- Voltammetry ---
    reversibility_threshold_v: float = Field(
        default=0.059, gt=0,
        description="Peak separations above this (V) are classed irreversible",
    )

    # --- Chronoamperometry ---
    charge_integration: Literal["trapezoid", "discrete_sum"] = Field(
        default="trapezoid",
        description="'trapezoid' integrates current over time (mC). "
                    "'discrete_sum' is the uncalibrated Σy × 0.001 figure.",
    )
