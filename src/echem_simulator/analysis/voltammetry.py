"""Voltammetric analysis — CV peaks, pulse peaks, linear-sweep envelope."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from echem_simulator.analysis.peaks import find_peaks
from echem_simulator.analysis.statistics import basic_statistics
from echem_simulator.config.analysis import AnalysisConfig
from echem_simulator.models.results import (
    DataPoint,
    Peak,
    PulseAnalysis,
    SweepAnalysis,
    VoltammetryAnalysis,
)


def detect_peaks(points: Sequence[DataPoint], config: AnalysisConfig | None = None) -> list[Peak]:
    """Peaks on the current channel, largest first."""
    config = config or AnalysisConfig()
    indices = find_peaks(
        [p.y for p in points],
        window=config.peak_window,
        relative_threshold=config.relative_peak_threshold,
        absolute_threshold=config.absolute_peak_threshold,
        min_separation=config.min_peak_separation,
    )
    return [Peak(index=i, potential=points[i].x, current=points[i].y) for i in indices]


def classify_reversibility(separation: float, threshold: float = 0.059) -> str:
    """Nernstian ΔEp for n = 1 is ~59 mV; wider separations are irreversible."""
    return "irreversible" if separation > threshold else "quasi-reversible"


def _peak_fields(peaks: list[Peak], config: AnalysisConfig) -> dict:
    fields: dict = {
        "peaks": peaks,
        "peak_currents": [p.current for p in peaks],
        "peak_potentials": [p.potential for p in peaks],
    }
    if len(peaks) >= 2:
        separation = abs(peaks[1].potential - peaks[0].potential)
        fields["peak_separation"] = separation
        fields["reversibility"] = classify_reversibility(separation, config.reversibility_threshold_v)
    return fields


def analyze_cyclic(
    technique_id: str,
    points: Sequence[DataPoint],
    config: AnalysisConfig | None = None,
) -> VoltammetryAnalysis:
    config = config or AnalysisConfig()
    result = VoltammetryAnalysis(technique_id=technique_id, point_count=len(points))
    if len(points) < 2:
        return result

    update = _peak_fields(detect_peaks(points, config), config)
    update["statistics"] = basic_statistics(points)
    return result.model_copy(update=update)


def analyze_pulse(
    technique_id: str,
    points: Sequence[DataPoint],
    config: AnalysisConfig | None = None,
) -> PulseAnalysis:
    config = config or AnalysisConfig()
    result = PulseAnalysis(technique_id=technique_id, point_count=len(points))
    if len(points) < 2:
        return result

    peaks = detect_peaks(points, config)
    update = _peak_fields(peaks, config)
    update["statistics"] = basic_statistics(points)
    if len(peaks) >= 2 and peaks[1].current != 0:
        update["peak_ratio"] = peaks[0].current / peaks[1].current
    return result.model_copy(update=update)


def analyze_sweep(technique_id: str, points: Sequence[DataPoint]) -> SweepAnalysis:
    result = SweepAnalysis(technique_id=technique_id, point_count=len(points))
    if len(points) < 2:
        return result

    currents = np.array([p.y for p in points], dtype=np.float64)
    return result.model_copy(update={
        "statistics": basic_statistics(points),
        "max_current": float(currents.max()),
        "min_current": float(currents.min()),
        "average_current": float(currents.mean()),
    })
