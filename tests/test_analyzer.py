"""Tests for analysis/analyzer.py and analysis/voltammetry.py.

Covers:
  - Dispatch to the right result type per technique
  - Empty-series safety for every technique
  - CV: peak separation and reversibility classification
  - Pulse: three-peak detection and peak ratio
  - LSV: current envelope
  - Basic statistics and data-quality grading
  - Peak detection idempotent on a controller snapshot
"""

from __future__ import annotations

import numpy as np
import pytest

from echem_simulator.analysis import analyze, basic_statistics, data_quality, detect_peaks
from echem_simulator.analysis.voltammetry import classify_reversibility
from echem_simulator.config import TECHNIQUE_CATALOG, TechniqueDescriptor, TimeRange, VoltageRange
from echem_simulator.engine.pulse import pulse_current
from echem_simulator.errors import UnknownTechniqueError
from echem_simulator.models.results import (
    ChronoamperometryAnalysis,
    ImpedanceAnalysis,
    PulseAnalysis,
    SweepAnalysis,
    VoltammetryAnalysis,
)


@pytest.fixture
def potentials() -> np.ndarray:
    return np.linspace(-0.5, 0.5, 1001)


def _gaussian(x, center, height, width):
    return height * np.exp(-((x - center) ** 2) / (2 * width * width))


# ═══════════════════════════════════════════════════════════════════════════
# Dispatch & empty-series safety
# ═══════════════════════════════════════════════════════════════════════════

class TestDispatch:
    @pytest.mark.parametrize("technique_id,expected", [
        ("cv", VoltammetryAnalysis),
        ("lsv", SweepAnalysis),
        ("dpv", PulseAnalysis),
        ("swv", PulseAnalysis),
        ("eis", ImpedanceAnalysis),
        ("ca", ChronoamperometryAnalysis),
    ])
    def test_result_type(self, technique_id, expected):
        assert type(analyze(technique_id, ())) is expected

    @pytest.mark.parametrize("technique_id", list(TECHNIQUE_CATALOG))
    def test_empty_series_is_neutral(self, technique_id):
        result = analyze(technique_id, [])
        assert result.technique_id == technique_id
        assert result.point_count == 0
        optional = result.model_dump(exclude={"technique_id", "point_count"})
        assert all(value is None for value in optional.values())

    def test_unknown_id(self):
        with pytest.raises(UnknownTechniqueError):
            analyze("polarography", [])

    def test_descriptor_without_analysis_branch(self):
        custom = TechniqueDescriptor(
            id="acv", name="AC Voltammetry", abbreviation="ACV", category="voltammetry",
            time_range=TimeRange(min=1, max=10, typical=5),
            voltage_range=VoltageRange(min=-1, max=1),
            sensitivity=5, complexity=5,
        )
        with pytest.raises(UnknownTechniqueError):
            analyze(custom, [])

    def test_snapshot_not_modified(self, make_series, potentials):
        series = make_series(potentials, _gaussian(potentials, 0.1, 10, 0.02))
        before = tuple(series)
        analyze("cv", series)
        assert series == before


# ═══════════════════════════════════════════════════════════════════════════
# Voltammetry
# ═══════════════════════════════════════════════════════════════════════════

class TestCyclicAnalysis:
    def test_wide_separation_irreversible(self, make_series, potentials):
        currents = _gaussian(potentials, -0.1, 8, 0.02) + _gaussian(potentials, 0.1, 10, 0.02)
        result = analyze("cv", make_series(potentials, currents))
        assert result.peak_potentials == pytest.approx([0.1, -0.1])
        assert result.peak_separation == pytest.approx(0.2)
        assert result.reversibility == "irreversible"

    def test_narrow_separation_quasi_reversible(self, make_series, potentials):
        currents = _gaussian(potentials, 0.0, 10, 0.005) + _gaussian(potentials, 0.05, 9, 0.005)
        result = analyze("cv", make_series(potentials, currents))
        assert result.peak_separation == pytest.approx(0.05, abs=0.002)
        assert result.reversibility == "quasi-reversible"

    def test_single_peak_has_no_separation(self, make_series, potentials):
        result = analyze("cv", make_series(potentials, _gaussian(potentials, 0.1, 10, 0.02)))
        assert len(result.peaks) == 1
        assert result.peak_separation is None
        assert result.reversibility is None

    def test_classify_threshold(self):
        assert classify_reversibility(0.059) == "quasi-reversible"
        assert classify_reversibility(0.06) == "irreversible"

    def test_peak_detection_idempotent_on_run(self, completed_cv):
        snapshot = completed_cv.series
        assert detect_peaks(snapshot) == detect_peaks(snapshot)


class TestPulseAnalysis:
    def test_three_peaks(self, make_series, potentials):
        currents = [pulse_current(v, 0.0) for v in potentials]
        result = analyze("dpv", make_series(potentials, currents))
        assert len(result.peaks) == 3
        assert result.peak_potentials[0] == pytest.approx(0.0, abs=0.002)
        assert result.peak_potentials[1] == pytest.approx(-0.2, abs=0.002)
        # the main peak's tail pulls the third apex below E0 + 0.15
        third_apex = max((v for v in potentials if 0.1 < v < 0.2), key=lambda v: pulse_current(v, 0.0))
        assert third_apex < 0.15
        assert result.peak_potentials[2] == pytest.approx(third_apex)
        assert result.peak_ratio == pytest.approx(50 / 30, rel=0.02)


class TestSweepAnalysis:
    def test_envelope(self, make_series, potentials):
        currents = 25 * np.tanh(potentials * 10)
        result = analyze("lsv", make_series(potentials, currents))
        assert result.max_current == pytest.approx(25.0, rel=1e-3)
        assert result.min_current == pytest.approx(-25.0, rel=1e-3)
        assert result.average_current == pytest.approx(0.0, abs=1e-9)


# ═══════════════════════════════════════════════════════════════════════════
# Statistics
# ═══════════════════════════════════════════════════════════════════════════

class TestStatistics:
    @pytest.mark.parametrize("count,quality", [
        (0, "limited"), (50, "limited"), (51, "good"), (100, "good"), (101, "excellent"),
    ])
    def test_data_quality(self, count, quality):
        assert data_quality(count) == quality

    def test_basic_statistics(self, make_series):
        stats = basic_statistics(make_series([0, 1, 2, 3], [1, -1, 4, 2]))
        assert stats.max_current == 4
        assert stats.min_current == -1
        assert stats.average_current == pytest.approx(1.5)
        assert stats.current_range == 5
        assert (stats.x_min, stats.x_max) == (0, 3)
        assert stats.data_quality == "limited"

    def test_empty(self):
        assert basic_statistics(()) is None

    def test_attached_to_results(self, completed_cv):
        result = completed_cv.analyze()
        assert result.statistics.data_points == len(completed_cv.series)
