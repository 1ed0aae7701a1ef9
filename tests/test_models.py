"""Tests for the technique models (engine/voltammetry, pulse, impedance, chronometric).

Covers:
  - Triangular CV potential: start → vertex at progress 0.5 → back to start
  - Butler–Volmer current sign and zero at the formal potential
  - LSV tanh plateau
  - Pulse model: three Gaussian peaks, main peak at E0
  - EIS: logarithmic frequency sweep, Randles limits, positive −Z″
  - CA: Cottrell decay, t = 0 floor, time on the x-axis
  - Noise: seeded determinism, draw consumed at zero noise
  - Dispatch: unknown technique raises
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from echem_simulator.config import get_technique
from echem_simulator.engine.chronometric import MIN_ELAPSED_S, cottrell_current, generate_ca_point
from echem_simulator.engine.impedance import (
    CHARGE_TRANSFER_RESISTANCE,
    SOLUTION_RESISTANCE,
    randles_impedance,
    sweep_frequency,
)
from echem_simulator.engine.models import TECHNIQUE_MODELS, generate_point, get_model
from echem_simulator.engine.noise import draw_noise, make_rng
from echem_simulator.engine.parameters import validate_parameters
from echem_simulator.engine.pulse import PEAKS, pulse_current
from echem_simulator.engine.voltammetry import butler_volmer_current, triangular_potential
from echem_simulator.errors import UnknownTechniqueError


# ═══════════════════════════════════════════════════════════════════════════
# Voltammetry
# ═══════════════════════════════════════════════════════════════════════════

class TestCyclicVoltammetry:
    def test_triangular_waveform(self):
        assert triangular_potential(0.0, -0.5, 0.5) == pytest.approx(-0.5)
        assert triangular_potential(0.25, -0.5, 0.5) == pytest.approx(0.0)
        assert triangular_potential(0.5, -0.5, 0.5) == pytest.approx(0.5)
        assert triangular_potential(1.0, -0.5, 0.5) == pytest.approx(-0.5)

    def test_butler_volmer_zero_at_formal_potential(self):
        assert butler_volmer_current(0.0) == pytest.approx(0.0)

    def test_butler_volmer_sign(self):
        assert butler_volmer_current(0.1) > 0
        assert butler_volmer_current(-0.1) < 0

    def test_larger_area_larger_current(self):
        assert butler_volmer_current(0.1, electrode_area=2.0) == pytest.approx(
            2 * butler_volmer_current(0.1)
        )

    def test_point_carries_time(self, cv, cv_params, rng):
        params = validate_parameters(cv, cv_params)
        point = generate_point(cv, 0.25, 2.5, params, rng, noise_level=0.0)
        assert point.x == pytest.approx(0.0)
        assert point.time == 2.5
        assert point.z is None


class TestLinearSweep:
    def test_plateaus(self, rng):
        lsv = get_technique("lsv")
        params = validate_parameters(lsv, {"startPotential": -0.6, "endPotential": 0.6})
        first = generate_point(lsv, 0.0, 0.0, params, rng, noise_level=0.0)
        last = generate_point(lsv, 1.0, 12.0, params, rng, noise_level=0.0)
        assert first.y == pytest.approx(-25.0, rel=1e-3)
        assert last.y == pytest.approx(25.0, rel=1e-3)


# ═══════════════════════════════════════════════════════════════════════════
# Pulse
# ═══════════════════════════════════════════════════════════════════════════

class TestPulse:
    def test_main_peak_at_formal_potential(self):
        assert pulse_current(0.0, e0=0.0) == pytest.approx(50.0, rel=0.01)

    def test_secondary_peaks_present(self):
        for offset, height in PEAKS[1:]:
            assert pulse_current(offset, e0=0.0) == pytest.approx(height, rel=0.05)

    @pytest.mark.parametrize("technique_id", ["dpv", "swv"])
    def test_linear_sweep(self, technique_id, rng):
        technique = get_technique(technique_id)
        params = validate_parameters(technique, {})
        point = generate_point(technique, 0.5, 1.0, params, rng, noise_level=0.0)
        assert point.x == pytest.approx(0.0)
        assert point.y == pytest.approx(pulse_current(0.0, 0.0))


# ═══════════════════════════════════════════════════════════════════════════
# Impedance
# ═══════════════════════════════════════════════════════════════════════════

class TestImpedance:
    def test_log_sweep_endpoints(self):
        assert sweep_frequency(0.0, 1e5, 0.1) == pytest.approx(1e5)
        assert sweep_frequency(1.0, 1e5, 0.1) == pytest.approx(0.1)
        assert sweep_frequency(0.5, 1e4, 1.0) == pytest.approx(100.0)

    def test_high_frequency_limit_is_solution_resistance(self):
        z = randles_impedance(1e7)
        assert z.real == pytest.approx(SOLUTION_RESISTANCE, abs=0.5)

    def test_warburg_tail_at_low_frequency(self):
        z = randles_impedance(0.01)
        assert z.real > SOLUTION_RESISTANCE + CHARGE_TRANSFER_RESISTANCE

    def test_capacitive_arc(self):
        z = randles_impedance(30.0)
        assert -z.imag > 0

    def test_point_layout(self, eis, eis_params, rng):
        params = validate_parameters(eis, eis_params)
        point = generate_point(eis, 0.5, 150.0, params, rng, noise_level=0.0)
        z = randles_impedance(point.z)
        assert point.x == pytest.approx(z.real)
        assert point.y == pytest.approx(-z.imag)
        assert point.phase == pytest.approx(math.degrees(math.atan2(-z.imag, z.real)))
        assert point.time == 150.0

    def test_fifty_point_sweep_matches_log_interpolation(self, eis, eis_params, rng):
        params = validate_parameters(eis, eis_params)
        frequencies = [
            generate_point(eis, i / 49, 0.0, params, rng, noise_level=0.02).z
            for i in range(50)
        ]
        expected = [10 ** (5 + (i / 49) * (-1 - 5)) for i in range(50)]
        assert frequencies == pytest.approx(expected, rel=1e-9)
        assert all(a > b for a, b in zip(frequencies, frequencies[1:]))


# ═══════════════════════════════════════════════════════════════════════════
# Chronoamperometry
# ═══════════════════════════════════════════════════════════════════════════

class TestChronoamperometry:
    def test_cottrell_decays(self):
        assert cottrell_current(1.0) > cottrell_current(4.0)
        assert cottrell_current(1.0) == pytest.approx(2 * cottrell_current(4.0))

    def test_time_zero_floored(self):
        assert cottrell_current(0.0) == cottrell_current(MIN_ELAPSED_S)
        assert math.isfinite(cottrell_current(0.0))

    def test_first_point_finite(self, ca, ca_params, rng):
        params = validate_parameters(ca, ca_params)
        point = generate_ca_point(0.0, 0.0, params, rng, 0.02)
        assert math.isfinite(point.y)
        assert point.x == 0.0
        assert point.time == 0.0


# ═══════════════════════════════════════════════════════════════════════════
# Noise & dispatch
# ═══════════════════════════════════════════════════════════════════════════

class TestNoise:
    def test_bounds(self, rng):
        draws = [draw_noise(rng, 0.2) for _ in range(1000)]
        assert all(-0.1 <= d < 0.1 for d in draws)

    def test_zero_noise_still_consumes(self):
        a, b = make_rng(5), make_rng(5)
        assert draw_noise(a, 0.0) == 0.0
        draw_noise(b, 0.3)
        assert a.random() == b.random()

    def test_seeded_models_reproducible(self, cv, cv_params):
        params = validate_parameters(cv, cv_params)
        first = generate_point(cv, 0.3, 3.0, params, make_rng(9))
        second = generate_point(cv, 0.3, 3.0, params, make_rng(9))
        assert first == second


class TestDispatch:
    def test_every_registered_technique_has_model(self):
        assert set(TECHNIQUE_MODELS) == {"cv", "lsv", "dpv", "swv", "eis", "ca"}

    def test_unknown_raises(self):
        with pytest.raises(UnknownTechniqueError):
            get_model("polarography")

    def test_accepts_descriptor(self, eis):
        assert get_model(eis) is get_model("eis")
