"""Impedance model — EIS over a logarithmic frequency sweep.

Frequency at progress p:
  f = 10^(log10 f_start + p · (log10 f_end − log10 f_start))

Impedance from a Randles equivalent circuit:
  Z = Rs + (Rct ‖ Cdl) + Zw
  Zcdl = 1 / (jωCdl)
  Zw   = σ/√ω · (1 − j)

Output follows the Nyquist convention: x = Z′, y = −Z″, z = f and
phase = atan2(−Z″, Z′) in degrees.  Real and imaginary parts get independent
noise draws with different scales (10 Ω and 5 Ω per unit noise).
"""

from __future__ import annotations

import math

import numpy as np

from echem_simulator.engine.noise import draw_noise
from echem_simulator.engine.parameters import ParameterSet
from echem_simulator.models.results import DataPoint

SOLUTION_RESISTANCE = 10.0        # Rs (Ω)
CHARGE_TRANSFER_RESISTANCE = 100.0  # Rct (Ω)
DOUBLE_LAYER_CAPACITANCE = 50e-6  # Cdl (F)
WARBURG_COEFFICIENT = 20.0        # σ (Ω·s^-½)

REAL_NOISE_SCALE = 10.0
IMAG_NOISE_SCALE = 5.0


def sweep_frequency(progress: float, start_frequency: float, end_frequency: float) -> float:
    """Log-interpolated frequency (Hz).  Both bounds must be > 0."""
    log_start = math.log10(start_frequency)
    log_end = math.log10(end_frequency)
    return 10 ** (log_start + progress * (log_end - log_start))


def randles_impedance(
    frequency: float,
    rs: float = SOLUTION_RESISTANCE,
    rct: float = CHARGE_TRANSFER_RESISTANCE,
    cdl: float = DOUBLE_LAYER_CAPACITANCE,
    sigma: float = WARBURG_COEFFICIENT,
) -> complex:
    """Complex impedance (Ω) of Rs + (Rct ‖ Cdl) + Zw at ``frequency`` (Hz)."""
    omega = 2 * math.pi * frequency
    z_cdl = 1 / (1j * omega * cdl)
    z_parallel = (rct * z_cdl) / (rct + z_cdl)
    z_warburg = sigma / math.sqrt(omega) * (1 - 1j)
    return rs + z_parallel + z_warburg


def phase_degrees(z_real: float, neg_z_imag: float) -> float:
    return math.degrees(math.atan2(neg_z_imag, z_real))


def generate_eis_point(
    progress: float,
    elapsed_time: float,
    params: ParameterSet,
    rng: np.random.Generator,
    noise_level: float,
) -> DataPoint:
    noise_real = draw_noise(rng, noise_level)
    noise_imag = draw_noise(rng, noise_level)

    frequency = sweep_frequency(progress, params["startFrequency"], params["endFrequency"])
    impedance = randles_impedance(frequency)

    z_real = impedance.real + noise_real * REAL_NOISE_SCALE
    z_imag = impedance.imag + noise_imag * IMAG_NOISE_SCALE

    return DataPoint(
        x=z_real,
        y=-z_imag,
        z=frequency,
        phase=phase_degrees(z_real, -z_imag),
        time=elapsed_time,
    )
