"""EIS analysis — simplified Randles parameters from the Nyquist arc.

  solution_resistance         = min Z′
  charge_transfer_resistance  = max Z′ − min Z′
  characteristic_frequency    = f at max −Z″

Treating the whole real-axis span as the semicircle diameter overstates Rct
when the Warburg tail is present.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from echem_simulator.analysis.statistics import basic_statistics
from echem_simulator.models.results import DataPoint, ImpedanceAnalysis


def impedance_magnitude(point: DataPoint) -> float:
    """|Z| (Ω) of a Nyquist point, for Bode-style consumers."""
    return math.hypot(point.x, point.y)


def analyze_impedance(technique_id: str, points: Sequence[DataPoint]) -> ImpedanceAnalysis:
    result = ImpedanceAnalysis(technique_id=technique_id, point_count=len(points))
    if len(points) < 2:
        return result

    z_real = np.array([p.x for p in points], dtype=np.float64)
    neg_z_imag = np.array([p.y for p in points], dtype=np.float64)

    apex = int(np.argmax(neg_z_imag))
    phases = [p.phase for p in points if p.phase is not None]

    return result.model_copy(update={
        "statistics": basic_statistics(points),
        "solution_resistance": float(z_real.min()),
        "charge_transfer_resistance": float(z_real.max() - z_real.min()),
        "characteristic_frequency": points[apex].z,
        "max_phase": max(phases) if phases else None,
    })
