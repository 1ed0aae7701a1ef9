"""Analysis entry point — technique + snapshot → AnalysisResult.

Pure and read-only: the snapshot is never modified and a fresh result is
built on every call.  Empty and single-point series give a neutral result
with every optional field ``None``.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from echem_simulator.analysis.cottrell import analyze_chronoamperometry
from echem_simulator.analysis.impedance import analyze_impedance
from echem_simulator.analysis.voltammetry import analyze_cyclic, analyze_pulse, analyze_sweep
from echem_simulator.config.analysis import AnalysisConfig
from echem_simulator.config.catalog import resolve_technique
from echem_simulator.config.technique import TechniqueDescriptor
from echem_simulator.errors import UnknownTechniqueError
from echem_simulator.models.results import AnalysisResult, DataPoint

logger = logging.getLogger(__name__)


def analyze(
    technique: TechniqueDescriptor | str,
    points: Sequence[DataPoint],
    parameters: Mapping[str, float] | None = None,
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """Run the technique-specific analysis over ``points``.

    Raises
    ------
    UnknownTechniqueError
        If the technique is not registered or has no analysis branch.
    """
    descriptor = resolve_technique(technique)
    config = config or AnalysisConfig()
    points = tuple(points)
    logger.debug("Analyzing %d %s points", len(points), descriptor.id)

    if descriptor.id == "cv":
        return analyze_cyclic(descriptor.id, points, config)
    if descriptor.id == "lsv":
        return analyze_sweep(descriptor.id, points)
    if descriptor.category == "pulse":
        return analyze_pulse(descriptor.id, points, config)
    if descriptor.category == "impedance":
        return analyze_impedance(descriptor.id, points)
    if descriptor.category == "chronometric":
        return analyze_chronoamperometry(descriptor.id, points, parameters, config)
    raise UnknownTechniqueError(descriptor.id)
