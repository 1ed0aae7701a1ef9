"""Parameter advisories shown before a run starts.

Technique-specific checks come first, followed by three general lines
(expected duration, sensitivity, complexity) that every technique gets.
"""

from __future__ import annotations

import math
from typing import Mapping

from echem_simulator.config.catalog import resolve_technique
from echem_simulator.config.technique import TechniqueDescriptor


def _technique_advice(technique_id: str, params: Mapping[str, float]) -> list[str]:
    advice: list[str] = []

    if technique_id == "cv":
        scan_rate = params.get("scanRate")
        if scan_rate is not None and scan_rate > 1.0:
            advice.append("High scan rate may lead to increased capacitive currents")
        if scan_rate is not None and scan_rate < 0.01:
            advice.append("Low scan rate provides better resolution of redox peaks")
        if params.get("numberOfScans", 0) > 10:
            advice.append("Multiple scans can help identify electrode stability")

    elif technique_id == "eis":
        if params.get("acAmplitude", 0) > 0.05:
            advice.append("Large AC amplitude may cause non-linear responses")
        ppd = params.get("pointsPerDecade")
        if ppd is not None and ppd < 10:
            advice.append("Consider increasing points per decade for better resolution")
        f_start, f_end = params.get("startFrequency"), params.get("endFrequency")
        if f_start and f_end and f_start > 0 and f_end > 0 and math.log10(f_start / f_end) < 3:
            advice.append("Wider frequency range recommended for complete characterization")

    elif technique_id == "ca":
        duration = params.get("stepDuration")
        if duration is not None and duration < 60:
            advice.append("Longer duration may be needed to reach steady state")
        rate = params.get("samplingRate")
        if rate is not None and rate < 1:
            advice.append("Higher sampling rate recommended for initial transient")

    elif technique_id == "dpv":
        if params.get("pulseAmplitude", 0) > 0.08:
            advice.append("Large pulse amplitude may broaden peaks")

    elif technique_id == "swv":
        if params.get("frequency", 0) > 100:
            advice.append("High frequency may affect sensitivity")

    return advice


def generate_recommendations(
    technique: TechniqueDescriptor | str,
    parameters: Mapping[str, float] | None = None,
) -> list[str]:
    """Advisory strings for a technique and (validated) parameter set.

    Missing parameters are treated as unset, so the catalogue defaults
    should be merged in by the caller if they are wanted in the checks.
    """
    descriptor = resolve_technique(technique)
    recommendations = _technique_advice(descriptor.id, parameters or {})
    recommendations.append(f"Expected measurement time: {descriptor.time_range.typical:g} seconds")
    recommendations.append(f"Technique sensitivity level: {descriptor.sensitivity}/10")
    recommendations.append(f"Complexity level: {descriptor.complexity}/10")
    return recommendations
