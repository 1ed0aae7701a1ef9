"""Technique registry — static catalogue of the six supported techniques.

The catalogue is loaded once at import and never mutated.  Lookups by id are
strict: an unknown id raises ``UnknownTechniqueError`` instead of falling back
to a voltammetry-shaped technique, since every model's physics differ.
"""

from __future__ import annotations

from types import MappingProxyType

from echem_simulator.config.technique import (
    ParameterSpec,
    TechniqueDescriptor,
    TimeRange,
    VoltageRange,
)
from echem_simulator.errors import UnknownTechniqueError


# ═══════════════════════════════════════════════════════════════════════════
# Shared parameter specs
# ═══════════════════════════════════════════════════════════════════════════

def _potential(name: str, default: float, description: str) -> ParameterSpec:
    return ParameterSpec(
        name=name, unit="V", min=-2.0, max=2.0, default=default, description=description,
    )


_ELECTRODE_AREA = ParameterSpec(
    name="Electrode Area", unit="cm²", min=0.01, max=100.0, default=1.0,
    description="Geometric area of the working electrode",
)

_TEMPERATURE = ParameterSpec(
    name="Temperature", unit="°C", min=0.0, max=100.0, default=25.0,
    description="Electrolyte temperature",
)

_SCAN_RATE = ParameterSpec(
    name="Scan Rate", unit="V/s", min=0.001, max=10.0, default=0.1,
    description="Rate of potential change",
)


# ═══════════════════════════════════════════════════════════════════════════
# Catalogue
# ═══════════════════════════════════════════════════════════════════════════

_CATALOG: tuple[TechniqueDescriptor, ...] = (
    TechniqueDescriptor(
        id="cv",
        name="Cyclic Voltammetry",
        abbreviation="CV",
        description="Measures current response to a linearly cycled potential",
        category="voltammetry",
        applications=(
            "Biofilm characterization",
            "Electron transfer kinetics",
            "Redox potential determination",
            "Electrode surface analysis",
            "Mediator studies",
        ),
        parameter_schema={
            "startPotential": _potential("Start Potential", -0.6, "Initial potential for the scan"),
            "endPotential": _potential("End Potential", 0.4, "Vertex potential of the scan"),
            "scanRate": _SCAN_RATE,
            "numberOfScans": ParameterSpec(
                name="Number of Scans", unit="cycles", min=1, max=100, default=3,
                description="Number of CV cycles to perform",
            ),
            "electrodeArea": _ELECTRODE_AREA,
            "temperature": _TEMPERATURE,
        },
        data_types=("potential", "current", "time"),
        time_range=TimeRange(min=10, max=3600, typical=120),
        voltage_range=VoltageRange(min=-2.0, max=2.0),
        sensitivity=7,
        complexity=5,
    ),
    TechniqueDescriptor(
        id="eis",
        name="Electrochemical Impedance Spectroscopy",
        abbreviation="EIS",
        description="Measures impedance over a frequency sweep to characterize electrode processes",
        category="impedance",
        applications=(
            "Biofilm resistance measurement",
            "Charge transfer resistance",
            "Double layer capacitance",
            "Mass transport analysis",
            "Electrode degradation monitoring",
        ),
        parameter_schema={
            "dcPotential": ParameterSpec(
                name="DC Potential", unit="V", min=-1.0, max=1.0, default=0.0,
                description="DC bias potential",
            ),
            "acAmplitude": ParameterSpec(
                name="AC Amplitude", unit="V", min=0.001, max=0.1, default=0.01,
                description="AC perturbation amplitude",
            ),
            "startFrequency": ParameterSpec(
                name="Start Frequency", unit="Hz", min=0.01, max=1_000_000, default=100_000,
                description="Starting frequency for sweep",
            ),
            "endFrequency": ParameterSpec(
                name="End Frequency", unit="Hz", min=0.01, max=1_000_000, default=0.1,
                description="Ending frequency for sweep",
            ),
            "pointsPerDecade": ParameterSpec(
                name="Points per Decade", unit="points", min=5, max=20, default=10,
                description="Number of measurement points per frequency decade",
            ),
        },
        data_types=("frequency", "impedance_real", "impedance_imaginary", "phase"),
        time_range=TimeRange(min=60, max=1800, typical=300),
        voltage_range=VoltageRange(min=-1.0, max=1.0),
        sensitivity=9,
        complexity=8,
    ),
    TechniqueDescriptor(
        id="ca",
        name="Chronoamperometry",
        abbreviation="CA",
        description="Measures current response to a potential step as a function of time",
        category="chronometric",
        applications=(
            "Diffusion coefficient measurement",
            "Biofilm growth monitoring",
            "Substrate consumption analysis",
            "Electrode kinetics",
            "Mass transport studies",
        ),
        parameter_schema={
            "initialPotential": _potential("Initial Potential", 0.0, "Starting potential before step"),
            "stepPotential": _potential("Step Potential", 0.3, "Potential after the step"),
            "stepDuration": ParameterSpec(
                name="Step Duration", unit="s", min=1, max=3600, default=300,
                description="Duration of the potential step",
            ),
            "samplingRate": ParameterSpec(
                name="Sampling Rate", unit="Hz", min=0.1, max=1000, default=10,
                description="Data collection frequency",
            ),
            "electrodeArea": _ELECTRODE_AREA,
        },
        data_types=("time", "current", "potential"),
        time_range=TimeRange(min=1, max=3600, typical=300),
        voltage_range=VoltageRange(min=-2.0, max=2.0),
        sensitivity=6,
        complexity=4,
    ),
    TechniqueDescriptor(
        id="dpv",
        name="Differential Pulse Voltammetry",
        abbreviation="DPV",
        description="Pulse technique that provides enhanced sensitivity for trace analysis",
        category="pulse",
        applications=(
            "Trace mediator detection",
            "Low concentration analysis",
            "Multiple species identification",
            "Enhanced sensitivity measurements",
            "Biomarker detection",
        ),
        parameter_schema={
            "startPotential": _potential("Start Potential", -0.5, "Initial potential for the scan"),
            "endPotential": _potential("End Potential", 0.5, "Final potential for the scan"),
            "pulseAmplitude": ParameterSpec(
                name="Pulse Amplitude", unit="V", min=0.001, max=0.1, default=0.05,
                description="Amplitude of the differential pulse",
            ),
            "pulseWidth": ParameterSpec(
                name="Pulse Width", unit="ms", min=1, max=1000, default=50,
                description="Duration of each pulse",
            ),
            "stepPotential": ParameterSpec(
                name="Step Potential", unit="V", min=0.001, max=0.1, default=0.005,
                description="Potential increment between pulses",
            ),
        },
        data_types=("potential", "current_difference", "time"),
        time_range=TimeRange(min=30, max=600, typical=120),
        voltage_range=VoltageRange(min=-2.0, max=2.0),
        sensitivity=9,
        complexity=6,
    ),
    TechniqueDescriptor(
        id="swv",
        name="Square Wave Voltammetry",
        abbreviation="SWV",
        description="Fast pulse technique combining high sensitivity with rapid analysis",
        category="pulse",
        applications=(
            "Rapid screening",
            "Multi-analyte detection",
            "High-throughput analysis",
            "Real-time monitoring",
            "Process control",
        ),
        parameter_schema={
            "startPotential": _potential("Start Potential", -0.5, "Initial potential for the scan"),
            "endPotential": _potential("End Potential", 0.5, "Final potential for the scan"),
            "frequency": ParameterSpec(
                name="Frequency", unit="Hz", min=1, max=1000, default=25,
                description="Square wave frequency",
            ),
            "amplitude": ParameterSpec(
                name="SW Amplitude", unit="V", min=0.001, max=0.1, default=0.025,
                description="Square wave amplitude",
            ),
            "stepPotential": ParameterSpec(
                name="Step Potential", unit="V", min=0.001, max=0.02, default=0.004,
                description="Potential increment",
            ),
        },
        data_types=("potential", "forward_current", "reverse_current", "net_current"),
        time_range=TimeRange(min=10, max=300, typical=60),
        voltage_range=VoltageRange(min=-2.0, max=2.0),
        sensitivity=8,
        complexity=7,
    ),
    TechniqueDescriptor(
        id="lsv",
        name="Linear Sweep Voltammetry",
        abbreviation="LSV",
        description="Single potential sweep technique for basic electrochemical characterization",
        category="voltammetry",
        applications=(
            "Redox potential screening",
            "Electrode material testing",
            "Basic electrochemical analysis",
            "Potential window determination",
            "Background characterization",
        ),
        parameter_schema={
            "startPotential": _potential("Start Potential", -0.6, "Initial potential for the sweep"),
            "endPotential": _potential("End Potential", 0.6, "Final potential for the sweep"),
            "scanRate": _SCAN_RATE,
        },
        data_types=("potential", "current", "time"),
        time_range=TimeRange(min=5, max=1200, typical=60),
        voltage_range=VoltageRange(min=-2.0, max=2.0),
        sensitivity=5,
        complexity=3,
    ),
)

TECHNIQUE_CATALOG: MappingProxyType[str, TechniqueDescriptor] = MappingProxyType(
    {technique.id: technique for technique in _CATALOG}
)
"""Read-only id → descriptor mapping, in catalogue order."""


# ═══════════════════════════════════════════════════════════════════════════
# Lookups
# ═══════════════════════════════════════════════════════════════════════════

def get_technique(technique_id: str) -> TechniqueDescriptor:
    """Return the descriptor for ``technique_id``.

    Raises
    ------
    UnknownTechniqueError
        If the id is not registered.
    """
    try:
        return TECHNIQUE_CATALOG[technique_id]
    except KeyError:
        raise UnknownTechniqueError(technique_id) from None


def find_technique(technique_id: str) -> TechniqueDescriptor | None:
    """Non-raising variant of :func:`get_technique`."""
    return TECHNIQUE_CATALOG.get(technique_id)


def resolve_technique(technique: TechniqueDescriptor | str) -> TechniqueDescriptor:
    """Accept either a descriptor or an id."""
    if isinstance(technique, TechniqueDescriptor):
        return technique
    return get_technique(technique)


def get_techniques_by_category(category: str) -> list[TechniqueDescriptor]:
    return [t for t in TECHNIQUE_CATALOG.values() if t.category == category]


def get_techniques_by_application(application: str) -> list[TechniqueDescriptor]:
    """Techniques whose applications mention ``application`` (case-insensitive)."""
    needle = application.lower()
    return [
        t for t in TECHNIQUE_CATALOG.values()
        if any(needle in app.lower() for app in t.applications)
    ]
