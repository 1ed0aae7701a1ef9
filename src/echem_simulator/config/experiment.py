"""Top-level experiment — bundles technique selection and all settings."""

from pydantic import BaseModel, Field

from echem_simulator.config.analysis import AnalysisConfig
from echem_simulator.config.run import RunConfig


class ExperimentConfig(BaseModel):
    """Complete input bundle for one simulated measurement."""

    technique_id: str = Field(default="cv", description="Registry id of the technique")
    parameters: dict[str, float | str] = Field(
        default_factory=dict,
        description="Raw parameter values; missing keys take schema defaults",
    )
    run: RunConfig = Field(default_factory=RunConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
