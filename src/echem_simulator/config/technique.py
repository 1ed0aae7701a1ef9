"""Technique descriptor — one entry of the technique registry."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

TechniqueCategory = Literal["voltammetry", "impedance", "chronometric", "pulse"]


class ParameterSpec(BaseModel):
    """Schema entry for one numeric technique parameter."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Human label")
    unit: str = Field(default="", description="Display unit (V, Hz, s, ...)")
    min: float = Field(description="Lowest accepted value (inclusive)")
    max: float = Field(description="Highest accepted value (inclusive)")
    default: float = Field(description="Value used when the caller omits the parameter")
    description: str = Field(default="", description="One-line explanation")

    @model_validator(mode="after")
    def _check_bounds(self) -> "ParameterSpec":
        if self.min > self.max:
            raise ValueError(f"{self.name}: min ({self.min}) exceeds max ({self.max})")
        if not self.min <= self.default <= self.max:
            raise ValueError(f"{self.name}: default ({self.default}) outside [{self.min}, {self.max}]")
        return self


class TimeRange(BaseModel):
    """Typical measurement duration (seconds)."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(ge=0)
    max: float = Field(gt=0)
    typical: float = Field(gt=0)


class VoltageRange(BaseModel):
    """Potential window the technique operates in (V)."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float


class TechniqueDescriptor(BaseModel):
    """Immutable description of one electroanalytical technique.

    ``category`` selects the family of technique model and analysis branch;
    ``parameter_schema`` drives validation of caller-supplied parameters.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Registry key, e.g. 'cv'")
    name: str
    abbreviation: str
    description: str = ""
    category: TechniqueCategory
    applications: tuple[str, ...] = ()
    parameter_schema: dict[str, ParameterSpec] = Field(default_factory=dict)
    data_types: tuple[str, ...] = ()
    time_range: TimeRange
    voltage_range: VoltageRange
    sensitivity: int = Field(ge=1, le=10, description="Relative sensitivity (1–10)")
    complexity: int = Field(ge=1, le=10, description="Relative complexity (1–10)")

    def defaults(self) -> dict[str, float]:
        """Schema defaults as a plain parameter set."""
        return {key: spec.default for key, spec in self.parameter_schema.items()}
