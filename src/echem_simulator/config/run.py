"""Run-level settings — tick cadence, speed, noise, seed, validation policy."""

from typing import Literal

from pydantic import BaseModel, Field


class RunConfig(BaseModel):
    """How a simulation run is driven.

    The controller advances ``progress`` by
    ``speed × update_interval_ms / (total_simulated_time × 1000)`` per tick.
    """

    update_interval_ms: float = Field(
        default=50.0, gt=0,
        description="Wall-clock tick interval of the external scheduler (ms)",
    )
    speed: float = Field(
        default=1.0, gt=0, le=1_000.0,
        description="Simulated-time multiplier.  1.0 = real time, 10.0 = ten times faster.",
    )
    noise_level: float = Field(
        default=0.02, ge=0, le=1.0,
        description="Width of the uniform noise draw.  0.0 disables noise "
                    "(the RNG is still consumed so draws stay aligned).",
    )
    random_seed: int | None = Field(
        default=None,
        description="Optional RNG seed for reproducible runs. "
                    "None = non-deterministic.",
    )
    parameter_policy: Literal["reject", "clamp"] = Field(
        default="reject",
        description="Out-of-range parameters: 'reject' raises before the run, "
                    "'clamp' pins them to the schema bounds.",
    )
