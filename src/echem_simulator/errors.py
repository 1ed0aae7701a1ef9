"""Error types raised at the configuration boundary.

Everything here is raised *before* a run starts.  Numeric trouble inside a
run is handled locally (floors, sentinels, skipped ticks) and never surfaces
as an exception.
"""

from __future__ import annotations

from typing import Any


class SimulatorError(Exception):
    """Base class for user-presentable simulator errors."""

    code = "SIMULATOR_ERROR"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ConfigurationError(SimulatorError, ValueError):
    """Technique or parameter configuration cannot be used for a run."""

    code = "INVALID_CONFIGURATION"


class ParameterValidationError(ConfigurationError):
    """One or more parameters failed validation against the technique schema.

    ``details`` maps parameter name → human-readable reason.
    """

    code = "INVALID_PARAMETERS"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = dict(details or {})


class UnknownTechniqueError(ConfigurationError, KeyError):
    """Technique id is not in the registry.  There is no fallback technique."""

    code = "UNKNOWN_TECHNIQUE"

    def __init__(self, technique_id: str) -> None:
        super().__init__(f"Unknown technique id: {technique_id!r}")
        self.technique_id = technique_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message
