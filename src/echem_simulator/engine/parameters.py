"""Parameter-set validation against a technique's schema.

Raw parameters arrive from a form or config file as numbers or numeric
strings.  Validation happens once, before a run starts:

  1. unknown keys are dropped
  2. missing keys take the schema default
  3. out-of-range values are rejected (``policy="reject"``) or pinned to the
     schema bounds (``policy="clamp"``)
  4. cross-field rules that would make the models divide by zero or produce
     a degenerate sweep are checked

The per-field checks run through a pydantic model generated from the schema,
so the error messages match the ones callers get from the config models.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Literal, Mapping

from pydantic import Field, ValidationError, create_model

from echem_simulator.config.technique import TechniqueDescriptor
from echem_simulator.errors import ParameterValidationError

logger = logging.getLogger(__name__)

ParameterSet = dict[str, float]

_STRICTLY_POSITIVE = ("startFrequency", "endFrequency", "scanRate", "stepDuration")


def validate_parameters(
    technique: TechniqueDescriptor,
    raw: Mapping[str, Any] | None,
    policy: Literal["reject", "clamp"] = "reject",
) -> ParameterSet:
    """Validate ``raw`` against ``technique.parameter_schema``.

    Returns
    -------
    dict[str, float]
        One entry per schema parameter.

    Raises
    ------
    ParameterValidationError
        When a value is non-numeric, non-finite, out of range under the
        ``reject`` policy, or violates a cross-field rule.
    """
    schema = technique.parameter_schema
    raw = dict(raw or {})

    unknown = sorted(set(raw) - set(schema))
    if unknown:
        logger.debug("%s: ignoring unknown parameters %s", technique.id, unknown)

    values: dict[str, Any] = {key: raw[key] for key in schema if key in raw}

    if policy == "clamp":
        values = {key: _clamp(technique, key, value) for key, value in values.items()}

    model = _schema_model(technique)
    try:
        validated = model.model_validate(values)
    except ValidationError as exc:
        details = {
            ".".join(str(part) for part in err["loc"]): err["msg"]
            for err in exc.errors()
        }
        raise ParameterValidationError(
            f"Invalid parameters for {technique.abbreviation}: "
            + "; ".join(f"{k}: {v}" for k, v in details.items()),
            details,
        ) from exc

    params: ParameterSet = validated.model_dump()
    _check_cross_field(technique, params)
    return params


# ═══════════════════════════════════════════════════════════════════════════
# Internals
# ═══════════════════════════════════════════════════════════════════════════

def _schema_model(technique: TechniqueDescriptor):
    fields: dict[str, Any] = {
        key: (
            float,
            Field(default=spec.default, ge=spec.min, le=spec.max, allow_inf_nan=False),
        )
        for key, spec in technique.parameter_schema.items()
    }
    return create_model(f"{technique.id.upper()}Parameters", **fields)


def _clamp(technique: TechniqueDescriptor, key: str, value: Any) -> Any:
    """Pin a numeric value into the schema bounds; leave anything else for pydantic."""
    if isinstance(value, bool):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return value
    if not math.isfinite(number):
        return value

    spec = technique.parameter_schema[key]
    clamped = min(max(number, spec.min), spec.max)
    if clamped != number:
        logger.warning(
            "%s: %s=%s outside [%s, %s], clamped to %s",
            technique.id, key, number, spec.min, spec.max, clamped,
        )
    return clamped


def _check_cross_field(technique: TechniqueDescriptor, params: ParameterSet) -> None:
    details: dict[str, str] = {}

    if "startPotential" in params and "endPotential" in params:
        if params["startPotential"] == params["endPotential"]:
            details["endPotential"] = "must differ from startPotential"

    for key in _STRICTLY_POSITIVE:
        if key in params and params[key] <= 0:
            details[key] = "must be strictly positive"

    # Pulse sweep duration divides by the step increment.
    if technique.category == "pulse" and params.get("stepPotential", 1.0) <= 0:
        details["stepPotential"] = "must be strictly positive"

    if details:
        raise ParameterValidationError(
            f"Invalid parameters for {technique.abbreviation}: "
            + "; ".join(f"{k}: {v}" for k, v in details.items()),
            details,
        )
