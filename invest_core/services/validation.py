from __future__ import annotations

import dataclasses
import math
from typing import Any, Dict, Mapping, Optional

from invest_core.domain.models import (
    MAX_AMOUNT,
    MAX_RATE_PERCENT,
    MAX_YEARS,
    MIN_RATE_PERCENT,
    MIN_YEARS,
    FieldValidation,
    SimulationParameters,
    ValidatedInputs,
)

# Form ids used by the original web form, accepted alongside the field names.
FIELD_ALIASES = {
    "sommeInitiale": "initial_capital",
    "mensualite": "monthly_contribution",
    "tauxAnnuel": "annual_rate_percent",
    "nombreAnnees": "years",
    "trancheRevenu": "income_bracket_id",
}

FIELD_LABELS = {
    "initial_capital": "Initial capital",
    "monthly_contribution": "Monthly contribution",
    "annual_rate_percent": "Annual rate",
    "years": "Duration in years",
    "income_bracket_id": "Income bracket",
}


def canonical_field(name: str) -> str:
    field = FIELD_ALIASES.get(name, name)
    if field not in FIELD_LABELS:
        raise KeyError(f"Unknown field: {name}")
    return field


def _parse_number(raw: Any) -> Optional[float]:
    """
    Parse a raw form value. Returns None when the value is not a finite number.
    Accepts "3.5", " 3,5 " and plain ints/floats.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        txt = str(raw).strip().replace(",", ".", 1)
        if not txt:
            return None
        try:
            value = float(txt)
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value


def _clamp(value: float, lower: float, upper: Optional[float]) -> float:
    value = max(lower, value)
    if upper is not None:
        value = min(upper, value)
    return value


def _bounded(
    field: str,
    raw: Any,
    lower: float,
    upper: Optional[float],
    range_message: str,
    above_message: Optional[str] = None,
) -> FieldValidation:
    label = FIELD_LABELS[field]
    parsed = _parse_number(raw)
    if parsed is None:
        return FieldValidation(value=lower, message=f"{label} must be a number")
    if field == "years":
        parsed = int(parsed)  # truncates toward zero like integer form parsing
    clamped = _clamp(parsed, lower, upper)
    if clamped != parsed:
        message = above_message if above_message and parsed > clamped else range_message
        return FieldValidation(value=clamped, message=f"{label} {message}")
    return FieldValidation(value=parsed)


def validate_field(name: str, raw: Any) -> FieldValidation:
    """
    Coerce then clamp one raw input value.

    The returned value always lies within the field's bounds. A message is set
    only when clamping changed the value or the raw value was not a number.
    """
    field = canonical_field(name)
    if field in ("initial_capital", "monthly_contribution"):
        return _bounded(field, raw, 0.0, MAX_AMOUNT, "must be non-negative", "must not exceed 1,000,000,000,000")
    if field == "annual_rate_percent":
        return _bounded(field, raw, MIN_RATE_PERCENT, MAX_RATE_PERCENT, "must be between 0 and 100")
    if field == "years":
        return _bounded(field, raw, MIN_YEARS, MAX_YEARS, "must be between 1 and 50")
    return FieldValidation(value=str(raw).strip() if raw is not None else "")


def validate_inputs(raw: Mapping[str, Any], defaults: Optional[SimulationParameters] = None) -> ValidatedInputs:
    """
    Validate a mapping of raw values (field names or form ids) into parameters.
    Fields missing from ``raw`` keep the value from ``defaults``.
    """
    base = dataclasses.asdict(defaults or SimulationParameters())
    values: Dict[str, Any] = dict(base)
    errors: Dict[str, str] = {}
    for name, raw_value in raw.items():
        field = canonical_field(name)
        checked = validate_field(field, raw_value)
        values[field] = checked.value
        if checked.message:
            errors[field] = checked.message
        else:
            errors.pop(field, None)
    if not values["income_bracket_id"]:
        values["income_bracket_id"] = base["income_bracket_id"]
    return ValidatedInputs(parameters=SimulationParameters(**values), errors=errors)
