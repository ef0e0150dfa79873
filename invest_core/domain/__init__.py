from invest_core.domain.models import (  # noqa: F401
    FieldValidation,
    IncomeBracket,
    Recommendation,
    SimulationParameters,
    SimulationPoint,
    SimulationResult,
    ValidatedInputs,
)
from invest_core.domain.brackets import INCOME_BRACKETS  # noqa: F401

__all__ = [
    "FieldValidation",
    "INCOME_BRACKETS",
    "IncomeBracket",
    "Recommendation",
    "SimulationParameters",
    "SimulationPoint",
    "SimulationResult",
    "ValidatedInputs",
]
