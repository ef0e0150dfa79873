from __future__ import annotations

import dataclasses
from typing import Any, Dict, Iterable, Mapping, Optional

from invest_core.domain.brackets import INCOME_BRACKETS
from invest_core.domain.models import IncomeBracket, SimulationParameters, SimulationResult
from invest_core.services import simulator, validation


@dataclasses.dataclass(frozen=True)
class PipelineOutcome:
    result: SimulationResult
    errors: Dict[str, str]


def run_simulation(
    raw: Mapping[str, Any],
    brackets: Iterable[IncomeBracket] = INCOME_BRACKETS,
    defaults: Optional[SimulationParameters] = None,
) -> PipelineOutcome:
    """Raw form values -> validated parameters -> simulation result."""
    validated = validation.validate_inputs(raw, defaults=defaults)
    result = simulator.simulate(validated.parameters, tuple(brackets))
    return PipelineOutcome(result=result, errors=validated.errors)
