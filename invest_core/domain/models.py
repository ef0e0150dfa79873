from __future__ import annotations

import dataclasses
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

MIN_RATE_PERCENT = 0.0
MAX_RATE_PERCENT = 100.0
# Amount ceiling: 600 months at 100% from this stays far below float overflow.
MAX_AMOUNT = 1e12
MIN_YEARS = 1
MAX_YEARS = 50
DEFAULT_BRACKET_ID = "moins-2000"


@dataclasses.dataclass(frozen=True)
class IncomeBracket:
    id: str
    label: str
    min_income: float
    max_income: float  # the last bracket's max only feeds the midpoint
    recommended_savings_rate: float  # 0..1

    @property
    def midpoint(self) -> float:
        return (self.min_income + self.max_income) / 2


@dataclasses.dataclass(frozen=True)
class SimulationParameters:
    initial_capital: float = 0.0
    monthly_contribution: float = 120.0
    annual_rate_percent: float = 3.0
    years: int = 3
    income_bracket_id: str = DEFAULT_BRACKET_ID

    def __post_init__(self):
        if not 0 <= self.initial_capital <= MAX_AMOUNT:
            raise ValueError("initial_capital must be between 0 and 1e12")
        if not 0 <= self.monthly_contribution <= MAX_AMOUNT:
            raise ValueError("monthly_contribution must be between 0 and 1e12")
        if not MIN_RATE_PERCENT <= self.annual_rate_percent <= MAX_RATE_PERCENT:
            raise ValueError("annual_rate_percent must be between 0 and 100")
        if not isinstance(self.years, int) or not MIN_YEARS <= self.years <= MAX_YEARS:
            raise ValueError("years must be an integer between 1 and 50")

    @property
    def months(self) -> int:
        return self.years * 12

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100 / 12


@dataclasses.dataclass(frozen=True)
class SimulationPoint:
    period_index: int
    cumulative_total: float
    cumulative_contributed: float


@dataclasses.dataclass(frozen=True)
class Recommendation:
    recommended_monthly_amount: float
    percentage_of_income: float
    notice: Optional[str] = None  # set when the bracket could not be resolved


@dataclasses.dataclass(frozen=True)
class SimulationResult:
    parameters: SimulationParameters
    final_total: float
    total_contributed: float
    total_gain: float
    series: Tuple[SimulationPoint, ...]
    recommendation: Recommendation

    @property
    def diagnostics(self) -> List[str]:
        return [self.recommendation.notice] if self.recommendation.notice else []

    def to_timeseries(self) -> List[Tuple[int, float, float]]:
        return [(p.period_index, p.cumulative_total, p.cumulative_contributed) for p in self.series]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            self.to_timeseries(),
            columns=["month", "total", "contributed"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parameters": dataclasses.asdict(self.parameters),
            "final_total": self.final_total,
            "total_contributed": self.total_contributed,
            "total_gain": self.total_gain,
            "recommendation": dataclasses.asdict(self.recommendation),
            "series": [dataclasses.asdict(p) for p in self.series],
        }


@dataclasses.dataclass(frozen=True)
class FieldValidation:
    value: Any
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.message is None


@dataclasses.dataclass(frozen=True)
class ValidatedInputs:
    parameters: SimulationParameters
    errors: Dict[str, str]
