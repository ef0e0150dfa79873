from __future__ import annotations

from typing import Iterable, List

import numpy as np

from invest_core.domain.brackets import INCOME_BRACKETS
from invest_core.domain.models import IncomeBracket, SimulationParameters, SimulationPoint, SimulationResult
from invest_core.domain.rounding import round2
from invest_core.services.recommendation import resolve_recommendation


def simulate(params: SimulationParameters, brackets: Iterable[IncomeBracket] = INCOME_BRACKETS) -> SimulationResult:
    """
    Monthly compounding with the contribution deposited before each month's growth.

    The balance accumulates at full float precision; only the values stored in
    the series and totals are rounded to cents (half-up).
    """
    months = params.months
    growth = 1 + params.monthly_rate
    contributed = params.initial_capital + params.monthly_contribution * np.arange(months + 1)

    total = params.initial_capital
    series: List[SimulationPoint] = [SimulationPoint(0, total, total)]
    for m in range(1, months + 1):
        total = (total + params.monthly_contribution) * growth
        series.append(SimulationPoint(m, round2(total), float(contributed[m])))

    total_contributed = float(contributed[-1])
    final_total = round2(total)

    return SimulationResult(
        parameters=params,
        final_total=final_total,
        total_contributed=total_contributed,
        total_gain=round2(final_total - total_contributed),
        series=tuple(series),
        recommendation=resolve_recommendation(params.income_bracket_id, brackets),
    )
