from __future__ import annotations

import pandas as pd

from invest_core.domain.models import SimulationResult
from invest_core.domain.rounding import round2


def yearly_breakdown(result: SimulationResult) -> pd.DataFrame:
    """
    One row per completed year: balance, amount paid in and gain so far.
    """
    frame = result.to_frame()
    yearly = frame[(frame["month"] > 0) & (frame["month"] % 12 == 0)].copy()
    yearly["year"] = yearly["month"] // 12
    yearly["gain"] = [round2(t - c) for t, c in zip(yearly["total"], yearly["contributed"])]
    return yearly[["year", "total", "contributed", "gain"]].reset_index(drop=True)
