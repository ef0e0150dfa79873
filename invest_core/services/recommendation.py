from __future__ import annotations

import logging
from typing import Iterable

from invest_core.domain.brackets import INCOME_BRACKETS, find_bracket
from invest_core.domain.models import IncomeBracket, Recommendation
from invest_core.domain.rounding import round_half_up

logger = logging.getLogger(__name__)


def resolve_recommendation(bracket_id: str, brackets: Iterable[IncomeBracket] = INCOME_BRACKETS) -> Recommendation:
    """
    Recommended monthly savings for an income bracket: the bracket midpoint
    times its savings rate, rounded to a whole currency unit.

    An unknown id yields a zero recommendation carrying a notice instead of an error.
    """
    bracket = find_bracket(bracket_id, brackets)
    if bracket is None:
        notice = f"Income bracket not found: {bracket_id}"
        logger.warning(notice)
        return Recommendation(recommended_monthly_amount=0, percentage_of_income=0, notice=notice)

    return Recommendation(
        recommended_monthly_amount=round_half_up(bracket.midpoint * bracket.recommended_savings_rate),
        percentage_of_income=bracket.recommended_savings_rate * 100,
    )
