from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from invest_core.domain.models import IncomeBracket

INCOME_BRACKETS: Tuple[IncomeBracket, ...] = (
    IncomeBracket("moins-2000", "Moins de 2000€", 0, 2000, 0.05),
    IncomeBracket("2000-4000", "Entre 2000€ et 4000€", 2000, 4000, 0.10),
    IncomeBracket("4000-6000", "Entre 4000€ et 6000€", 4000, 6000, 0.15),
    IncomeBracket("6000-8000", "Entre 6000€ et 8000€", 6000, 8000, 0.20),
    IncomeBracket("plus-8000", "Plus de 8000€", 8000, 100000, 0.25),
)


def find_bracket(bracket_id: str, brackets: Iterable[IncomeBracket] = INCOME_BRACKETS) -> Optional[IncomeBracket]:
    for bracket in brackets:
        if bracket.id == bracket_id:
            return bracket
    return None


def bracket_for_income(amount: float, brackets: Sequence[IncomeBracket] = INCOME_BRACKETS) -> IncomeBracket:
    """
    Bracket a monthly income falls into. Lower bounds are inclusive, so an
    income sitting on a shared boundary belongs to the upper bracket; anything
    past the last lower bound lands in the last (open-ended) bracket.
    """
    if amount < 0:
        raise ValueError("Income must be non-negative")
    match = brackets[0]
    for bracket in brackets:
        if amount >= bracket.min_income:
            match = bracket
    return match


def check_bracket_table(brackets: Sequence[IncomeBracket]) -> None:
    """Raise ValueError unless the table covers [0, inf) in ascending order."""
    if not brackets:
        raise ValueError("Bracket table is empty")
    if brackets[0].min_income != 0:
        raise ValueError("First bracket must start at 0")
    seen = set()
    previous_max = None
    for bracket in brackets:
        if bracket.id in seen:
            raise ValueError(f"Duplicate bracket id: {bracket.id}")
        seen.add(bracket.id)
        if bracket.max_income <= bracket.min_income:
            raise ValueError(f"Bracket {bracket.id} has an empty range")
        if not 0 < bracket.recommended_savings_rate <= 1:
            raise ValueError(f"Bracket {bracket.id} savings rate must be in (0, 1]")
        if previous_max is not None and bracket.min_income != previous_max:
            raise ValueError(f"Bracket {bracket.id} does not start where the previous one ends")
        previous_max = bracket.max_income
