from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

# Wide enough for any finite float quantized to a few decimals.
_CONTEXT = Context(prec=400)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round the exact binary value of ``value`` half-up to ``ndigits`` decimals.

    Python's ``round`` resolves ties to even; amounts shown to users are rounded
    the way fixed-point formatting does it, so 0.125 becomes 0.13.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT))


def round2(value: float) -> float:
    return round_half_up(value, 2)
