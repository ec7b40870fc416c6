from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


CENT = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    """Round to 2 decimal places, halves away from zero."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
