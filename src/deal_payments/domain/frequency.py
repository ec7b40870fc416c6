from __future__ import annotations

from decimal import Decimal

from deal_payments.domain.deal import Frequency


PAYMENTS_PER_YEAR: dict[Frequency, int] = {
    Frequency.WEEKLY: 52,
    Frequency.BI_WEEKLY: 26,
    Frequency.MONTHLY: 12,
}


def _as_frequency(frequency: Frequency | str | None) -> Frequency | None:
    if frequency is None or isinstance(frequency, Frequency):
        return frequency
    try:
        return Frequency(frequency)
    except ValueError:
        return None


def payments_per_year(frequency: Frequency | str | None) -> int:
    """Payments made in a year at the given cadence. Unknown or unset cadences count as 1."""
    resolved = _as_frequency(frequency)
    if resolved is None:
        return 1
    return PAYMENTS_PER_YEAR[resolved]


def number_of_payments(frequency: Frequency | str | None, term_months: int) -> Decimal:
    """
    Total payments over a term.

    Weekly and bi-weekly counts are not rounded: a 10 month weekly term is
    43.33... payments, and the amortizers consume that value as-is.
    Unknown or unset cadences are a single payment.
    """
    resolved = _as_frequency(frequency)
    if resolved is None:
        return Decimal(1)
    if resolved is Frequency.MONTHLY:
        return Decimal(term_months)
    return Decimal(PAYMENTS_PER_YEAR[resolved]) * Decimal(term_months) / Decimal(12)
