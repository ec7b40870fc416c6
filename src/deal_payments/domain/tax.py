from __future__ import annotations

from decimal import Decimal

from deal_payments.domain.deal import TaxProvince


# Only these components apply to vehicle payments; anything else on the province is ignored.
TAXED_COMPONENTS = ("GST", "PST")


def tax_rate(tax_province: TaxProvince) -> Decimal:
    """Combined GST + PST rate as a fraction (5% GST and 7% PST gives 0.12)."""
    rate = Decimal(0)
    for name in TAXED_COMPONENTS:
        component = tax_province.component(name)
        if component is not None:
            rate += component.tax_rate / Decimal(100)
    return rate
