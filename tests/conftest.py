from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

import pytest

from deal_payments.domain.deal import (
    Deal,
    Frequency,
    PaymentBundle,
    PaymentTypeName,
    TaxComponent,
    TaxProvince,
    TradeIn,
    Vehicle,
)


BC = TaxProvince(
    name="BC",
    taxes=(TaxComponent("GST", Decimal("5")), TaxComponent("PST", Decimal("7"))),
)
NO_TAX = TaxProvince(name="XX", taxes=())


@pytest.fixture
def make_deal() -> Callable[..., Deal]:
    """Factory for a plain monthly deal on a 30,000 vehicle with no tax or trade-in value."""

    def _make(**overrides: Any) -> Deal:
        fields: dict[str, Any] = {
            "total": Decimal("30000.00"),
            "frequency": Frequency.MONTHLY,
            "tax_province": NO_TAX,
            "vehicle": Vehicle(msrp=Decimal("30000")),
            "trade_in": TradeIn(),
        }
        fields.update(overrides)
        return Deal(**fields)

    return _make


@pytest.fixture
def make_bundle() -> Callable[..., PaymentBundle]:
    """Factory for a 60 month finance bundle at 6%."""

    def _make(**overrides: Any) -> PaymentBundle:
        fields: dict[str, Any] = {
            "payment_type_name": PaymentTypeName.FINANCE,
            "term": 60,
            "rate": Decimal("6"),
        }
        fields.update(overrides)
        return PaymentBundle(**fields)

    return _make


@pytest.fixture
def bc_province() -> TaxProvince:
    """GST 5% + PST 7%."""
    return BC
