from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from deal_payments.domain.errors import MissingRelationError


ZERO = Decimal("0")


class Frequency(str, Enum):
    """Payment cadence of a deal. A deal without one uses the single-payment fallback."""

    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    MONTHLY = "monthly"


class PaymentTypeName(str, Enum):
    CASH = "cash"
    FINANCE = "finance"
    LEASE = "lease"

    @classmethod
    def parse(cls, name: str) -> PaymentTypeName | None:
        """Return the matching variant, or None for a type the engine does not price."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class TaxComponent:
    name: str
    tax_rate: Decimal  # percent, e.g. Decimal("5") for 5%


@dataclass(frozen=True, slots=True)
class TaxProvince:
    name: str
    taxes: tuple[TaxComponent, ...] = ()

    def component(self, name: str) -> TaxComponent | None:
        """Exact, case-sensitive lookup by component name."""
        for tax in self.taxes:
            if tax.name == name:
                return tax
        return None


@dataclass(frozen=True, slots=True)
class Vehicle:
    msrp: Decimal
    discount: Decimal = ZERO


@dataclass(frozen=True, slots=True)
class TradeIn:
    final_market_value: Decimal = ZERO
    lien_remaining: Decimal = ZERO


@dataclass(frozen=True, slots=True)
class Deal:
    """
    Read-only snapshot of a vehicle offer.

    Aggregated amounts (rebates, accessories, fees, luxury taxes, deposit) are
    supplied already summed by whoever loaded the deal. Relations are optional
    only so a malformed snapshot can be represented and rejected.
    """

    total: Decimal
    rebates_before_tax: Decimal = ZERO
    accessories_amount: Decimal = ZERO
    fees_amount: Decimal = ZERO
    fed_luxury_tax: Decimal = ZERO
    bc_luxury_tax: Decimal = ZERO
    deposit: Decimal = ZERO
    frequency: Frequency | None = None
    tax_province: TaxProvince | None = None
    vehicle: Vehicle | None = None
    trade_in: TradeIn | None = None

    def require_relations(self) -> DealRelations:
        """
        Fail fast on snapshots missing a relation the finance/lease math reads.

        Returns:
            The deal's vehicle, trade-in and tax province

        Raises:
            MissingRelationError: If vehicle, trade_in or tax_province is absent
        """
        if self.vehicle is None:
            raise MissingRelationError("vehicle")
        if self.trade_in is None:
            raise MissingRelationError("trade_in")
        if self.tax_province is None:
            raise MissingRelationError("tax_province")

        return DealRelations(
            vehicle=self.vehicle,
            trade_in=self.trade_in,
            tax_province=self.tax_province,
        )


@dataclass(frozen=True, slots=True)
class DealRelations:
    vehicle: Vehicle
    trade_in: TradeIn
    tax_province: TaxProvince


@dataclass(frozen=True, slots=True)
class PaymentBundle:
    """
    One selectable payment plan for a deal.

    selected_bundle points at the bundle (this one or a peer) whose
    msrp_adjustment is applied by compute_payment. The bundle's own
    msrp_adjustment is only read by lease_payment_with_no_down.
    """

    payment_type_name: PaymentTypeName | str
    term: int = 0
    rate: Decimal = ZERO  # annual percent
    residual: Decimal = ZERO
    down_payment: Decimal = ZERO
    msrp_adjustment: Decimal = ZERO
    minimum_term: int | None = None
    amortization_term: int | None = None
    is_active: bool = True
    id: str | None = None
    selected_bundle: PaymentBundle | None = None

    @property
    def payment_type(self) -> PaymentTypeName | None:
        if isinstance(self.payment_type_name, PaymentTypeName):
            return self.payment_type_name
        return PaymentTypeName.parse(self.payment_type_name)
