from __future__ import annotations

from decimal import Decimal

from deal_payments.domain.deal import Deal, PaymentBundle, PaymentTypeName
from deal_payments.domain.finance import finance_payment
from deal_payments.domain.lease import lease_payment


def resolve_msrp_adjustment(bundle: PaymentBundle) -> Decimal:
    """MSRP adjustment of the selected bundle, or 0 when none is selected."""
    if bundle.selected_bundle is None:
        return Decimal(0)
    return bundle.selected_bundle.msrp_adjustment


def compute_payment(deal: Deal, bundle: PaymentBundle) -> Decimal:
    """
    Periodic payment owed for a deal under the given bundle.

    - cash: the deal total; cash bundles have no term, rate or residual
    - finance: amortized loan payment
    - lease: lease payment including tax
    - any other payment type: 0

    Raises:
        MissingRelationError: For finance/lease bundles on a deal lacking a
            vehicle, trade-in or tax province
    """
    match bundle.payment_type:
        case PaymentTypeName.CASH:
            return deal.total
        case PaymentTypeName.FINANCE:
            return finance_payment(deal, bundle, resolve_msrp_adjustment(bundle))
        case PaymentTypeName.LEASE:
            return lease_payment(deal, bundle, resolve_msrp_adjustment(bundle))
        case _:
            return Decimal(0)
