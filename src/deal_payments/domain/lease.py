from __future__ import annotations

from decimal import Decimal

from deal_payments.domain.deal import Deal, DealRelations, PaymentBundle
from deal_payments.domain.frequency import number_of_payments, payments_per_year
from deal_payments.domain.money import to_cents
from deal_payments.domain.tax import tax_rate


def lease_base_amount(deal: Deal, bundle: PaymentBundle, lease_amount: Decimal) -> Decimal:
    """
    Pre-tax lease payment for a capitalized amount.

    The residual is discounted over n periods and the remainder amortized
    with payments in advance:

        base = (L - R / (1 + apr)^n) * apr / (apr + 1 - 1 / (1 + apr)^(n - 1))

    Unlike the finance rate, apr divides by the cadence's payments per year.
    A zero apr is straight-line depreciation, returned unrounded.
    """
    apr = bundle.rate / Decimal(100) / payments_per_year(deal.frequency)
    payments = number_of_payments(deal.frequency, bundle.term)

    if apr == 0:
        return (lease_amount - bundle.residual) / payments

    one = Decimal(1)
    discounted_residual = bundle.residual / (one + apr) ** payments
    rent_factor = apr / (apr + (one - one / (one + apr) ** (payments - 1)))

    return to_cents((lease_amount - discounted_residual) * rent_factor)


def _capitalized_amount(
    deal: Deal, relations: DealRelations, bundle: PaymentBundle, msrp_adjusted: Decimal
) -> Decimal:
    return (
        relations.vehicle.msrp
        + msrp_adjusted
        - relations.vehicle.discount
        + deal.accessories_amount
        + deal.fees_amount
        - deal.rebates_before_tax
        - deal.deposit
        - bundle.down_payment
        - relations.trade_in.final_market_value
        + deal.fed_luxury_tax
        + deal.bc_luxury_tax
        + relations.trade_in.lien_remaining
    )


def _capitalized_amount_with_no_down(deal: Deal, relations: DealRelations, bundle: PaymentBundle) -> Decimal:
    return (
        relations.vehicle.msrp
        + bundle.msrp_adjustment
        + deal.accessories_amount
        + deal.fees_amount
        - deal.rebates_before_tax
        - relations.vehicle.discount
        - relations.trade_in.final_market_value
        + deal.fed_luxury_tax
        + deal.bc_luxury_tax
        + relations.trade_in.lien_remaining
    )


def lease_amount(deal: Deal, bundle: PaymentBundle, msrp_adjusted: Decimal) -> Decimal:
    """Capitalized amount, net of the deal deposit and the bundle down payment."""
    return _capitalized_amount(deal, deal.require_relations(), bundle, msrp_adjusted)


def lease_amount_with_no_down(deal: Deal, bundle: PaymentBundle) -> Decimal:
    """Capitalized amount using the bundle's own msrp adjustment, with no deposit or down payment."""
    return _capitalized_amount_with_no_down(deal, deal.require_relations(), bundle)


def _taxed_lease_payment(
    deal: Deal, relations: DealRelations, bundle: PaymentBundle, amount: Decimal
) -> Decimal:
    # lien remaining is not taxed
    taxed_amount = amount - relations.trade_in.lien_remaining

    base_amount = lease_base_amount(deal, bundle, amount)
    taxed_base_amount = lease_base_amount(deal, bundle, taxed_amount)
    tax = to_cents(taxed_base_amount * tax_rate(relations.tax_province))

    return to_cents(base_amount + tax)


def lease_payment(deal: Deal, bundle: PaymentBundle, msrp_adjusted: Decimal) -> Decimal:
    """
    Periodic lease payment including tax.

    Raises:
        MissingRelationError: If the deal lacks a vehicle, trade-in or tax province
    """
    relations = deal.require_relations()
    amount = _capitalized_amount(deal, relations, bundle, msrp_adjusted)
    return _taxed_lease_payment(deal, relations, bundle, amount)


def lease_payment_with_no_down(deal: Deal, bundle: PaymentBundle) -> Decimal:
    """
    Lease payment quoted as if nothing were paid up front.

    Reads the bundle's own msrp_adjustment instead of the selected bundle's,
    and leaves the down payment and deposit out of the capitalized amount.

    Raises:
        MissingRelationError: If the deal lacks a vehicle, trade-in or tax province
    """
    relations = deal.require_relations()
    amount = _capitalized_amount_with_no_down(deal, relations, bundle)
    return _taxed_lease_payment(deal, relations, bundle, amount)
