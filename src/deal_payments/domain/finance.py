from __future__ import annotations

from decimal import Decimal

from deal_payments.domain.deal import Deal, DealRelations, PaymentBundle
from deal_payments.domain.frequency import number_of_payments
from deal_payments.domain.money import to_cents
from deal_payments.domain.tax import tax_rate


def periodic_interest_rate(rate: Decimal, term: int, payments: Decimal) -> Decimal:
    """
    Interest rate applied per payment.

    Payments per year are derived as payments / loan years rather than looked
    up from the cadence, so a single-payment deal spreads the annual rate over
    12 / term payments per year.
    """
    loan_years = Decimal(term) / Decimal(12)
    payments_per_year = payments / loan_years
    return rate / Decimal(100) / payments_per_year


def _amount_before_tax(deal: Deal, relations: DealRelations, msrp_adjusted: Decimal) -> Decimal:
    return (
        relations.vehicle.msrp
        + msrp_adjusted
        - relations.vehicle.discount
        - deal.rebates_before_tax
        + deal.accessories_amount
        + deal.fees_amount
        - relations.trade_in.final_market_value
    )


def _final_amount(
    deal: Deal, relations: DealRelations, bundle: PaymentBundle, msrp_adjusted: Decimal
) -> Decimal:
    after_tax = _amount_before_tax(deal, relations, msrp_adjusted) * (1 + tax_rate(relations.tax_province))
    return (
        after_tax
        + relations.trade_in.lien_remaining
        + deal.fed_luxury_tax
        + deal.bc_luxury_tax
        - bundle.down_payment
    )


def finance_amount_before_tax(deal: Deal, msrp_adjusted: Decimal) -> Decimal:
    return _amount_before_tax(deal, deal.require_relations(), msrp_adjusted)


def final_finance_amount(deal: Deal, bundle: PaymentBundle, msrp_adjusted: Decimal) -> Decimal:
    """Taxed amount financed, plus the untaxed lien and luxury taxes, less the down payment."""
    return _final_amount(deal, deal.require_relations(), bundle, msrp_adjusted)


def finance_payment(deal: Deal, bundle: PaymentBundle, msrp_adjusted: Decimal) -> Decimal:
    """
    Periodic loan payment using the standard amortization formula:

        payment = A * r / (1 - (1 + r)^-n)

    A zero rate leaves the divisor at 0; the amount is then split evenly over
    the payments and returned unrounded.

    Raises:
        MissingRelationError: If the deal lacks a vehicle, trade-in or tax province
    """
    relations = deal.require_relations()

    payments = number_of_payments(deal.frequency, bundle.term)
    periodic_interest = periodic_interest_rate(bundle.rate, bundle.term, payments)
    amount = _final_amount(deal, relations, bundle, msrp_adjusted)

    divisor = 1 - (1 + periodic_interest) ** -payments

    if divisor == 0:
        return amount / payments

    return to_cents(amount * periodic_interest / divisor)
