from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from deal_payments.domain.deal import Deal, PaymentBundle, PaymentTypeName
from deal_payments.domain.lease import lease_payment_with_no_down
from deal_payments.domain.payment import compute_payment

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuoteDealPaymentsRequest:
    deal: Deal
    bundles: tuple[PaymentBundle, ...]


@dataclass(frozen=True, slots=True)
class BundleQuote:
    bundle_id: str | None
    payment_type: str
    term: int
    rate: Decimal
    is_active: bool
    payment: Decimal
    lease_payment_with_no_down: Decimal | None = None  # lease bundles only


@dataclass(frozen=True, slots=True)
class QuoteDealPaymentsResponse:
    quotes: list[BundleQuote]


class QuoteDealPayments:
    """
    Price every bundle offered on a deal.

    Responsibilities:
    - Reject snapshots missing relations that a finance or lease bundle needs
    - Compute each bundle's periodic payment
    - Add the no-down lease payment for lease bundles

    Payment types and terms are not validated; unknown payment types quote 0.
    """

    def execute(self, request: QuoteDealPaymentsRequest) -> QuoteDealPaymentsResponse:
        """
        Execute the quote.

        Args:
            request: Deal snapshot and the bundles to price

        Returns:
            QuoteDealPaymentsResponse with one quote per bundle, in request order

        Raises:
            MissingRelationError: If a finance/lease bundle is quoted on a deal
                lacking a vehicle, trade-in or tax province
        """
        # Validate once up front so a bad snapshot fails before any pricing
        if any(
            bundle.payment_type in (PaymentTypeName.FINANCE, PaymentTypeName.LEASE)
            for bundle in request.bundles
        ):
            request.deal.require_relations()

        quotes = [self._quote(request.deal, bundle) for bundle in request.bundles]

        logger.debug(
            "Quoted deal payments",
            extra={
                "bundle_count": len(quotes),
                "payments": [str(quote.payment) for quote in quotes],
            },
        )

        return QuoteDealPaymentsResponse(quotes=quotes)

    def _quote(self, deal: Deal, bundle: PaymentBundle) -> BundleQuote:
        payment_type = bundle.payment_type

        no_down = None
        if payment_type is PaymentTypeName.LEASE:
            no_down = lease_payment_with_no_down(deal, bundle)

        return BundleQuote(
            bundle_id=bundle.id,
            payment_type=payment_type.value if payment_type else str(bundle.payment_type_name),
            term=bundle.term,
            rate=bundle.rate,
            is_active=bundle.is_active,
            payment=compute_payment(deal, bundle),
            lease_payment_with_no_down=no_down,
        )
