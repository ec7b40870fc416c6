from __future__ import annotations

from dataclasses import replace
from decimal import Decimal, InvalidOperation

from deal_payments.domain.deal import (
    Deal,
    Frequency,
    PaymentBundle,
    TaxComponent,
    TaxProvince,
    TradeIn,
    Vehicle,
)
from deal_payments.domain.errors import ValidationError
from deal_payments.entrypoints.http.dtos.deal_payments import (
    BundleDTO,
    BundleQuoteDTO,
    DealDTO,
    DealPaymentsRequestDTO,
    DealPaymentsResponseDTO,
)
from deal_payments.use_cases.quote_deal_payments import (
    QuoteDealPaymentsRequest,
    QuoteDealPaymentsResponse,
)


class _DecimalParser:
    """Collects conversion errors so every bad field is reported at once."""

    def __init__(self) -> None:
        self.errors: list[dict[str, str]] = []

    def parse(self, field: str, value: str) -> Decimal:
        try:
            return Decimal(value)
        except (InvalidOperation, ValueError):
            self.errors.append(
                {
                    "field": field,
                    "message": f"Must be a valid decimal: {value}",
                    "code": "INVALID_DECIMAL",
                }
            )
            return Decimal("0")  # Placeholder to continue validation


class DealPaymentsMapper:
    """Maps between REST DTOs and domain models for deal payment quotes."""

    @staticmethod
    def to_domain_request(dto: DealPaymentsRequestDTO) -> QuoteDealPaymentsRequest:
        """
        Converts request DTO to a domain quote request.

        Handles string → Decimal conversion at the boundary and resolves each
        bundle's selected_bundle_id to the peer bundle in the same payload.

        Args:
            dto: Request DTO with string monetary values

        Returns:
            QuoteDealPaymentsRequest with Decimal monetary values

        Raises:
            ValidationError: If values cannot be converted to Decimals, bundle
                ids repeat, or a selected_bundle_id names no bundle
        """
        parser = _DecimalParser()

        deal = DealPaymentsMapper._to_deal(dto.deal, parser)
        bundles = [
            DealPaymentsMapper._to_bundle(bundle, f"bundles.{index}", parser)
            for index, bundle in enumerate(dto.bundles)
        ]

        if parser.errors:
            raise ValidationError(errors=parser.errors)

        return QuoteDealPaymentsRequest(
            deal=deal,
            bundles=DealPaymentsMapper._link_selected_bundles(dto.bundles, bundles),
        )

    @staticmethod
    def to_response(result: QuoteDealPaymentsResponse) -> DealPaymentsResponseDTO:
        """
        Converts domain quotes to response DTO.

        Handles Decimal → string conversion at the boundary.
        """
        return DealPaymentsResponseDTO(
            quotes=[
                BundleQuoteDTO(
                    bundle_id=quote.bundle_id,
                    payment_type=quote.payment_type,
                    term=quote.term,
                    rate=str(quote.rate),
                    is_active=quote.is_active,
                    payment=str(quote.payment),
                    lease_payment_with_no_down=(
                        str(quote.lease_payment_with_no_down)
                        if quote.lease_payment_with_no_down is not None
                        else None
                    ),
                )
                for quote in result.quotes
            ]
        )

    @staticmethod
    def _to_deal(dto: DealDTO, parser: _DecimalParser) -> Deal:
        tax_province = None
        if dto.tax_province is not None:
            tax_province = TaxProvince(
                name=dto.tax_province.name,
                taxes=tuple(
                    TaxComponent(
                        name=tax.name,
                        tax_rate=parser.parse(f"deal.tax_province.taxes.{index}.tax_rate", tax.tax_rate),
                    )
                    for index, tax in enumerate(dto.tax_province.taxes)
                ),
            )

        vehicle = None
        if dto.vehicle is not None:
            vehicle = Vehicle(
                msrp=parser.parse("deal.vehicle.msrp", dto.vehicle.msrp),
                discount=parser.parse("deal.vehicle.discount", dto.vehicle.discount),
            )

        trade_in = None
        if dto.trade_in is not None:
            trade_in = TradeIn(
                final_market_value=parser.parse(
                    "deal.trade_in.final_market_value", dto.trade_in.final_market_value
                ),
                lien_remaining=parser.parse("deal.trade_in.lien_remaining", dto.trade_in.lien_remaining),
            )

        return Deal(
            total=parser.parse("deal.total", dto.total),
            rebates_before_tax=parser.parse("deal.rebates_before_tax", dto.rebates_before_tax),
            accessories_amount=parser.parse("deal.accessories_amount", dto.accessories_amount),
            fees_amount=parser.parse("deal.fees_amount", dto.fees_amount),
            fed_luxury_tax=parser.parse("deal.fed_luxury_tax", dto.fed_luxury_tax),
            bc_luxury_tax=parser.parse("deal.bc_luxury_tax", dto.bc_luxury_tax),
            deposit=parser.parse("deal.deposit", dto.deposit),
            frequency=DealPaymentsMapper._to_frequency(dto.frequency),
            tax_province=tax_province,
            vehicle=vehicle,
            trade_in=trade_in,
        )

    @staticmethod
    def _to_frequency(value: str | None) -> Frequency | None:
        # Unknown cadences are priced as a single payment, not rejected
        if value is None:
            return None
        try:
            return Frequency(value)
        except ValueError:
            return None

    @staticmethod
    def _to_bundle(dto: BundleDTO, path: str, parser: _DecimalParser) -> PaymentBundle:
        return PaymentBundle(
            id=dto.id,
            payment_type_name=dto.payment_type,
            term=dto.term,
            minimum_term=dto.minimum_term,
            amortization_term=dto.amortization_term,
            rate=parser.parse(f"{path}.rate", dto.rate),
            residual=parser.parse(f"{path}.residual", dto.residual),
            down_payment=parser.parse(f"{path}.down_payment", dto.down_payment),
            msrp_adjustment=parser.parse(f"{path}.msrp_adjustment", dto.msrp_adjustment),
            is_active=dto.is_active,
        )

    @staticmethod
    def _link_selected_bundles(
        dtos: list[BundleDTO], bundles: list[PaymentBundle]
    ) -> tuple[PaymentBundle, ...]:
        errors = []
        by_id: dict[str, PaymentBundle] = {}

        for index, bundle in enumerate(bundles):
            if bundle.id in by_id:
                errors.append(
                    {
                        "field": f"bundles.{index}.id",
                        "message": f"Duplicate bundle id: {bundle.id}",
                        "code": "DUPLICATE_BUNDLE_ID",
                    }
                )
            by_id[bundle.id] = bundle  # type: ignore[index]

        linked = []
        for index, (dto, bundle) in enumerate(zip(dtos, bundles)):
            if dto.selected_bundle_id is None:
                linked.append(bundle)
                continue

            selected = by_id.get(dto.selected_bundle_id)
            if selected is None:
                errors.append(
                    {
                        "field": f"bundles.{index}.selected_bundle_id",
                        "message": f"No bundle with id: {dto.selected_bundle_id}",
                        "code": "UNKNOWN_BUNDLE",
                    }
                )
                continue

            # The selected bundle may be this one; only its msrp_adjustment is read
            linked.append(replace(bundle, selected_bundle=selected))

        if errors:
            raise ValidationError(errors=errors)

        return tuple(linked)
