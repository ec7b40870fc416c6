from fastapi import APIRouter, Depends

from deal_payments.entrypoints.http.dependencies import get_quote_deal_payments_use_case
from deal_payments.entrypoints.http.dtos.deal_payments import (
    DealPaymentsRequestDTO,
    DealPaymentsResponseDTO,
)
from deal_payments.entrypoints.http.mappers.deal_payments_mapper import DealPaymentsMapper
from deal_payments.use_cases.quote_deal_payments import QuoteDealPayments


router = APIRouter(tags=["Payments"])


@router.post(
    "/deals/payments",
    response_model=DealPaymentsResponseDTO,
    summary="Quote bundle payments for a deal",
    description="""
    Calculate the periodic payment for every bundle offered on a deal.

    ## Monetary Values
    - All monetary values and rates are strings (e.g., "30000.00", "5.99")
    - Rates are annual percentages; tax rates are percentages

    ## Payment Types
    - cash: the deal total
    - finance: amortized loan payment on the taxed amount
    - lease: lease payment plus tax on the taxable base (lien excluded)
    - anything else: "0"

    ## Rounding
    - Finance and lease payments are rounded to cents (half away from zero);
      cash echoes the deal total
    - Exception: a zero-rate finance bundle returns the amount divided by the
      number of payments unrounded, at full decimal precision
      (e.g. 30000 over 36 months is "833.3333333333333333333333333")

    ## Selected Bundle
    - `selected_bundle_id` names the bundle (this one or a peer) whose
      `msrp_adjustment` applies to the payment
    - `lease_payment_with_no_down` always uses the bundle's own adjustment

    ## Example
    ```
    POST /v1/deals/payments
    {
        "deal": {"total": "30000.00", "frequency": "monthly", ...},
        "bundles": [{"id": "finance-60", "payment_type": "finance", "term": 60, "rate": "6"}]
    }
    ```
    """,
    responses={
        200: {"description": "Successful calculation"},
        422: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "examples": {
                        "invalid_decimal": {
                            "summary": "Invalid decimal format",
                            "value": {
                                "detail": "Validation failed",
                                "code": "VALIDATION_ERROR",
                                "errors": [
                                    {
                                        "field": "deal.total",
                                        "message": "Must be a valid decimal: abc",
                                        "code": "INVALID_DECIMAL",
                                    }
                                ],
                            },
                        },
                        "unknown_selected_bundle": {
                            "summary": "Selected bundle not in payload",
                            "value": {
                                "detail": "Validation failed",
                                "code": "VALIDATION_ERROR",
                                "errors": [
                                    {
                                        "field": "bundles.0.selected_bundle_id",
                                        "message": "No bundle with id: lease-36",
                                        "code": "UNKNOWN_BUNDLE",
                                    }
                                ],
                            },
                        },
                        "missing_relation": {
                            "summary": "Deal snapshot lacks a vehicle",
                            "value": {
                                "detail": "Deal is missing required relation 'vehicle'",
                                "code": "MISSING_RELATION",
                            },
                        },
                    }
                }
            },
        },
    },
)
def quote_deal_payments(
    payload: DealPaymentsRequestDTO,
    use_case: QuoteDealPayments = Depends(get_quote_deal_payments_use_case),
) -> DealPaymentsResponseDTO:
    """Quote endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request (string → Decimal, selected bundle links)
    request = DealPaymentsMapper.to_domain_request(payload)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response (Decimal → string)
    return DealPaymentsMapper.to_response(result)
