from typing import Any

from pydantic import BaseModel, ConfigDict, Field


DECIMAL_PATTERN = r"^-?\d+(\.\d+)?$"


def _decimal_field(description: str, example: str, default: str | None = None) -> Any:
    if default is None:
        return Field(description=description, examples=[example], pattern=DECIMAL_PATTERN)
    return Field(default=default, description=description, examples=[example], pattern=DECIMAL_PATTERN)


class TaxComponentDTO(BaseModel):
    name: str = Field(description="Tax component name (GST and PST apply)", examples=["GST"])
    tax_rate: str = _decimal_field("Tax rate in percent as decimal string", "5")


class TaxProvinceDTO(BaseModel):
    name: str = Field(description="Province code", examples=["BC"])
    taxes: list[TaxComponentDTO] = Field(default_factory=list)


class VehicleDTO(BaseModel):
    msrp: str = _decimal_field("Manufacturer suggested retail price", "30000.00")
    discount: str = _decimal_field("Dealer discount on the vehicle", "0", default="0")


class TradeInDTO(BaseModel):
    final_market_value: str = _decimal_field("Trade-in value credited to the deal", "0", default="0")
    lien_remaining: str = _decimal_field("Outstanding lien carried into the deal", "0", default="0")


class DealDTO(BaseModel):
    """Fully-populated deal snapshot."""

    total: str = _decimal_field("Cash price of the deal", "33600.00")
    rebates_before_tax: str = _decimal_field("Rebates applied before tax", "0", default="0")
    accessories_amount: str = _decimal_field("Accessories total", "0", default="0")
    fees_amount: str = _decimal_field("Fees total", "0", default="0")
    fed_luxury_tax: str = _decimal_field("Federal luxury tax", "0", default="0")
    bc_luxury_tax: str = _decimal_field("BC luxury tax", "0", default="0")
    deposit: str = _decimal_field("Deposit already paid", "0", default="0")
    frequency: str | None = Field(
        default=None,
        description="Payment cadence: weekly, bi-weekly or monthly. Anything else is a single payment.",
        examples=["monthly"],
    )
    tax_province: TaxProvinceDTO | None = None
    vehicle: VehicleDTO | None = None
    trade_in: TradeInDTO | None = None


class BundleDTO(BaseModel):
    """One payment plan offered on the deal."""

    id: str = Field(description="Bundle identifier, unique within the request", examples=["finance-60"])
    payment_type: str = Field(description="cash, finance or lease", examples=["finance"])
    term: int = Field(default=0, description="Term in months", examples=[60], ge=0)
    minimum_term: int | None = Field(default=None, ge=0)
    amortization_term: int | None = Field(default=None, ge=0)
    rate: str = _decimal_field("Annual rate in percent", "6", default="0")
    residual: str = _decimal_field("Lease residual value", "0", default="0")
    down_payment: str = _decimal_field("Down payment", "0", default="0")
    msrp_adjustment: str = _decimal_field("MSRP adjustment on this bundle", "0", default="0")
    is_active: bool = True
    selected_bundle_id: str | None = Field(
        default=None,
        description="Bundle whose msrp_adjustment applies to this bundle's payment",
        examples=["finance-60"],
    )


class DealPaymentsRequestDTO(BaseModel):
    """Request payload for quoting every bundle on a deal."""

    deal: DealDTO
    bundles: list[BundleDTO] = Field(min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "deal": {
                    "total": "33600.00",
                    "frequency": "monthly",
                    "tax_province": {
                        "name": "BC",
                        "taxes": [
                            {"name": "GST", "tax_rate": "5"},
                            {"name": "PST", "tax_rate": "7"},
                        ],
                    },
                    "vehicle": {"msrp": "30000.00", "discount": "0"},
                    "trade_in": {"final_market_value": "0", "lien_remaining": "0"},
                },
                "bundles": [
                    {"id": "finance-60", "payment_type": "finance", "term": 60, "rate": "6"},
                ],
            }
        }
    )


class BundleQuoteDTO(BaseModel):
    """Calculated payment for one bundle."""

    bundle_id: str | None = Field(examples=["finance-60"])
    payment_type: str = Field(examples=["finance"])
    term: int = Field(examples=[60])
    rate: str = Field(description="Annual rate in percent as decimal string", examples=["6"])
    is_active: bool
    payment: str = Field(
        description=(
            "Periodic payment as decimal string. Finance and lease payments are rounded"
            " to cents; a zero-rate finance bundle is the amount split evenly over the"
            " payments and is not rounded"
            " (e.g. \"833.3333333333333333333333333\")"
        ),
        examples=["649.58"],
    )
    lease_payment_with_no_down: str | None = Field(
        default=None,
        description="Lease payment with nothing paid up front (lease bundles only)",
        examples=[None],
    )


class DealPaymentsResponseDTO(BaseModel):
    quotes: list[BundleQuoteDTO]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "quotes": [
                    {
                        "bundle_id": "finance-60",
                        "payment_type": "finance",
                        "term": 60,
                        "rate": "6",
                        "is_active": True,
                        "payment": "649.58",
                        "lease_payment_with_no_down": None,
                    }
                ]
            }
        }
    )
