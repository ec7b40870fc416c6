"""REST API error response models.

Documents the structured body every error handler returns.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "bundles.0.selected_bundle_id",
                "message": "No bundle with id: lease-36",
                "code": "UNKNOWN_BUNDLE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Missing relation:
            {
                "detail": "Deal is missing required relation 'trade_in'",
                "code": "MISSING_RELATION"
            }

        Validation error with fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "deal.total",
                        "message": "Must be a valid decimal: 1e",
                        "code": "INVALID_DECIMAL"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Deal is missing required relation 'trade_in'", "code": "MISSING_RELATION"},
                {"detail": "Deal terms cannot be priced", "code": "UNPRICEABLE_DEAL"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "deal.total",
                            "message": "Must be a valid decimal: 1e",
                            "code": "INVALID_DECIMAL",
                        },
                    ],
                },
            ]
        }
    )
