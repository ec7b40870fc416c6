"""Tests for REST error response models."""

from deal_payments.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    """Tests for ErrorDetail model."""

    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="deal.total", message="Must be a valid decimal: x")

        assert detail.model_dump() == {
            "field": "deal.total",
            "message": "Must be a valid decimal: x",
            "code": None,
        }


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_simple_error(self) -> None:
        response = ErrorResponse(detail="Deal is missing required relation 'vehicle'", code="MISSING_RELATION")

        assert response.errors is None
        assert response.code == "MISSING_RELATION"

    def test_accepts_field_errors_as_dicts(self) -> None:
        response = ErrorResponse(
            detail="Validation failed",
            code="VALIDATION_ERROR",
            errors=[
                {
                    "field": "bundles.0.selected_bundle_id",
                    "message": "No bundle with id: lease-36",
                    "code": "UNKNOWN_BUNDLE",
                }
            ],
        )

        assert isinstance(response.errors[0], ErrorDetail)
        assert response.errors[0].code == "UNKNOWN_BUNDLE"
