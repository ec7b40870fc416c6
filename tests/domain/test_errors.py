"""Tests for domain error classes."""

from deal_payments.domain.errors import DomainError, MissingRelationError, ValidationError


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_to_dict_includes_context(self) -> None:
        """DomainError.to_dict() flattens context into the structured format."""
        error = DomainError("Test error", bundle_id="lease-36")

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "bundle_id": "lease-36",
        }

    def test_str_representation(self) -> None:
        """DomainError string representation is the message."""
        assert str(DomainError("Test message")) == "Test message"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_creates_validation_error_with_default_message(self) -> None:
        """ValidationError uses default message if none provided."""
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors is None

    def test_creates_validation_error_with_field_errors(self) -> None:
        """ValidationError can store multiple field-level errors."""
        errors = [
            {"field": "deal.total", "message": "Must be a valid decimal: x", "code": "INVALID_DECIMAL"},
            {"field": "bundles.1.id", "message": "Duplicate bundle id: a", "code": "DUPLICATE_BUNDLE_ID"},
        ]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_without_field_errors(self) -> None:
        """ValidationError.to_dict() works without field errors."""
        error = ValidationError("Simple error")

        assert error.to_dict() == {
            "message": "Simple error",
            "code": "VALIDATION_ERROR",
        }


class TestMissingRelationError:
    """Tests for MissingRelationError class."""

    def test_names_the_missing_relation(self) -> None:
        error = MissingRelationError("tax_province")

        assert error.message == "Deal is missing required relation 'tax_province'"
        assert error.error_code == "MISSING_RELATION"
        assert error.context == {"relation": "tax_province"}

    def test_is_a_domain_error(self) -> None:
        assert isinstance(MissingRelationError("vehicle"), DomainError)
