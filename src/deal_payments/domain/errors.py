"""Domain error classes.

Protocol-agnostic errors that represent pricing failures.
These errors are translated to HTTP responses by the protocol adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains business error information that can be translated
    to any transport format.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Snapshot validation error.

    Used for malformed input that cannot be priced, such as a bundle
    pointing at a selected bundle that is not part of the deal.

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "bundles.0.rate", "message": "Must be a valid decimal"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class MissingRelationError(DomainError):
    """A deal snapshot lacks a relation the finance or lease math needs.

    Examples:
        - Deal without a vehicle
        - Deal without a trade-in record
        - Deal without a tax province

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "MISSING_RELATION"

    def __init__(self, relation: str, **context: Any) -> None:
        super().__init__(f"Deal is missing required relation '{relation}'", relation=relation, **context)

