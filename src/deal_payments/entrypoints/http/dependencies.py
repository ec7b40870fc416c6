"""
Dependency injection for FastAPI routes.

The pricing engine is stateless, so use cases are built per request with
no caching and no session handling.
"""

from __future__ import annotations

from deal_payments.use_cases.quote_deal_payments import QuoteDealPayments


def get_quote_deal_payments_use_case() -> QuoteDealPayments:
    """
    Factory function that returns a QuoteDealPayments use case.

    Overridden in route tests through app.dependency_overrides.

    Returns:
        QuoteDealPayments: Use case instance
    """
    return QuoteDealPayments()
