import logging

from fastapi import FastAPI

from deal_payments.entrypoints.http.error_responses import ErrorResponse
from deal_payments.entrypoints.http.exception_handlers import register_exception_handlers
from deal_payments.entrypoints.http.routes.deal_payments import router as deal_payments_router
from deal_payments.entrypoints.http.routes.health import router as health_router
from deal_payments.infra.config import log_level


def build_app() -> FastAPI:
    logging.getLogger("deal_payments").setLevel(log_level())

    app = FastAPI(
        title="Deal Payments API",
        description="""
        Payment calculation for vehicle deals.

        ## Features
        - Quote cash, finance and lease bundles for a deal snapshot
        - Lease payments with and without money down

        ## Authentication
        Currently no authentication required (development phase).

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(deal_payments_router, prefix="/v1")

    return app


app = build_app()
