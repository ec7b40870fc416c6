"""FastAPI exception handlers for domain errors.

Translates domain and arithmetic errors to HTTP responses with a structured error format.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from deal_payments.domain.errors import DomainError

logger = logging.getLogger(__name__)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Handle all domain errors with automatic HTTP status code mapping.

    Maps domain errors to HTTP status codes:
    - VALIDATION_ERROR → 422 Unprocessable Entity
    - MISSING_RELATION → 422 Unprocessable Entity
    - Other → 400 Bad Request

    Args:
        request: FastAPI request object
        exc: Domain error to handle

    Returns:
        JSON response with structured error format
    """
    error_dict = exc.to_dict()

    status_code_map: dict[str, int] = {
        "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
        "MISSING_RELATION": 422,
    }

    status_code = status_code_map.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    logger.info(
        "Client error",
        extra={
            "error_code": exc.error_code,
            "error_message": exc.message,
            "context": exc.context,
            "path": request.url.path,
            "method": request.method,
        },
    )

    response_content: dict[str, Any] = {
        "detail": error_dict.get("message", str(exc)),
        "code": error_dict.get("code", exc.error_code),
    }

    # Add field-level errors if present (for ValidationError)
    if "errors" in error_dict:
        response_content["errors"] = error_dict["errors"]

    return JSONResponse(status_code=status_code, content=response_content)


def _body_field_path(loc: tuple[Any, ...]) -> str:
    # ("body", "bundles", 0, "rate") -> "bundles.0.rate", the mapper's path format
    if loc and loc[0] == "body":
        loc = loc[1:]
    return ".".join(str(part) for part in loc)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request bodies rejected by the DTO schema.

    Decimal strings failing the DTO pattern are reported with the same
    INVALID_DECIMAL code and message the mapper uses, so clients see one
    error shape for a malformed amount.

    Examples:
        - deal.total="abc"
        - bundles=[] (at least one bundle required)
        - bundles.0.term=-1

    Args:
        request: FastAPI request object
        exc: Pydantic validation error

    Returns:
        JSON response with 422 status and per-field errors
    """
    errors = []

    for error in exc.errors():
        if error["type"] == "string_pattern_mismatch":
            message = f"Must be a valid decimal: {error.get('input')}"
            code = "INVALID_DECIMAL"
        else:
            message = error["msg"]
            code = error["type"]

        errors.append({"field": _body_field_path(tuple(error["loc"])), "message": message, "code": code})

    logger.info(
        "Rejected deal payments request",
        extra={
            "errors": errors,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_arithmetic_error(request: Request, exc: ArithmeticError) -> JSONResponse:
    """Handle numeric-domain failures from degenerate deal terms.

    The engine only guards the zero-rate cases; a zero term or a
    zero-payment cadence surfaces here as a decimal division error.

    Args:
        request: FastAPI request object
        exc: Arithmetic error raised while pricing

    Returns:
        JSON response with 422 status
    """
    logger.info(
        "Unpriceable deal",
        extra={
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": "Deal terms cannot be priced",
            "code": "UNPRICEABLE_DEAL",
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for failures outside the error taxonomy.

    The body never echoes the exception; the traceback goes to the log only.

    Args:
        request: FastAPI request object
        exc: Unexpected exception

    Returns:
        JSON response with 500 status and generic error message
    """
    logger.error(
        "Unhandled error while quoting deal payments",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ArithmeticError, handle_arithmetic_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.debug("Exception handlers registered")
