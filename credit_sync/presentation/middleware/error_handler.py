"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from credit_sync.domain.exceptions import (
    DomainException,
    ExternalAPIException,
    ExternalTimeoutException,
    InvalidArgumentException,
    OrderNotFoundException,
    OrderValidationException,
    PersistenceException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(InvalidArgumentException)
    async def invalid_argument_handler(
        request: Request,
        exc: InvalidArgumentException,
    ) -> JSONResponse:
        """Handle missing or malformed input."""
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(OrderValidationException)
    async def order_validation_handler(
        request: Request,
        exc: OrderValidationException,
    ) -> JSONResponse:
        """Handle order rule violations."""
        logger.info(
            "order_validation_failed",
            order_id=exc.order_id,
            message=exc.message,
        )
        return _error_response(422, exc.code, exc.message)

    @app.exception_handler(OrderNotFoundException)
    async def order_not_found_handler(
        request: Request,
        exc: OrderNotFoundException,
    ) -> JSONResponse:
        """Handle order not found errors."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(PersistenceException)
    async def persistence_error_handler(
        request: Request,
        exc: PersistenceException,
    ) -> JSONResponse:
        """Handle order store failures."""
        logger.error("persistence_error", message=exc.message)
        return _error_response(500, exc.code, "Unable to store the order.")

    @app.exception_handler(ExternalTimeoutException)
    async def external_timeout_handler(
        request: Request,
        exc: ExternalTimeoutException,
    ) -> JSONResponse:
        """Handle upstream timeouts."""
        logger.error("external_api_timeout", service=exc.service)
        return _error_response(
            503, exc.code, "Service temporarily unavailable. Please try again."
        )

    @app.exception_handler(ExternalAPIException)
    async def external_error_handler(
        request: Request,
        exc: ExternalAPIException,
    ) -> JSONResponse:
        """Handle upstream errors."""
        logger.error(
            "external_api_error",
            service=exc.service,
            message=exc.message,
            status_code=exc.status_code,
        )
        return _error_response(
            503, exc.code, "Unable to process request. Please try again later."
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
