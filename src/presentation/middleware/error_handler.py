"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    DomainException,
    NotFoundException,
    InvalidCreditRequestException,
    CreditAccessDeniedException,
    CustomerAlreadyExistsException,
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

    @app.exception_handler(NotFoundException)
    async def not_found_handler(
        request: Request,
        exc: NotFoundException,
    ) -> JSONResponse:
        """Handle missing customers and credits."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(InvalidCreditRequestException)
    async def invalid_credit_request_handler(
        request: Request,
        exc: InvalidCreditRequestException,
    ) -> JSONResponse:
        """Handle credit requests that break a business rule."""
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(CreditAccessDeniedException)
    async def credit_access_denied_handler(
        request: Request,
        exc: CreditAccessDeniedException,
    ) -> JSONResponse:
        """Handle access to a credit owned by another customer."""
        logger.warning(
            "credit_access_denied",
            request_id=get_request_id(),
            path=request.url.path,
        )
        return _error_response(403, exc.code, exc.message)

    @app.exception_handler(CustomerAlreadyExistsException)
    async def customer_conflict_handler(
        request: Request,
        exc: CustomerAlreadyExistsException,
    ) -> JSONResponse:
        """Handle a duplicate cpf or email."""
        return _error_response(409, exc.code, exc.message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions, store failures included."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
