"""Error handling middleware and exception handlers."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from loan_api.domain.exceptions import (
    AuthenticationException,
    DomainException,
    IdentityVerificationException,
    IncompleteEvaluationException,
    InvalidLoanRequestException,
    InvalidLoanStateException,
    LoanNotFoundException,
    LoanTypeNotFoundException,
    LoanTypeVersionNotFoundException,
    PersistenceException,
    TenantNotFoundException,
    TenantRequiredException,
    UserNotFoundException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[str] = None,
) -> JSONResponse:
    """Render the standard error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
            "error": {
                "code": code,
                "message": message,
                "details": details,
            },
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(LoanNotFoundException)
    @app.exception_handler(LoanTypeNotFoundException)
    @app.exception_handler(LoanTypeVersionNotFoundException)
    @app.exception_handler(UserNotFoundException)
    @app.exception_handler(TenantNotFoundException)
    async def not_found_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle missing resources."""
        return error_response(404, exc.code, exc.message, exc.details)

    @app.exception_handler(InvalidLoanRequestException)
    @app.exception_handler(TenantRequiredException)
    async def invalid_request_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle invalid request errors."""
        return error_response(400, exc.code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request body, path and query validation failures."""
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return error_response(400, "VALIDATION_ERROR", "Invalid request", details)

    @app.exception_handler(InvalidLoanStateException)
    @app.exception_handler(IncompleteEvaluationException)
    async def conflict_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle operations not allowed in the loan's current state."""
        logger.info(
            "loan_state_conflict",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return error_response(409, exc.code, exc.message, exc.details)

    @app.exception_handler(AuthenticationException)
    async def authentication_handler(
        request: Request,
        exc: AuthenticationException,
    ) -> JSONResponse:
        """Handle missing or invalid credentials."""
        response = error_response(401, exc.code, exc.message, exc.details)
        response.headers["WWW-Authenticate"] = "Bearer"
        return response

    @app.exception_handler(IdentityVerificationException)
    async def identity_verification_handler(
        request: Request,
        exc: IdentityVerificationException,
    ) -> JSONResponse:
        """Handle technical failures of identity verification."""
        logger.error(
            "identity_verification_error",
            request_id=get_request_id(),
            message=exc.message,
        )
        return error_response(500, exc.code, exc.message, exc.details)

    @app.exception_handler(PersistenceException)
    async def persistence_handler(
        request: Request,
        exc: PersistenceException,
    ) -> JSONResponse:
        """Handle database failures without leaking driver details."""
        logger.error(
            "persistence_error",
            request_id=get_request_id(),
            message=exc.message,
            details=exc.details,
        )
        return error_response(500, exc.code, exc.message)

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
        return error_response(400, exc.code, exc.message, exc.details)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
