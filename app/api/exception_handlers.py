"""
Exception handlers for FastAPI application.

Every error leaves the API as ``{"error": true, "message", "status_code"}``.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.core.domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    IntegrationException,
    ValidationException,
)
from app.domains.interviews.domain.exceptions import StoreError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": True, "message": message, "status_code": status_code, **extra},
    )


def _format_errors(errors) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


def domain_status_code(exc: DomainException) -> int:
    """HTTP status for a domain exception."""
    if isinstance(exc, ValidationException):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, EntityNotFoundException):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, StoreError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    if isinstance(exc, IntegrationException):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with consistent response format."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    response = _error_response(http_exc.status_code, http_exc.detail)
    if http_exc.headers:
        response.headers.update(http_exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors with detailed error messages."""
    if not isinstance(exc, RequestValidationError):
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    errors = _format_errors(exc.errors())
    logger.warning(f"Validation error on {request.url.path}: {errors}")
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", details=errors)


async def pydantic_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle Pydantic validation errors."""
    if not isinstance(exc, ValidationError):
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    errors = _format_errors(exc.errors())
    logger.warning(f"Pydantic validation error: {errors}")
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Data validation error", details=errors)


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle domain exceptions raised past the route handlers."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    status_code = domain_status_code(exc)
    log_level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(log_level, f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return _error_response(status_code, exc.message, code=exc.code)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=True,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
