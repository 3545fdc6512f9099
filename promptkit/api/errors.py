"""
API error handling and exception mapping.

Converts domain and framework errors into JSON responses carrying a
machine-readable ``error`` code.
"""

from datetime import datetime, timezone

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from promptkit.api.schemas.base import ErrorResponse
from promptkit.domain_core.exceptions import DomainError
from promptkit.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

STATUS_CODE_MAPPING = {
    "MISSING_PROMPT": status.HTTP_400_BAD_REQUEST,
    "PROMPT_TOO_LONG": status.HTTP_400_BAD_REQUEST,
}


def _error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail, timestamp=datetime.now(timezone.utc))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """
    Handle domain-specific errors.

    Args:
        request: The HTTP request
        exc: The domain error

    Returns:
        JSONResponse: Formatted error response
    """
    logger.warning("domain.error", code=exc.code, detail=exc.message)

    status_code = STATUS_CODE_MAPPING.get(exc.code, status.HTTP_400_BAD_REQUEST)
    return _error_response(status_code, exc.code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request body validation errors."""
    formatted_errors = []
    for error in exc.errors():
        location = " -> ".join(str(loc) for loc in error["loc"])
        formatted_errors.append(f"{location}: {error['msg']}")

    logger.warning("request.validation_error", errors=formatted_errors)

    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Validation failed: " + "; ".join(formatted_errors),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    logger.warning("http.error", status_code=exc.status_code, detail=str(exc.detail))
    return _error_response(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("unexpected.error", error_type=type(exc).__name__)

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please try again later.",
    )


def setup_error_handlers(app) -> None:
    """
    Setup error handlers for the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
