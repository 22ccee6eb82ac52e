"""Exception handlers for the application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from film_views.exceptions import ErrorCode, FilmViewsException
from film_views.logging_config import get_logger, log_with_context
from film_views.models import ErrorDetail, ErrorResponse

logger = get_logger(__name__)


async def film_views_exception_handler(request: Request, exc: FilmViewsException) -> JSONResponse:
    """Handle custom film view exceptions with proper HTTP status codes.

    Returns structured JSON error responses with status code, error code,
    message, and optional details for client-side error handling.
    """
    log_with_context(
        logger,
        "warning",
        "Film views error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="film_views_error",
    )

    body = ErrorResponse(error=ErrorDetail(code=exc.code.value, message=exc.message, details=exc.details))

    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(mode="json"),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    # Also log the traceback separately for debugging
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    body = ErrorResponse(error=ErrorDetail(code=ErrorCode.INTERNAL_ERROR.value, message="Internal server error"))
    return JSONResponse(
        status_code=500,
        content=body.model_dump(mode="json"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    from slowapi import _rate_limit_exceeded_handler
    from slowapi.errors import RateLimitExceeded

    app.add_exception_handler(FilmViewsException, film_views_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
