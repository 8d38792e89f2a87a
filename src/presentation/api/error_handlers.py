"""Error translator: the one place where failures become HTTP responses.

Every route runs inside TranslatingRoute, which hands any exception to
translate_error. Requests that match no route never reach a route, so
the HTTPException Starlette raises for them is registered here too.
Server-side failures are answered with a fixed message; their details
only go to the log.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.exceptions import (
    DecodeError,
    DirectoryError,
    NotFoundError,
    RouteNotFoundError,
    StorageError,
    ValidationError,
)
from infrastructure.config import get_logger
from presentation.schemas import ErrorBody, ErrorResponse

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"
STORAGE_ERROR_MESSAGE = "The employee store is temporarily unavailable"

# Statuses the framework raises itself, before or while decoding a request
ROUTE_MISS_STATUSES = (404, 405)
DECODE_FAILURE_STATUSES = (400, 422)

ERROR_STATUS = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
    DecodeError: (status.HTTP_400_BAD_REQUEST, "DECODE_ERROR"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    RouteNotFoundError: (status.HTTP_404_NOT_FOUND, "ROUTE_NOT_FOUND"),
    StorageError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "STORAGE_ERROR"),
}


def register_error_handlers(app: FastAPI) -> None:
    """Register the handler for requests that match no route."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle 404/405 raised by the router before any handler runs."""
        return translate_error(exc, request)


def translate_error(exc: Exception, request: Request) -> JSONResponse:
    """Convert any exception into the public error response."""
    error = _classify(exc, request)
    status_code, code = _status_for(error)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            f"{code} on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
            extra={"error_code": code, "path": request.url.path},
        )
        message = STORAGE_ERROR_MESSAGE if isinstance(error, StorageError) else INTERNAL_ERROR_MESSAGE
    else:
        logger.warning(
            f"{code} on {request.method} {request.url.path}: {error.message}",
            extra={"error_code": code, "path": request.url.path},
        )
        message = error.message

    body = ErrorResponse(
        error=ErrorBody(
            code=code,
            message=message,
            retryable=getattr(error, "retryable", False),
            details=error.details if isinstance(error, DecodeError) and error.details else None,
        )
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _classify(exc: Exception, request: Request) -> Exception:
    """Map framework exceptions onto the domain taxonomy."""
    if isinstance(exc, RequestValidationError):
        return DecodeError("Malformed request", details=_validation_details(exc))
    if isinstance(exc, StarletteHTTPException):
        if exc.status_code in ROUTE_MISS_STATUSES:
            return RouteNotFoundError(request.method, request.url.path)
        if exc.status_code in DECODE_FAILURE_STATUSES:
            return DecodeError(str(exc.detail))
    return exc


def _status_for(error: Exception) -> tuple[int, str]:
    for error_type, mapping in ERROR_STATUS.items():
        if isinstance(error, error_type):
            return mapping
    if isinstance(error, DirectoryError):
        logger.warning(f"Unmapped directory error {type(error).__name__}")
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"


def _validation_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
