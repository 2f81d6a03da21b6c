"""
Centralized error handlers for FastAPI.

Routes every failure through the error translator and answers with the
standard failure envelope. No stack traces or internal details are exposed
to clients beyond what the translator allows.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.shared.errors.codes import ErrorCode
from app.shared.errors.exceptions import AppError, ValidationFailure
from app.shared.errors.translator import translate
from app.shared.responses import failure

# Pydantic error types raised by ge/gt/le/lt bounds.
RANGE_ERROR_TYPES = frozenset(
    {"greater_than", "greater_than_equal", "less_than", "less_than_equal"}
)


def error_response(exc: BaseException) -> JSONResponse:
    """Translate ``exc`` and build the failure response for it."""
    result = translate(exc)
    return failure(result.http_status, result.code, result.message)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()) if item != "body")
        message = err.get("msg", "validation error")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request"


def validation_failure(exc: RequestValidationError) -> ValidationFailure:
    """Convert a request binding error into a ValidationFailure.

    Input that only breaks numeric bounds is reported as out of range,
    anything else as an invalid parameter.
    """
    errors = exc.errors()
    if errors and all(err.get("type") in RANGE_ERROR_TYPES for err in errors):
        code = ErrorCode.PARAM_OUT_OF_RANGE
    else:
        code = ErrorCode.PARAM_INVALID
    return ValidationFailure(_validation_message(exc), code)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(AppError)
    async def handle_app_error(_request: Request, exc: AppError) -> JSONResponse:
        """Handle business and system errors raised by any layer."""
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request binding failures as a validation failure."""
        return error_response(validation_failure(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle framework errors (unknown route, method not allowed)."""
        return failure(
            exc.status_code, exc.status_code, str(exc.detail), headers=exc.headers
        )
