"""Error Handlers — translate every failure into the EmployeeApiError envelope.

Invariants:
    - Every error body comes from EmployeeApiError.to_response() (code, message,
      category, severity, timestamp)
    - RequestValidationError → EmployeeValidationError (400) with per-field details
    - Any other exception → InternalError (500), never leaks internal details

Design Decisions:
    - Foreign exceptions are converted to the domain hierarchy first, then rendered
      by one function: the three handlers differ only in logging
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from employee_api.core.errors import (
    EmployeeApiError, EmployeeValidationError, InternalError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(EmployeeApiError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def render_error(exc: EmployeeApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_domain_error(request: Request, exc: EmployeeApiError):
    logger.error(
        f"{type(exc).__name__}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return render_error(exc)


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    error = to_validation_error(exc)
    logger.warning(
        f"Validation error on {request.url.path}: {error.details}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    return render_error(error)


async def _handle_unexpected_error(request: Request, exc: Exception):
    error = InternalError()
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        extra={"error_code": error.code, "path": request.url.path},
        exc_info=exc,
    )
    return render_error(error)


def to_validation_error(exc: RequestValidationError) -> EmployeeValidationError:
    """Flatten Pydantic errors into field details on an EmployeeValidationError."""
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    first_field = details[0]["field"] if details else "body"
    return EmployeeValidationError(
        "Invalid request data", first_field, details=details,
    )
