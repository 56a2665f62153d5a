"""
Error Handler Middleware

Turns every failure into the common error body
{"status": ..., "message": ..., "timestamp": ...}:

- DomainError, request validation errors and routing errors (404, 405),
  through exception handlers registered on the app
  (register_exception_handlers)
- Anything else, through ErrorHandlerMiddleware, which logs it and
  answers 500
"""

from typing import Callable
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.exceptions import DomainError, resolve_error
from app.core.validation import validation_error_from
from app.schemas.error import ErrorResponse
from app.services.error_logging import error_logger


def error_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    """Build a JSON error response in the common error body shape."""
    body = ErrorResponse(status=status_code, message=message)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(),
        headers=headers
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code, message = resolve_error(exc)
    error_logger.log_warning(
        f"{request.method} {request.url.path} -> {status_code}: {message}"
    )
    return error_response(status_code, message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Aggregate every failing field into a single ValidationFailedError
    return await domain_error_handler(request, validation_error_from(exc.errors()))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown routes, wrong methods: same body shape as domain errors
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain, validation and HTTP error handlers to the app."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware that catches all unhandled exceptions and logs them.

    Unhandled means infrastructure-level: a lost database connection, a
    bug. The client gets a generic 500 and the id of the log entry in
    the X-Error-Id header.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
            return response

        except Exception as exc:
            # Unhandled exceptions - log as critical
            error_id = error_logger.log_error(
                exc,
                request=request,
                severity="critical",
                context={"unhandled": True}
            )

            status_code, message = resolve_error(exc)
            return error_response(
                status_code,
                message,
                headers={"X-Error-Id": str(error_id)}
            )
