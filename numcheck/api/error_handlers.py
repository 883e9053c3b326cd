"""Error Handlers: global exception handlers for the numcheck API.

Invariants:
    - Every error body is produced by NumCheckError.to_response(); no handler
      builds its own envelope
    - RequestValidationError → InvalidRequestError (400) with field-level details
    - Exception (catch-all) → InternalError (500), never leaks internal details
    - The record id from the path, when it parsed, is carried in the error context

Design Decisions:
    - Rejected stored numbers (4xx) log at warning, store and server failures at error
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from numcheck.core.errors import (
    ErrorContext, InternalError, InvalidRequestError, NumCheckError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(NumCheckError, numcheck_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


def _error_response(request: Request, exc: NumCheckError) -> JSONResponse:
    level = logging.WARNING if exc.http_status < 500 else logging.ERROR
    logger.log(
        level, "%s on %s: %s", exc.code, request.url.path, exc.message,
        extra={"error_code": exc.code, "record_id": exc.context.record_id},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _path_context(request: Request) -> ErrorContext:
    try:
        record_id = int(request.path_params["record_id"])
    except (KeyError, ValueError):
        record_id = None
    return ErrorContext(record_id=record_id)


async def numcheck_error_handler(request: Request, exc: NumCheckError):
    """Lookup, validation, and database failures raised below the route."""
    return _error_response(request, exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Path or query parameters that did not parse, e.g. a non-integer id."""
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return _error_response(
        request, InvalidRequestError(details, _path_context(request)),
    )


async def generic_error_handler(request: Request, exc: Exception):
    """Anything else, including a service wired without a store."""
    logger.error(
        "Unhandled %s on %s", type(exc).__name__, request.url.path,
        exc_info=exc,
    )
    return _error_response(request, InternalError(_path_context(request)))
