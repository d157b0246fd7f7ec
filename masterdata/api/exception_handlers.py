"""
===============================================================================
CRC CARD — masterdata/api/exception_handlers.py (centralized exception handling)
===============================================================================

Responsibilities:
  - Translate application exceptions into RFC 7807 HTTP responses.
  - Log errors with request_id + error_id.
  - Never leak internals for uncontrolled errors in production.

Patterns:
  - Exception mapping (presentation layer).
  - Fail-safe: any untyped exception -> INTERNAL_ERROR (logged with stack).

Collaborators:
  - crosscutting.error_responses: AppHTTPException, ErrorCode, app_exception_handler
  - crosscutting.exceptions: MasterDataError and subclasses
  - crosscutting.config.get_settings (detail level)
===============================================================================
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
)
from ..crosscutting.exceptions import (
    DatabaseError,
    DuplicateKeyError,
    MasterDataError,
    NotFoundError,
)
from ..crosscutting.logger import logger


async def _handle_service_error(
    request: Request,
    *,
    exc: MasterDataError,
    code: ErrorCode,
    status_code: int,
) -> JSONResponse:
    """Shared path for typed internal errors."""
    logger.error(
        "service error",
        extra={
            "code": code.value,
            "error_id": exc.error_id,
            "error_message": exc.message,
        },
    )

    app_exc = AppHTTPException(
        status_code=status_code,
        code=code,
        detail=exc.message,
        errors=[{"error_id": exc.error_id}],
    )
    return await app_exception_handler(request, app_exc)


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    return await _handle_service_error(
        request, exc=exc, code=ErrorCode.DATABASE_ERROR, status_code=503
    )


async def duplicate_key_handler(
    request: Request, exc: DuplicateKeyError
) -> JSONResponse:
    # Normally translated by the use cases; this covers direct repository use.
    app_exc = AppHTTPException(
        status_code=409,
        code=ErrorCode.CONFLICT,
        detail=exc.message,
        errors=[{"field": exc.field}],
    )
    return await app_exception_handler(request, app_exc)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    app_exc = AppHTTPException(
        status_code=404, code=ErrorCode.NOT_FOUND, detail=exc.message
    )
    return await app_exception_handler(request, app_exc)


async def masterdata_error_handler(
    request: Request, exc: MasterDataError
) -> JSONResponse:
    return await _handle_service_error(
        request, exc=exc, code=ErrorCode.INTERNAL_ERROR, status_code=500
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies / query params (FastAPI parsing) as problem+json."""
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]) or "_root",
            "msg": err.get("msg", "invalid value"),
        }
        for err in exc.errors()
    ]
    app_exc = AppHTTPException(
        status_code=422,
        code=ErrorCode.VALIDATION_ERROR,
        detail="Request validation failed.",
        errors=errors,
    )
    return await app_exception_handler(request, app_exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Fallback for untyped exceptions.

    - Full log with stack trace.
    - Generic response in production.
    """
    logger.error("unhandled exception", exc_info=exc, extra={"error": str(exc)})

    detail = "Internal error." if get_settings().is_production() else str(exc)

    app_exc = AppHTTPException(
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=detail,
    )
    return await app_exception_handler(request, app_exc)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register handlers on the FastAPI app.

    Starlette resolves handlers by walking the exception MRO, so subclasses
    (DatabaseError, DuplicateKeyError, NotFoundError) win over
    MasterDataError regardless of registration order.
    """
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(DuplicateKeyError, duplicate_key_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(MasterDataError, masterdata_error_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
