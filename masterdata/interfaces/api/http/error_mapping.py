"""
===============================================================================
CRC CARD — error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsibilities:
  - Translate use-case error codes into RFC 7807 HTTP exceptions.
  - Keep the mapping in one place so routers stay thin.
  - Keep the application layer free of HTTP.

Rules:
  - VALIDATION_FAILED -> 422 with one {"field", "msg"} entry per field error
  - DUPLICATE_KEY     -> 409 with the conflicting field
  - NOT_FOUND         -> 404

Collaborators:
  - application.usecases.results (UseCaseError, UseCaseErrorCode)
  - crosscutting.error_responses (validation_error, conflict, not_found)
===============================================================================
"""

from __future__ import annotations

from typing import NoReturn

from ....application.usecases.results import UseCaseError, UseCaseErrorCode
from ....crosscutting.error_responses import conflict, not_found, validation_error


def raise_use_case_error(error: UseCaseError) -> NoReturn:
    """Raise the AppHTTPException matching a use-case error."""
    if error.code == UseCaseErrorCode.VALIDATION_FAILED:
        raise validation_error(
            error.message, [fe.to_dict() for fe in error.field_errors]
        )
    if error.code == UseCaseErrorCode.DUPLICATE_KEY:
        raise conflict(error.message, [{"field": error.field, "msg": error.message}])
    if error.code == UseCaseErrorCode.NOT_FOUND:
        raise not_found(error.entity or "Resource", error.identifier or "unknown")

    # Unknown code: treat as a client error rather than a 500.
    raise validation_error(error.message)
