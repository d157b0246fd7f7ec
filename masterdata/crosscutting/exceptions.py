"""
===============================================================================
MODULE: Typed backend exceptions (internal errors)
===============================================================================

Goal
----
Internal exceptions with:
- a stable error_code
- an error_id to correlate with logs
- a human message (never leaking secrets)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Component:
  MasterDataError + subclasses

Responsibilities:
  - Standardize internal errors later mapped to HTTP
  - Carry the named storage conditions (duplicate key, not found)
  - Generate error_id for tracing

Collaborators:
  - infrastructure/repositories (raise)
  - application/usecases (translate DuplicateKeyError / NotFoundError)
  - api/exception_handlers.py (maps the rest to problem+json)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class MasterDataError(Exception):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Class:
      MasterDataError

    Responsibilities:
      - Base for internal system errors
      - Provide error_code + error_id + message

    Collaborators:
      - api/exception_handlers.py
    ----------------------------------------------------------------------------
    """

    error_code: str = "MASTERDATA_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(MasterDataError):
    """DB errors (connection, query, timeout, pool)."""

    error_code: str = "DATABASE_ERROR"


class DuplicateKeyError(MasterDataError):
    """A unique key (user email, facility code) is already taken."""

    error_code: str = "DUPLICATE_KEY"

    def __init__(
        self,
        entity: str,
        field: str,
        value: object | None = None,
        original_error: Exception | None = None,
    ):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(
            f"{entity} {field} already exists",
            original_error=original_error,
        )


class NotFoundError(MasterDataError):
    """The target identifier does not exist."""

    error_code: str = "NOT_FOUND"

    def __init__(self, entity: str, identifier: object):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} '{identifier}' not found")
