"""
===============================================================================
USE CASE RESULTS: shared error model
===============================================================================

Name:
    Use case error model

Responsibilities:
    - Give every use case the same named failure conditions:
        * VALIDATION_FAILED (field errors, storage never touched)
        * DUPLICATE_KEY     (entity + conflicting field)
        * NOT_FOUND         (entity + identifier)
    - Keep HTTP concerns out of the application layer.

Collaborators:
    - usecases/users, usecases/facilities: build these errors
    - interfaces/api/http/error_mapping: maps them to RFC 7807 responses
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from enum import Enum
from typing import List, Optional

from ...domain.value_objects import FieldError


class UseCaseErrorCode(str, Enum):
    VALIDATION_FAILED = "VALIDATION_FAILED"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class UseCaseError:
    code: UseCaseErrorCode
    message: str
    entity: Optional[str] = None
    field: Optional[str] = None
    identifier: Optional[str] = None
    field_errors: List[FieldError] = dc_field(default_factory=list)


def validation_failed(entity: str, errors: List[FieldError]) -> UseCaseError:
    return UseCaseError(
        code=UseCaseErrorCode.VALIDATION_FAILED,
        message=f"Invalid {entity.lower()} data.",
        entity=entity,
        field_errors=list(errors),
    )


def duplicate_key(entity: str, field_name: str, message: str) -> UseCaseError:
    return UseCaseError(
        code=UseCaseErrorCode.DUPLICATE_KEY,
        message=message,
        entity=entity,
        field=field_name,
    )


def not_found(entity: str, identifier: object) -> UseCaseError:
    return UseCaseError(
        code=UseCaseErrorCode.NOT_FOUND,
        message=f"{entity} not found.",
        entity=entity,
        identifier=str(identifier),
    )
