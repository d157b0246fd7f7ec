"""
===============================================================================
USE CASE: Update User
===============================================================================

Name:
    Update User Use Case

Business Goal:
    Apply a partial patch to an existing user.

Why (Context / Intent):
    - Absent fields keep their stored value, null/blank fields are cleared.
    - At least one field must be provided.
    - email is the identity of the account and cannot be patched.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    UpdateUserUseCase

Responsibilities:
    - Validate the patch (update mode).
    - Persist via UserRepository.update().
    - Translate NotFoundError into NOT_FOUND.

Collaborators:
    - application.validation: validate_user
    - UserRepository: update(id, changes) -> User
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Mapping
from uuid import UUID

from ....crosscutting.exceptions import NotFoundError
from ....domain.repositories import UserRepository
from ...normalization import Mode
from ...validation import validate_user
from ..results import not_found, validation_failed
from .user_results import USER_ENTITY, UserResult

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def execute(self, user_id: UUID, raw: Mapping[str, Any]) -> UserResult:
        validation = validate_user(raw, Mode.UPDATE)
        if not validation.ok:
            return UserResult(error=validation_failed(USER_ENTITY, validation.errors))

        try:
            user = self._repository.update(user_id, validation.values)
        except NotFoundError:
            return UserResult(error=not_found(USER_ENTITY, user_id))

        logger.info(
            "user updated",
            extra={"user_id": str(user_id), "fields": sorted(validation.changes)},
        )
        return UserResult(user=user)
