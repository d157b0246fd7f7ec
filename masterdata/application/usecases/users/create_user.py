"""
===============================================================================
USE CASE: Create User
===============================================================================

Name:
    Create User Use Case

Business Goal:
    Register a console user from raw form input.

Why (Context / Intent):
    - Input is normalized and validated before storage is touched.
    - Email uniqueness belongs to storage (unique index); a conflict comes
      back as DuplicateKeyError and is reported as DUPLICATE_KEY.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateUserUseCase

Responsibilities:
    - Validate input (create mode) against USER_RULES.
    - Persist via UserRepository.create().
    - Translate DuplicateKeyError into a typed result.

Collaborators:
    - application.validation: validate_user
    - UserRepository: create(data) -> User
    - user_results: UserResult
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ....crosscutting.exceptions import DuplicateKeyError
from ....domain.repositories import UserRepository
from ...normalization import Mode
from ...validation import validate_user
from ..results import duplicate_key, validation_failed
from .user_results import DUPLICATE_EMAIL_MESSAGE, USER_ENTITY, UserResult

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Create a user (validation first, storage second)."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def execute(self, raw: Mapping[str, Any]) -> UserResult:
        # ---------------------------------------------------------------------
        # 1) Validate: a failure never reaches the repository.
        # ---------------------------------------------------------------------
        validation = validate_user(raw, Mode.CREATE)
        if not validation.ok:
            return UserResult(error=validation_failed(USER_ENTITY, validation.errors))

        # ---------------------------------------------------------------------
        # 2) Persist. Unique violations come back as DuplicateKeyError.
        # ---------------------------------------------------------------------
        try:
            user = self._repository.create(validation.values)
        except DuplicateKeyError as exc:
            return UserResult(
                error=duplicate_key(USER_ENTITY, exc.field, DUPLICATE_EMAIL_MESSAGE)
            )

        logger.info("user created", extra={"user_id": str(user.id)})
        return UserResult(user=user)
