"""
===============================================================================
USE CASE: Delete User
===============================================================================

Hard delete. Users are the only master-data entity that can be removed;
facilities are deactivated instead.

Collaborators:
    - UserRepository: delete(id) (raises NotFoundError)
===============================================================================
"""

from __future__ import annotations

import logging
from uuid import UUID

from ....crosscutting.exceptions import NotFoundError
from ....domain.repositories import UserRepository
from ..results import not_found
from .user_results import USER_ENTITY, DeleteUserResult

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def execute(self, user_id: UUID) -> DeleteUserResult:
        try:
            self._repository.delete(user_id)
        except NotFoundError:
            return DeleteUserResult(deleted=False, error=not_found(USER_ENTITY, user_id))

        logger.info("user deleted", extra={"user_id": str(user_id)})
        return DeleteUserResult(deleted=True)
