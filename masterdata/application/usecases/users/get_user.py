"""Use case: fetch one user by id (NOT_FOUND when missing)."""

from __future__ import annotations

from uuid import UUID

from ....domain.repositories import UserRepository
from ..results import not_found
from .user_results import USER_ENTITY, UserResult


class GetUserUseCase:
    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def execute(self, user_id: UUID) -> UserResult:
        user = self._repository.find_by_id(user_id)
        if user is None:
            return UserResult(error=not_found(USER_ENTITY, user_id))
        return UserResult(user=user)
