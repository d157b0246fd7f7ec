"""
===============================================================================
USE CASE: List / Search Users
===============================================================================

Name:
    List Users Use Case

Business Goal:
    Feed the user table: everything, or what matches keyword/role/status.

Why (Context / Intent):
    - An empty spec is an explicit short-circuit to find_all(). It is not the
      same call as search() with wildcard predicates: each path owns its
      ordering.
    - Both orderings are created_at DESC for users today; the split keeps
      the contract identical to facilities, where they differ.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    ListUsersUseCase

Responsibilities:
    - Choose find_all() vs search(spec).
    - Never mutate storage.

Collaborators:
    - UserRepository: find_all() / search(spec)
    - domain.filtering: UserSearchSpec
===============================================================================
"""

from __future__ import annotations

from typing import Optional

from ....domain.filtering import UserSearchSpec
from ....domain.repositories import UserRepository
from .user_results import UserListResult


class ListUsersUseCase:
    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def execute(self, spec: Optional[UserSearchSpec] = None) -> UserListResult:
        if spec is None or spec.is_empty:
            return UserListResult(users=self._repository.find_all())
        return UserListResult(users=self._repository.search(spec))
