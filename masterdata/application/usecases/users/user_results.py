"""
===============================================================================
USE CASE RESULTS: Users
===============================================================================

Typed results returned by the user use cases. Exactly one of the payload
or error is meaningful: check `error` first.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ....domain.entities import User
from ..results import UseCaseError

USER_ENTITY = "User"
DUPLICATE_EMAIL_MESSAGE = "Email already exists."


@dataclass
class UserResult:
    user: Optional[User] = None
    error: Optional[UseCaseError] = None


@dataclass
class UserListResult:
    users: List[User]
    error: Optional[UseCaseError] = None


@dataclass
class DeleteUserResult:
    deleted: bool
    error: Optional[UseCaseError] = None
