"""
===============================================================================
USE CASES: Users (public exports)
===============================================================================
"""

# -----------------------------------------------------------------------------
# Use Cases
# -----------------------------------------------------------------------------
from .create_user import CreateUserUseCase
from .delete_user import DeleteUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .update_user import UpdateUserUseCase

# -----------------------------------------------------------------------------
# DTOs / Result models
# -----------------------------------------------------------------------------
from .user_results import DeleteUserResult, UserListResult, UserResult

__all__ = [
    # Use Cases
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    # DTOs / Result models
    "UserResult",
    "UserListResult",
    "DeleteUserResult",
]
