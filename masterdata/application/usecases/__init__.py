"""
Use Cases Layer (Business Operations)

This package exposes entry points for business logic, organized by entity.

Structure
---------
usecases/
├── results.py      # shared error model (VALIDATION_FAILED, DUPLICATE_KEY, NOT_FOUND)
├── users/          # create, update, delete, get, list
└── facilities/     # create, update, deactivate, get, list

Usage
-----
    from masterdata.application.usecases.users import CreateUserUseCase
    from masterdata.application.usecases import ListFacilitiesUseCase
"""

# Facilities
from .facilities import (
    CreateFacilityUseCase,
    DeactivateFacilityUseCase,
    FacilityListResult,
    FacilityResult,
    GetFacilityUseCase,
    ListFacilitiesUseCase,
    UpdateFacilityUseCase,
)

# Shared
from .results import UseCaseError, UseCaseErrorCode

# Users
from .users import (
    CreateUserUseCase,
    DeleteUserResult,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UserListResult,
    UserResult,
)

__all__ = [
    # Shared
    "UseCaseError",
    "UseCaseErrorCode",
    # Users
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UserResult",
    "UserListResult",
    "DeleteUserResult",
    # Facilities
    "CreateFacilityUseCase",
    "UpdateFacilityUseCase",
    "DeactivateFacilityUseCase",
    "GetFacilityUseCase",
    "ListFacilitiesUseCase",
    "FacilityResult",
    "FacilityListResult",
]
