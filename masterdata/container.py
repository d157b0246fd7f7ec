"""
===============================================================================
CRC CARD — masterdata/container.py (Composition Root / manual DI)
===============================================================================

Responsibilities:
  - Compose repositories and use cases following DIP.
  - Expose factories for FastAPI (Depends).
  - Keep singletons cached with lru_cache.
  - Centralize the runtime storage decision based on Settings.

Collaborators:
  - masterdata.crosscutting.config.get_settings
  - masterdata.domain.repositories (ports)
  - masterdata.infrastructure.repositories (implementations)
  - masterdata.application.usecases (use cases)

Notes:
  - No business logic here.
  - No FastAPI import here (factories only).
  - test/testing/ci environments and STORAGE_BACKEND=memory get in-memory
    repositories; everything else gets PostgreSQL.
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    CreateFacilityUseCase,
    CreateUserUseCase,
    DeactivateFacilityUseCase,
    DeleteUserUseCase,
    GetFacilityUseCase,
    GetUserUseCase,
    ListFacilitiesUseCase,
    ListUsersUseCase,
    UpdateFacilityUseCase,
    UpdateUserUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import FacilityRepository, UserRepository
from .infrastructure.repositories import (
    InMemoryFacilityRepository,
    InMemoryUserRepository,
    PostgresFacilityRepository,
    PostgresUserRepository,
)


def uses_in_memory_storage() -> bool:
    return get_settings().uses_in_memory_storage()


# =============================================================================
# Repositories (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    """User repository (in-memory in test; Postgres at runtime)."""
    if uses_in_memory_storage():
        return InMemoryUserRepository()
    return PostgresUserRepository()


@lru_cache(maxsize=1)
def get_facility_repository() -> FacilityRepository:
    """Facility repository (in-memory in test; Postgres at runtime)."""
    if uses_in_memory_storage():
        return InMemoryFacilityRepository()
    return PostgresFacilityRepository()


# =============================================================================
# Use cases: users
# =============================================================================


def get_create_user_use_case() -> CreateUserUseCase:
    return CreateUserUseCase(get_user_repository())


def get_update_user_use_case() -> UpdateUserUseCase:
    return UpdateUserUseCase(get_user_repository())


def get_delete_user_use_case() -> DeleteUserUseCase:
    return DeleteUserUseCase(get_user_repository())


def get_get_user_use_case() -> GetUserUseCase:
    return GetUserUseCase(get_user_repository())


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(get_user_repository())


# =============================================================================
# Use cases: facilities
# =============================================================================


def get_create_facility_use_case() -> CreateFacilityUseCase:
    return CreateFacilityUseCase(get_facility_repository())


def get_update_facility_use_case() -> UpdateFacilityUseCase:
    return UpdateFacilityUseCase(get_facility_repository())


def get_deactivate_facility_use_case() -> DeactivateFacilityUseCase:
    return DeactivateFacilityUseCase(get_facility_repository())


def get_get_facility_use_case() -> GetFacilityUseCase:
    return GetFacilityUseCase(get_facility_repository())


def get_list_facilities_use_case() -> ListFacilitiesUseCase:
    return ListFacilitiesUseCase(get_facility_repository())


def reset_container() -> None:
    """Drop cached singletons (tests)."""
    get_user_repository.cache_clear()
    get_facility_repository.cache_clear()
