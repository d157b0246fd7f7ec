"""
===============================================================================
CRC CARD — domain/__init__.py
===============================================================================

Module:
    Domain layer exports (public surface of the domain)

Responsibilities:
    - Centralize exports for clean imports from application/interfaces.
    - Keep the domain surface stable.

Collaborators:
    - domain.entities: User, Facility and enums
    - domain.filtering: search specs and the in-memory filter engine
    - domain.repositories: persistence ports
    - domain.value_objects: tri-state field changes, field errors

Rules:
    - Only domain contracts/entities are re-exported.
    - Never import infrastructure here.
===============================================================================
"""

from .entities import (
    Facility,
    FacilityCategory,
    FacilityStatus,
    User,
    UserRole,
    UserStatus,
)
from .filtering import (
    FacilitySearchSpec,
    UserSearchSpec,
    filter_facilities,
    filter_users,
)
from .repositories import FacilityRepository, UserRepository
from .value_objects import CLEAR, OMIT, Clear, FieldChange, FieldError, Omit, Set

__all__ = [
    # Entities
    "User",
    "UserRole",
    "UserStatus",
    "Facility",
    "FacilityCategory",
    "FacilityStatus",
    # Filtering
    "UserSearchSpec",
    "FacilitySearchSpec",
    "filter_users",
    "filter_facilities",
    # Repository Interfaces (Ports)
    "UserRepository",
    "FacilityRepository",
    # Value Objects
    "FieldChange",
    "Omit",
    "Clear",
    "Set",
    "OMIT",
    "CLEAR",
    "FieldError",
]
