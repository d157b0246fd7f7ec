"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for users and facilities (ports).
- Keep application/domain independent from infrastructure (PostgreSQL, in-memory).
- Name the failure signals every implementation must raise.

Collaborators
- domain.entities: User, Facility
- domain.filtering: UserSearchSpec, FacilitySearchSpec
- crosscutting.exceptions: DuplicateKeyError, NotFoundError, DatabaseError
- infrastructure.repositories: postgres/*, in_memory/* implementations

Constraints
- Pure interfaces only: no side effects, no SQL.
- create() raises DuplicateKeyError on unique violations (email / code).
- update(), delete(), deactivate() raise NotFoundError for unknown ids and
  leave storage untouched.
- Any other storage failure surfaces as DatabaseError.

Notes
- update() receives already-validated changes: keys absent from the mapping
  keep their stored value, keys mapped to None are cleared.
- find_all() and search() have different default orderings on purpose; see
  the method docs.
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional, Protocol
from uuid import UUID

from .entities import Facility, User
from .filtering import FacilitySearchSpec, UserSearchSpec


class UserRepository(Protocol):
    """
    R: Interface for user persistence.
    """

    def find_all(self) -> List[User]:
        """R: Every user, newest first (created_at DESC)."""
        ...

    def find_by_id(self, user_id: UUID) -> Optional[User]:
        """R: One user or None."""
        ...

    def search(self, spec: UserSearchSpec) -> List[User]:
        """R: Users matching spec, newest first (created_at DESC)."""
        ...

    def create(self, data: Mapping[str, Any]) -> User:
        """R: Insert a user; id and timestamps are assigned here."""
        ...

    def update(self, user_id: UUID, changes: Mapping[str, Any]) -> User:
        """R: Apply a partial patch and refresh updated_at."""
        ...

    def delete(self, user_id: UUID) -> None:
        """R: Hard delete."""
        ...


class FacilityRepository(Protocol):
    """
    R: Interface for facility persistence.

    Facilities are never hard-deleted.
    """

    def find_all(self) -> List[Facility]:
        """R: Every facility ordered by display_order (NULLs last), then code."""
        ...

    def find_by_id(self, facility_id: UUID) -> Optional[Facility]:
        """R: One facility or None."""
        ...

    def search(self, spec: FacilitySearchSpec) -> List[Facility]:
        """R: Facilities matching spec ordered by code."""
        ...

    def create(self, data: Mapping[str, Any]) -> Facility:
        """R: Insert a facility; id and timestamps are assigned here."""
        ...

    def update(self, facility_id: UUID, changes: Mapping[str, Any]) -> Facility:
        """R: Apply a partial patch and refresh updated_at."""
        ...

    def deactivate(
        self, facility_id: UUID, end_date: Optional[datetime] = None
    ) -> Facility:
        """R: Force status=INACTIVE and set end_date (None clears it)."""
        ...
