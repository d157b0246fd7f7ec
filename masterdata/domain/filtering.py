"""
===============================================================================
CRC CARD — domain/filtering.py
===============================================================================

Module:
    Query filter engine (search specs + in-memory matching)

Responsibilities:
    - Define one search spec type per entity (UserSearchSpec, FacilitySearchSpec).
    - Define the match semantics once: keyword is a trimmed, case-insensitive
      substring over a fixed field set (any field may match); role/category and
      status are exact enum matches; all predicates are ANDed.
    - Filter in-memory collections with those semantics.

Collaborators:
    - domain.entities: User, Facility and their enums.
    - infrastructure.repositories.in_memory: search() delegates here.
    - infrastructure.repositories.postgres: pushes the same spec down to SQL
      (ILIKE + equality) and is checked against filter_*() in integration tests.

Rules:
    - A missing predicate means "no constraint", never "match only NULL".
    - The filter keeps input order; ordering is the caller's decision.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from .entities import (
    Facility,
    FacilityCategory,
    FacilityStatus,
    User,
    UserRole,
    UserStatus,
)

E = TypeVar("E")

USER_KEYWORD_FIELDS: Tuple[str, ...] = ("name", "email", "department")
FACILITY_KEYWORD_FIELDS: Tuple[str, ...] = (
    "name",
    "code",
    "prefecture",
    "city",
    "address_line1",
)


def normalize_keyword(keyword: Optional[str]) -> Optional[str]:
    """Trim the keyword; blank means "no keyword"."""
    if keyword is None:
        return None
    trimmed = keyword.strip()
    return trimmed or None


def _keyword_matches(entity: object, fields: Sequence[str], keyword: str) -> bool:
    needle = keyword.lower()
    for name in fields:
        value = getattr(entity, name, None)
        if value and needle in str(value).lower():
            return True
    return False


@dataclass(frozen=True)
class UserSearchSpec:
    """Filter for the user list (keyword over name/email/department)."""

    keyword: Optional[str] = None
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None

    KEYWORD_FIELDS = USER_KEYWORD_FIELDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "keyword", normalize_keyword(self.keyword))

    @property
    def is_empty(self) -> bool:
        return self.keyword is None and self.role is None and self.status is None

    def matches(self, user: User) -> bool:
        if self.role is not None and user.role != self.role:
            return False
        if self.status is not None and user.status != self.status:
            return False
        if self.keyword is not None and not _keyword_matches(
            user, self.KEYWORD_FIELDS, self.keyword
        ):
            return False
        return True


@dataclass(frozen=True)
class FacilitySearchSpec:
    """Filter for the facility list (keyword over name/code/address)."""

    keyword: Optional[str] = None
    category: Optional[FacilityCategory] = None
    status: Optional[FacilityStatus] = None

    KEYWORD_FIELDS = FACILITY_KEYWORD_FIELDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "keyword", normalize_keyword(self.keyword))

    @property
    def is_empty(self) -> bool:
        return (
            self.keyword is None and self.category is None and self.status is None
        )

    def matches(self, facility: Facility) -> bool:
        if self.category is not None and facility.category != self.category:
            return False
        if self.status is not None and facility.status != self.status:
            return False
        if self.keyword is not None and not _keyword_matches(
            facility, self.KEYWORD_FIELDS, self.keyword
        ):
            return False
        return True


def _filter(items: Iterable[E], predicate: Callable[[E], bool]) -> List[E]:
    return [item for item in items if predicate(item)]


def filter_users(users: Iterable[User], spec: UserSearchSpec) -> List[User]:
    """Return the users matching every predicate of spec (input order kept)."""
    return _filter(users, spec.matches)


def filter_facilities(
    facilities: Iterable[Facility], spec: FacilitySearchSpec
) -> List[Facility]:
    """Return the facilities matching every predicate of spec (input order kept)."""
    return _filter(facilities, spec.matches)
