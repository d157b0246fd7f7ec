"""
===============================================================================
CRC CARD — domain/entities.py
===============================================================================

Module:
    Domain entities (User, Facility) and their enumerations.

Responsibilities:
    - Define the master-data records handled by the console.
    - Keep enum values stable (they are persisted and exposed over HTTP).
    - Provide a small read-only helper (Facility.is_deactivated).

Collaborators:
    - domain.repositories: persist/retrieve these entities.
    - domain.filtering: matches entities against search specs.
    - application/usecases: create/consume these entities.
    - interfaces/api: serialize them into response DTOs.

Principles:
    - No DB / FastAPI dependencies.
    - Identity (id) and timestamps are assigned by storage, never by callers.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------


class UserRole(str, Enum):
    """Console role of a user."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    USER = "USER"


class UserStatus(str, Enum):
    """Account status."""

    ACTIVE = "ACTIVE"
    INVITED = "INVITED"
    DISABLED = "DISABLED"


@dataclass
class User:
    """
    Console user.

    Notes:
      - email is unique across all users (enforced by storage).
      - role/status default to USER/ACTIVE when omitted on create.
    """

    id: UUID
    email: str
    name: str
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    name_kana: Optional[str] = None
    department: Optional[str] = None
    title: Optional[str] = None
    phone_number: Optional[str] = None
    image: Optional[str] = None
    note: Optional[str] = None
    mfa_enabled: bool = False
    is_locked: bool = False
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Facility
# ---------------------------------------------------------------------------


class FacilityCategory(str, Enum):
    """Kind of facility."""

    HEAD = "HEAD"
    BRANCH = "BRANCH"
    WAREHOUSE = "WAREHOUSE"
    STORE = "STORE"
    OTHER = "OTHER"


class FacilityStatus(str, Enum):
    """Operational status of a facility."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    CLOSED = "CLOSED"


DEFAULT_FACILITY_COUNTRY = "JP"


@dataclass
class Facility:
    """
    Facility (head office, branch, warehouse, store...).

    Notes:
      - code is human-assigned and unique (enforced by storage).
      - Facilities are never hard-deleted: deactivate() in the repository
        forces status=INACTIVE and optionally sets end_date.
    """

    id: UUID
    code: str
    name: str
    category: FacilityCategory
    status: FacilityStatus
    name_kana: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    # Address
    country: str = DEFAULT_FACILITY_COUNTRY
    prefecture: Optional[str] = None
    city: Optional[str] = None
    address_line1: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    # Contact
    phone: Optional[str] = None
    email: Optional[str] = None
    contact_name: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None

    # Operations
    capacity: Optional[int] = None
    display_order: Optional[int] = None
    image_url: Optional[str] = None
    note: Optional[str] = None
    billing_code: Optional[str] = None
    is_integrated: bool = False
    synced_at: Optional[datetime] = None

    # Audit
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_deactivated(self) -> bool:
        """True once the facility was moved to INACTIVE."""
        return self.status == FacilityStatus.INACTIVE
