"""
============================================================
CRC CARD — infrastructure/repositories/in_memory/facility.py
============================================================
Class: InMemoryFacilityRepository

Responsibilities:
  - Keep facilities in memory (tests / local dev / STORAGE_BACKEND=memory).
  - Enforce the unique code rule of the uq_facilities_code index.
  - Soft deactivate (status INACTIVE + end_date), never delete.
  - Keep both orderings aligned with Postgres:
      find_all(): ORDER BY display_order ASC NULLS LAST, code ASC
      search():   ORDER BY code ASC

Collaborators:
  - domain.entities.Facility, FacilityStatus
  - domain.filtering.filter_facilities / FacilitySearchSpec
  - crosscutting.exceptions: DuplicateKeyError, NotFoundError
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Mapping, Optional
from uuid import UUID, uuid4

from ....crosscutting.exceptions import DuplicateKeyError, NotFoundError
from ....domain.entities import Facility, FacilityStatus
from ....domain.filtering import FacilitySearchSpec, filter_facilities
from ....domain.repositories import FacilityRepository

_ENTITY = "Facility"


class InMemoryFacilityRepository(FacilityRepository):
    """Thread-safe in-memory facility table (UUID -> Facility)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._facilities: Dict[UUID, Facility] = {}

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def _display_order_key(f: Facility) -> tuple:
        # NULLS LAST
        return (f.display_order is None, f.display_order or 0, f.code)

    def _snapshot(self) -> List[Facility]:
        with self._lock:
            return list(self._facilities.values())

    def _replace(self, facility_id: UUID, **fields: Any) -> Facility:
        with self._lock:
            existing = self._facilities.get(facility_id)
            if existing is None:
                raise NotFoundError(_ENTITY, facility_id)
            updated = replace(existing, **fields, updated_at=self._now())
            self._facilities[facility_id] = updated
        return updated

    # =========================================================
    # Reads
    # =========================================================
    def find_all(self) -> List[Facility]:
        return sorted(self._snapshot(), key=self._display_order_key)

    def find_by_id(self, facility_id: UUID) -> Optional[Facility]:
        with self._lock:
            return self._facilities.get(facility_id)

    def search(self, spec: FacilitySearchSpec) -> List[Facility]:
        matches = filter_facilities(self._snapshot(), spec)
        return sorted(matches, key=lambda f: f.code)

    # =========================================================
    # Writes
    # =========================================================
    def create(self, data: Mapping[str, Any]) -> Facility:
        now = self._now()
        with self._lock:
            code = data["code"]
            if any(f.code == code for f in self._facilities.values()):
                raise DuplicateKeyError(_ENTITY, "code", code)
            facility = Facility(id=uuid4(), created_at=now, updated_at=now, **data)
            self._facilities[facility.id] = facility
        return facility

    def update(self, facility_id: UUID, changes: Mapping[str, Any]) -> Facility:
        return self._replace(facility_id, **changes)

    def deactivate(
        self, facility_id: UUID, end_date: Optional[datetime] = None
    ) -> Facility:
        return self._replace(
            facility_id, status=FacilityStatus.INACTIVE, end_date=end_date
        )
