"""
============================================================
CRC CARD — infrastructure/repositories/postgres/facility.py
============================================================
Class: PostgresFacilityRepository

Responsibilities:
- Facilities table access in PostgreSQL (raw, parametrized SQL).
- Push FacilitySearchSpec down to SQL with the same semantics as
  domain.filtering (ILIKE over name/code/prefecture/city/address_line1,
  exact category/status).
- Soft deactivate; there is no DELETE for facilities.
- Map uq_facilities_code violations to DuplicateKeyError.

Collaborators:
- domain.entities.Facility, FacilityCategory, FacilityStatus
- domain.filtering.FacilitySearchSpec
- postgres.base.PostgresRepositoryBase
- Table: facilities

Constraints / Notes:
- find_all(): display_order ASC NULLS LAST, code ASC
- search():   code ASC
- code ordering uses COLLATE "C" to match the in-memory repository.
============================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Mapping, Optional
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError, NotFoundError
from ....domain.entities import Facility, FacilityCategory, FacilityStatus
from ....domain.filtering import FacilitySearchSpec
from .base import PostgresRepositoryBase, keyword_condition, to_db_value

_COLUMNS: tuple[str, ...] = (
    "id",
    "code",
    "name",
    "name_kana",
    "category",
    "status",
    "start_date",
    "end_date",
    "country",
    "prefecture",
    "city",
    "address_line1",
    "postal_code",
    "latitude",
    "longitude",
    "phone",
    "email",
    "contact_name",
    "contact_phone",
    "contact_email",
    "capacity",
    "display_order",
    "image_url",
    "note",
    "billing_code",
    "is_integrated",
    "synced_at",
    "created_by",
    "updated_by",
    "created_at",
    "updated_at",
)

_WRITABLE_COLUMNS = frozenset(_COLUMNS) - {"id", "created_at", "updated_at"}


class PostgresFacilityRepository(PostgresRepositoryBase):
    """R: PostgreSQL implementation of FacilityRepository."""

    _ENTITY = "Facility"
    _UNIQUE_CONSTRAINTS = {"uq_facilities_code": "code"}

    _SELECT_COLUMNS = ", ".join(_COLUMNS)
    _ORDER_BY_LIST = 'ORDER BY display_order ASC NULLS LAST, code COLLATE "C" ASC'
    _ORDER_BY_SEARCH = 'ORDER BY code COLLATE "C" ASC'

    # =========================================================
    # Mapping
    # =========================================================
    @staticmethod
    def _row_to_facility(row: tuple) -> Facility:
        values = dict(zip(_COLUMNS, row))
        values["category"] = FacilityCategory(values["category"])
        values["status"] = FacilityStatus(values["status"])
        return Facility(**values)

    def _select(
        self, *, where_sql: str, params: list[object], order_by: str
    ) -> List[Facility]:
        rows = self._fetchall(
            query=f"""
                SELECT {self._SELECT_COLUMNS}
                FROM facilities
                {where_sql}
                {order_by}
            """,
            params=params,
            context_msg="PostgresFacilityRepository: Failed to select facilities",
            extra={"where_sql": where_sql},
        )
        return [self._row_to_facility(r) for r in rows]

    def _returning_one(
        self,
        *,
        query: str,
        params: list[object],
        context_msg: str,
        facility_id: UUID,
        data: Optional[Mapping[str, Any]] = None,
    ) -> Facility:
        row = self._fetchone(
            query=query,
            params=params,
            context_msg=context_msg,
            extra={"facility_id": str(facility_id)},
            data=data,
        )
        if row is None:
            raise NotFoundError(self._ENTITY, facility_id)
        return self._row_to_facility(row)

    # =========================================================
    # Reads
    # =========================================================
    def find_all(self) -> List[Facility]:
        return self._select(where_sql="", params=[], order_by=self._ORDER_BY_LIST)

    def find_by_id(self, facility_id: UUID) -> Optional[Facility]:
        row = self._fetchone(
            query=f"SELECT {self._SELECT_COLUMNS} FROM facilities WHERE id = %s",
            params=[facility_id],
            context_msg="PostgresFacilityRepository: Failed to get facility",
            extra={"facility_id": str(facility_id)},
        )
        return None if row is None else self._row_to_facility(row)

    def search(self, spec: FacilitySearchSpec) -> List[Facility]:
        conditions: list[str] = []
        params: list[object] = []

        if spec.keyword is not None:
            sql, keyword_params = keyword_condition(spec.KEYWORD_FIELDS, spec.keyword)
            conditions.append(sql)
            params.extend(keyword_params)
        if spec.category is not None:
            conditions.append("category = %s")
            params.append(spec.category.value)
        if spec.status is not None:
            conditions.append("status = %s")
            params.append(spec.status.value)

        where_sql = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        return self._select(
            where_sql=where_sql, params=params, order_by=self._ORDER_BY_SEARCH
        )

    # =========================================================
    # Writes
    # =========================================================
    def create(self, data: Mapping[str, Any]) -> Facility:
        columns = [c for c in data if c in _WRITABLE_COLUMNS]
        placeholders = ", ".join(["%s"] * len(columns))
        row = self._fetchone(
            query=f"""
                INSERT INTO facilities ({", ".join(columns)})
                VALUES ({placeholders})
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=[to_db_value(data[c]) for c in columns],
            context_msg="PostgresFacilityRepository: Failed to create facility",
            extra={"columns": columns},
            data=data,
        )
        if row is None:
            raise DatabaseError("PostgresFacilityRepository: INSERT returned no row")
        return self._row_to_facility(row)

    def update(self, facility_id: UUID, changes: Mapping[str, Any]) -> Facility:
        columns = [c for c in changes if c in _WRITABLE_COLUMNS]
        assignments = [f"{c} = %s" for c in columns] + ["updated_at = now()"]
        return self._returning_one(
            query=f"""
                UPDATE facilities
                SET {", ".join(assignments)}
                WHERE id = %s
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=[*(to_db_value(changes[c]) for c in columns), facility_id],
            context_msg="PostgresFacilityRepository: Failed to update facility",
            facility_id=facility_id,
            data=changes,
        )

    def deactivate(
        self, facility_id: UUID, end_date: Optional[datetime] = None
    ) -> Facility:
        return self._returning_one(
            query=f"""
                UPDATE facilities
                SET status = %s, end_date = %s, updated_at = now()
                WHERE id = %s
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=[FacilityStatus.INACTIVE.value, end_date, facility_id],
            context_msg="PostgresFacilityRepository: Failed to deactivate facility",
            facility_id=facility_id,
        )
