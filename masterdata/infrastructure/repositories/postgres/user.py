"""
============================================================
CRC CARD — infrastructure/repositories/postgres/user.py
============================================================
Class: PostgresUserRepository

Responsibilities:
- Users table access in PostgreSQL (raw, parametrized SQL).
- Push UserSearchSpec down to SQL with the same semantics as
  domain.filtering (ILIKE over name/email/department, exact role/status).
- Map uq_users_email violations to DuplicateKeyError and missing rows to
  NotFoundError.

Collaborators:
- domain.entities.User, UserRole, UserStatus
- domain.filtering.UserSearchSpec
- postgres.base.PostgresRepositoryBase
- Table: users

Constraints / Notes:
- Column names in INSERT/UPDATE come from _WRITABLE_COLUMNS only.
- Ordering: created_at DESC, email ASC (COLLATE "C" so it matches the
  in-memory repository byte for byte).
============================================================
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError, NotFoundError
from ....domain.entities import User, UserRole, UserStatus
from ....domain.filtering import UserSearchSpec
from .base import PostgresRepositoryBase, keyword_condition, to_db_value

_COLUMNS: tuple[str, ...] = (
    "id",
    "email",
    "name",
    "name_kana",
    "role",
    "status",
    "department",
    "title",
    "phone_number",
    "image",
    "note",
    "mfa_enabled",
    "is_locked",
    "created_by",
    "updated_by",
    "created_at",
    "updated_at",
)

_WRITABLE_COLUMNS = frozenset(_COLUMNS) - {"id", "created_at", "updated_at"}


class PostgresUserRepository(PostgresRepositoryBase):
    """R: PostgreSQL implementation of UserRepository."""

    _ENTITY = "User"
    _UNIQUE_CONSTRAINTS = {"uq_users_email": "email"}

    _SELECT_COLUMNS = ", ".join(_COLUMNS)
    _ORDER_BY = 'ORDER BY created_at DESC, email COLLATE "C" ASC'

    # =========================================================
    # Mapping
    # =========================================================
    @staticmethod
    def _row_to_user(row: tuple) -> User:
        values = dict(zip(_COLUMNS, row))
        values["role"] = UserRole(values["role"])
        values["status"] = UserStatus(values["status"])
        return User(**values)

    def _select(self, *, where_sql: str, params: list[object]) -> List[User]:
        """where_sql is "" or "WHERE ..." built inside this class only."""
        rows = self._fetchall(
            query=f"""
                SELECT {self._SELECT_COLUMNS}
                FROM users
                {where_sql}
                {self._ORDER_BY}
            """,
            params=params,
            context_msg="PostgresUserRepository: Failed to select users",
            extra={"where_sql": where_sql},
        )
        return [self._row_to_user(r) for r in rows]

    # =========================================================
    # Reads
    # =========================================================
    def find_all(self) -> List[User]:
        return self._select(where_sql="", params=[])

    def find_by_id(self, user_id: UUID) -> Optional[User]:
        row = self._fetchone(
            query=f"SELECT {self._SELECT_COLUMNS} FROM users WHERE id = %s",
            params=[user_id],
            context_msg="PostgresUserRepository: Failed to get user",
            extra={"user_id": str(user_id)},
        )
        return None if row is None else self._row_to_user(row)

    def search(self, spec: UserSearchSpec) -> List[User]:
        conditions: list[str] = []
        params: list[object] = []

        if spec.keyword is not None:
            sql, keyword_params = keyword_condition(spec.KEYWORD_FIELDS, spec.keyword)
            conditions.append(sql)
            params.extend(keyword_params)
        if spec.role is not None:
            conditions.append("role = %s")
            params.append(spec.role.value)
        if spec.status is not None:
            conditions.append("status = %s")
            params.append(spec.status.value)

        where_sql = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        return self._select(where_sql=where_sql, params=params)

    # =========================================================
    # Writes
    # =========================================================
    def create(self, data: Mapping[str, Any]) -> User:
        columns = [c for c in data if c in _WRITABLE_COLUMNS]
        placeholders = ", ".join(["%s"] * len(columns))
        row = self._fetchone(
            query=f"""
                INSERT INTO users ({", ".join(columns)})
                VALUES ({placeholders})
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=[to_db_value(data[c]) for c in columns],
            context_msg="PostgresUserRepository: Failed to create user",
            extra={"columns": columns},
            data=data,
        )
        if row is None:
            raise DatabaseError("PostgresUserRepository: INSERT returned no row")
        return self._row_to_user(row)

    def update(self, user_id: UUID, changes: Mapping[str, Any]) -> User:
        columns = [c for c in changes if c in _WRITABLE_COLUMNS]
        assignments = [f"{c} = %s" for c in columns] + ["updated_at = now()"]
        row = self._fetchone(
            query=f"""
                UPDATE users
                SET {", ".join(assignments)}
                WHERE id = %s
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=[*(to_db_value(changes[c]) for c in columns), user_id],
            context_msg="PostgresUserRepository: Failed to update user",
            extra={"user_id": str(user_id), "columns": columns},
            data=changes,
        )
        if row is None:
            raise NotFoundError(self._ENTITY, user_id)
        return self._row_to_user(row)

    def delete(self, user_id: UUID) -> None:
        row = self._fetchone(
            query="DELETE FROM users WHERE id = %s RETURNING id",
            params=[user_id],
            context_msg="PostgresUserRepository: Failed to delete user",
            extra={"user_id": str(user_id)},
        )
        if row is None:
            raise NotFoundError(self._ENTITY, user_id)
