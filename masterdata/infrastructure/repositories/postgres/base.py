"""
============================================================
CRC CARD — infrastructure/repositories/postgres/base.py
============================================================
Class: PostgresRepositoryBase

Responsibilities:
- Resolve the connection pool (injected or process-wide).
- Run parametrized statements with one error policy:
    * unique violations -> DuplicateKeyError (entity + field)
    * anything else     -> logged, re-raised as DatabaseError
- Build keyword predicates shared by the search queries.

Collaborators:
- psycopg / psycopg_pool
- crosscutting.exceptions: DatabaseError, DuplicateKeyError
- crosscutting.logger
============================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Sequence

from psycopg import errors as pg_errors
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError, DuplicateKeyError
from ....crosscutting.logger import logger


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the keyword is matched literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def keyword_condition(
    columns: Sequence[str], keyword: str
) -> tuple[str, list[object]]:
    """R: (col1 ILIKE %s OR col2 ILIKE %s ...) for a substring keyword."""
    pattern = f"%{escape_like(keyword)}%"
    sql = "(" + " OR ".join(f"{col} ILIKE %s" for col in columns) + ")"
    return sql, [pattern] * len(columns)


def to_db_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class PostgresRepositoryBase:
    """R: Shared plumbing for the raw-SQL repositories."""

    _ENTITY = ""
    # R: unique constraint name -> field reported to callers
    _UNIQUE_CONSTRAINTS: Mapping[str, str] = {}

    def __init__(self, pool: Optional[ConnectionPool] = None):
        # R: injectable pool for tests; production uses the global one.
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    def _duplicate_key(
        self, exc: pg_errors.UniqueViolation, data: Mapping[str, Any]
    ) -> DuplicateKeyError:
        constraint = getattr(exc.diag, "constraint_name", None) or ""
        field = self._UNIQUE_CONSTRAINTS.get(constraint)
        if field is None:
            # Single unique key per table today.
            field = next(iter(self._UNIQUE_CONSTRAINTS.values()))
        return DuplicateKeyError(
            self._ENTITY, field, data.get(field), original_error=exc
        )

    def _fetchall(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> list[tuple]:
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchall()
        except Exception as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}") from exc

    def _fetchone(
        self,
        *,
        query: str,
        params: Iterable[object],
        context_msg: str,
        extra: dict,
        data: Optional[Mapping[str, Any]] = None,
    ) -> tuple | None:
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchone()
        except pg_errors.UniqueViolation as exc:
            raise self._duplicate_key(exc, data or {}) from exc
        except Exception as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}") from exc
