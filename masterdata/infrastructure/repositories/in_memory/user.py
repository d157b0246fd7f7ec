"""
============================================================
CRC CARD — infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Keep users in memory (tests / local dev / STORAGE_BACKEND=memory).
  - Enforce the same unique email rule as the uq_users_email index.
  - Delegate search matching to domain.filtering (the reference semantics
    the PostgreSQL repository is checked against).
  - Keep ordering aligned with Postgres:
      ORDER BY created_at DESC, email ASC

Collaborators:
  - domain.entities.User
  - domain.filtering.filter_users / UserSearchSpec
  - crosscutting.exceptions: DuplicateKeyError, NotFoundError

Constraints / Notes:
  - Thread-safe: every read/write happens under a Lock.
  - Updates build a new instance instead of mutating the stored one.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, Iterable, List, Mapping, Optional
from uuid import UUID, uuid4

from ....crosscutting.exceptions import DuplicateKeyError, NotFoundError
from ....domain.entities import User
from ....domain.filtering import UserSearchSpec, filter_users
from ....domain.repositories import UserRepository

_ENTITY = "User"
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class InMemoryUserRepository(UserRepository):
    """Thread-safe in-memory user table (UUID -> User)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[UUID, User] = {}

    # =========================================================
    # Internal helpers
    # =========================================================
    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def _sorted(items: Iterable[User]) -> List[User]:
        """R: created_at DESC, email ASC (new list, input untouched)."""
        by_email = sorted(items, key=lambda u: u.email)
        return sorted(by_email, key=lambda u: u.created_at or _EPOCH, reverse=True)

    def _email_taken(self, email: str, *, exclude: Optional[UUID] = None) -> bool:
        return any(
            u.email == email and u.id != exclude for u in self._users.values()
        )

    # =========================================================
    # Reads
    # =========================================================
    def find_all(self) -> List[User]:
        with self._lock:
            values = list(self._users.values())
        return self._sorted(values)

    def find_by_id(self, user_id: UUID) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def search(self, spec: UserSearchSpec) -> List[User]:
        with self._lock:
            values = list(self._users.values())
        return self._sorted(filter_users(values, spec))

    # =========================================================
    # Writes
    # =========================================================
    def create(self, data: Mapping[str, Any]) -> User:
        now = self._now()
        with self._lock:
            if self._email_taken(data["email"]):
                raise DuplicateKeyError(_ENTITY, "email", data["email"])
            user = User(id=uuid4(), created_at=now, updated_at=now, **data)
            self._users[user.id] = user
        return user

    def update(self, user_id: UUID, changes: Mapping[str, Any]) -> User:
        with self._lock:
            existing = self._users.get(user_id)
            if existing is None:
                raise NotFoundError(_ENTITY, user_id)
            updated = replace(existing, **changes, updated_at=self._now())
            self._users[user_id] = updated
        return updated

    def delete(self, user_id: UUID) -> None:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise NotFoundError(_ENTITY, user_id)
