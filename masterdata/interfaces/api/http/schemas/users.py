"""
===============================================================================
CRC CARD — schemas/users.py
===============================================================================

Module:
    HTTP schemas for users

Responsibilities:
    - Request DTOs for create/update (raw form values, no business rules:
      those live in application.validation).
    - Response DTOs for single users and paginated lists.

Collaborators:
    - domain.entities.UserRole, UserStatus
    - schemas.common
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from .....crosscutting.pagination import PageInfo
from .....domain.entities import UserRole, UserStatus
from .common import BoolIn, PatchModel, TextIn


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class UserFieldsReq(PatchModel):
    email: TextIn = None
    name: TextIn = None
    name_kana: TextIn = None
    role: TextIn = None
    status: TextIn = None
    department: TextIn = None
    title: TextIn = None
    phone_number: TextIn = None
    image: TextIn = None
    note: TextIn = None
    mfa_enabled: BoolIn = None
    is_locked: BoolIn = None
    updated_by: TextIn = None


class CreateUserReq(UserFieldsReq):
    created_by: TextIn = None


class UpdateUserReq(UserFieldsReq):
    """Partial patch: omitted keys keep their value, null clears them."""


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class UserRes(BaseModel):
    id: UUID
    email: str
    name: str
    name_kana: str | None = None
    role: UserRole
    status: UserStatus
    department: str | None = None
    title: str | None = None
    phone_number: str | None = None
    image: str | None = None
    note: str | None = None
    mfa_enabled: bool
    is_locked: bool
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UsersPageRes(BaseModel):
    items: list[UserRes]
    page_info: PageInfo
